"""Declarative field constraints and schema validation.

This package checks typed values against per-field constraints and reports
every violation, in detection order, rather than stopping at the first one:

- **Errors**: ``FieldError`` and the ordered ``ValidationError`` report
- **Checks**: atomic ``check_*`` validators and their raising ``assert_*`` twins
- **Fields**: immutable ``StringField``, ``IntField`` and ``FloatField`` builders
- **Schema**: ``SchemaValidator`` and ``ModelValidator`` for whole forms

Example:
    ```python
    from dataknobs_fields import SchemaValidator, StringField

    schema = SchemaValidator("signup")
    schema.add_string_field(StringField("email").required().email())

    if not schema.validate({"email": "not-an-email"}):
        print(schema.errors())
    ```
"""

from dataknobs_fields.checks import (
    CHECKS,
    assert_alpha,
    assert_alphanumeric,
    assert_email,
    assert_gt,
    assert_gte,
    assert_lt,
    assert_lte,
    assert_max_length,
    assert_min_length,
    assert_numeric,
    assert_one_of,
    assert_required,
    assert_url,
    check_alpha,
    check_alphanumeric,
    check_email,
    check_gt,
    check_gte,
    check_lt,
    check_lte,
    check_max_length,
    check_min_length,
    check_numeric,
    check_one_of,
    check_required,
    check_url,
)
from dataknobs_fields.errors import (
    NO_ERRORS_MESSAGE,
    FieldError,
    FieldValidationError,
    ValidationError,
)
from dataknobs_fields.fields import FloatField, IntField, StringField
from dataknobs_fields.schema import FieldHandle, ModelValidator, SchemaValidator

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Errors
    "FieldError",
    "ValidationError",
    "FieldValidationError",
    "NO_ERRORS_MESSAGE",
    # Fields
    "StringField",
    "IntField",
    "FloatField",
    # Schema
    "SchemaValidator",
    "ModelValidator",
    "FieldHandle",
    # Checks
    "CHECKS",
    "check_required",
    "check_min_length",
    "check_max_length",
    "check_gt",
    "check_gte",
    "check_lt",
    "check_lte",
    "check_email",
    "check_url",
    "check_alpha",
    "check_alphanumeric",
    "check_numeric",
    "check_one_of",
    "assert_required",
    "assert_min_length",
    "assert_max_length",
    "assert_gt",
    "assert_gte",
    "assert_lt",
    "assert_lte",
    "assert_email",
    "assert_url",
    "assert_alpha",
    "assert_alphanumeric",
    "assert_numeric",
    "assert_one_of",
]
