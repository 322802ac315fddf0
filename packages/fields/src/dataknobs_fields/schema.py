"""Schema-level validation across many named fields.

:class:`SchemaValidator` keeps a registry of fields by name and accumulates
the errors of every validation call until :meth:`SchemaValidator.reset`.
Fields can be registered at any time; a name with no registered field has
no constraints, so validating it always succeeds.

:class:`ModelValidator` adds a fluent way to declare fields in place:

    ```python
    model = ModelValidator("signup")
    model.string("email").required().email()
    model.int("age").gte(18).lte(120)

    model.check_string("email", "user@example.com")
    model.check_int("age", 15)
    model.is_valid()  # False
    print(model.errors())
    # Validation failed with 1 error(s):
    # age: must be greater than or equal to 18 (got: 15)
    ```

A validator is meant to be owned by one validation session at a time.
Reuse it for the next session by calling ``reset()``, which keeps the field
registrations.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from functools import wraps
from typing import Any, Generic, TypeVar

from dataknobs_common.exceptions import ConfigurationError

from .errors import ValidationError
from .fields import BaseField, FloatField, IntField, StringField

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseField)


class SchemaValidator:
    """Registry of named fields plus the errors collected so far."""

    def __init__(self, name: str = "schema"):
        """Initialize an empty schema.

        Args:
            name: Schema name, used in log messages
        """
        self.name = name
        self._string_fields: dict[str, StringField] = {}
        self._int_fields: dict[str, IntField] = {}
        self._float_fields: dict[str, FloatField] = {}
        self._errors = ValidationError()

    def _register(self, registry: dict[str, T], field: T, expected: type[T]) -> SchemaValidator:
        if not isinstance(field, expected):
            raise ConfigurationError(
                f"Expected {expected.__name__}, got {type(field).__name__}",
                context={"schema": self.name, "expected": expected.__name__},
            )
        if field.name in registry:
            logger.debug("Schema '%s': replacing field '%s'", self.name, field.name)
        else:
            logger.debug("Schema '%s': registering field '%s'", self.name, field.name)
        registry[field.name] = field
        return self

    def add_string_field(self, field: StringField) -> SchemaValidator:
        """Register a string field, replacing any previous one with its name.

        Returns:
            Self for chaining
        """
        return self._register(self._string_fields, field, StringField)

    def add_int_field(self, field: IntField) -> SchemaValidator:
        """Register an integer field, replacing any previous one with its name."""
        return self._register(self._int_fields, field, IntField)

    def add_float_field(self, field: FloatField) -> SchemaValidator:
        """Register a float field, replacing any previous one with its name."""
        return self._register(self._float_fields, field, FloatField)

    def _record(self, name: str, errors: ValidationError) -> bool:
        if not errors.has_errors():
            return True
        logger.debug(
            "Schema '%s': field '%s' produced %d error(s)", self.name, name, errors.count()
        )
        self._errors.extend(errors)
        return False

    def validate_string(self, name: str, value: str | None) -> bool:
        """Validate a string value against the field registered as ``name``.

        Args:
            name: Field name
            value: Candidate value

        Returns:
            True if this value passed (or no field has that name); any
            errors are added to the accumulated set
        """
        field = self._string_fields.get(name)
        if field is None:
            return True
        return self._record(name, field.validate(value))

    def validate_int(self, name: str, value: int | None = None, is_set: bool | None = None) -> bool:
        """Validate an integer value; see :meth:`validate_string`."""
        field = self._int_fields.get(name)
        if field is None:
            return True
        return self._record(name, field.validate(value, is_set))

    def validate_float(
        self, name: str, value: float | None = None, is_set: bool | None = None
    ) -> bool:
        """Validate a float value; see :meth:`validate_string`."""
        field = self._float_fields.get(name)
        if field is None:
            return True
        return self._record(name, field.validate(value, is_set))

    def validate(self, values: Mapping[str, Any]) -> bool:
        """Validate every registered field from a mapping of raw values.

        Fields are checked in registration order, strings first, then
        integers, then floats. A missing string is validated as ``""`` and a
        missing number as unset. Keys without a registered field are ignored.

        Args:
            values: Candidate values keyed by field name

        Returns:
            True if every registered field passed in this call
        """
        results = [self.validate_string(name, values.get(name)) for name in self._string_fields]
        results.extend(
            self.validate_int(name, values.get(name), name in values) for name in self._int_fields
        )
        results.extend(
            self.validate_float(name, values.get(name), name in values)
            for name in self._float_fields
        )
        return all(results)

    def is_valid(self) -> bool:
        """Return True if no call since the last reset has failed."""
        return not self._errors.has_errors()

    def errors(self) -> ValidationError:
        """Return a copy of the errors accumulated since the last reset.

        The copy belongs to the caller; changing it does not affect this
        validator.
        """
        return ValidationError(list(self._errors))

    def reset(self) -> None:
        """Clear the accumulated errors, keeping all registered fields."""
        self._errors.clear()

    def field_names(self) -> list[str]:
        return [*self._string_fields, *self._int_fields, *self._float_fields]

    def has_field(self, name: str) -> bool:
        return name in self._string_fields or name in self._int_fields or name in self._float_fields

    def get_field(self, name: str) -> BaseField | None:
        """Return the field registered as ``name``, or None."""
        for registry in (self._string_fields, self._int_fields, self._float_fields):
            if name in registry:
                return registry[name]
        return None


class FieldHandle(Generic[T]):
    """Mutable handle to a field registered with a :class:`ModelValidator`.

    Calling a builder method on the handle builds the new field, registers
    it in place of the old one and returns the handle, so a declaration can
    be chained right after ``model.string(...)``. Other attributes, such as
    ``validate``, are passed through to the current field.
    """

    def __init__(self, field: T, register: Callable[[T], Any]):
        self._field = field
        self._register = register
        register(field)

    @property
    def field(self) -> T:
        """The field as currently registered."""
        return self._field

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        attr = getattr(self._field, name)
        if not callable(attr):
            return attr

        @wraps(attr)
        def call(*args: Any, **kwargs: Any) -> Any:
            result = attr(*args, **kwargs)
            if isinstance(result, type(self._field)):
                self._field = result
                self._register(result)
                return self
            return result

        return call

    def __repr__(self) -> str:
        return f"FieldHandle({self._field!r})"


class ModelValidator(SchemaValidator):
    """Schema validator with in-place field declaration."""

    def string(self, name: str) -> FieldHandle[StringField]:
        """Declare a string field and return a handle for chaining constraints."""
        return FieldHandle(StringField(name), self.add_string_field)

    def int(self, name: str) -> FieldHandle[IntField]:
        """Declare an integer field and return a handle for chaining constraints."""
        return FieldHandle(IntField(name), self.add_int_field)

    def float(self, name: str) -> FieldHandle[FloatField]:
        """Declare a float field and return a handle for chaining constraints."""
        return FieldHandle(FloatField(name), self.add_float_field)

    def check_string(self, name: str, value: str | None) -> bool:
        return self.validate_string(name, value)

    def check_int(self, name: str, value: int | None = None, is_set: bool | None = None) -> bool:
        return self.validate_int(name, value, is_set)

    def check_float(
        self, name: str, value: float | None = None, is_set: bool | None = None
    ) -> bool:
        return self.validate_float(name, value, is_set)


__all__ = [
    "FieldHandle",
    "ModelValidator",
    "SchemaValidator",
]
