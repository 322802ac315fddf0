"""Error model for field validation.

Validation failures are ordinary data in this package. A check that fails
produces a :class:`FieldError`, and a :class:`ValidationError` collects them
in the order they were detected so a whole form can be reported at once.

For callers that prefer fail-fast control flow, :class:`FieldValidationError`
wraps a single :class:`FieldError` as an exception in the common dataknobs
exception hierarchy.

Example:
    ```python
    errors = ValidationError()
    errors.add("email", "must be a valid email address", "not-an-email")
    print(errors)
    # Validation failed with 1 error(s):
    # email: must be a valid email address (got: not-an-email)
    ```
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from dataknobs_common.exceptions import ValidationError as BaseValidationError

NO_ERRORS_MESSAGE = "No validation errors"


@dataclass(frozen=True)
class FieldError:
    """A single constraint violation on a named field.

    Attributes:
        field: Name of the field that failed
        message: Human-readable description of the violation
        value: Echo of the offending value, empty when not applicable
    """

    field: str
    message: str
    value: str = ""

    def __str__(self) -> str:
        if self.value:
            return f"{self.field}: {self.message} (got: {self.value})"
        return f"{self.field}: {self.message}"

    def to_dict(self) -> dict[str, str]:
        """Convert to a plain dictionary, e.g. for an API error response."""
        return {"field": self.field, "message": self.message, "value": self.value}


class ValidationError:
    """Ordered, append-only collection of field errors.

    Errors keep detection order and are never deduplicated: a field that
    fails two checks contributes two entries. Despite its name this is a
    result container, not an exception; see :class:`FieldValidationError`
    for the raising counterpart.
    """

    def __init__(self, errors: list[FieldError] | None = None):
        """Initialize the error set.

        Args:
            errors: Optional initial errors, copied into the set
        """
        self._errors: list[FieldError] = list(errors) if errors else []

    def add(self, field: str, message: str, value: str = "") -> ValidationError:
        """Append a new error built from its parts (fluent API).

        Args:
            field: Name of the failing field
            message: Violation description
            value: Optional echo of the offending value

        Returns:
            Self for chaining
        """
        self._errors.append(FieldError(field, message, value))
        return self

    def add_error(self, error: FieldError) -> ValidationError:
        """Append an existing error (fluent API)."""
        self._errors.append(error)
        return self

    def extend(self, other: ValidationError) -> ValidationError:
        """Append every error from another set, preserving its order.

        The other set is copied element by element; later changes to it do
        not show up here.

        Args:
            other: Error set to merge in

        Returns:
            Self for chaining
        """
        self._errors.extend(list(other))
        return self

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def count(self) -> int:
        return len(self._errors)

    def first_error(self) -> str:
        """Render the earliest recorded error, or return '' if there is none."""
        if not self._errors:
            return ""
        return str(self._errors[0])

    def errors_for(self, field: str) -> list[FieldError]:
        """Return the errors recorded for one field, in detection order."""
        return [error for error in self._errors if error.field == field]

    def fields(self) -> list[str]:
        """Return the distinct names of failing fields in first-seen order."""
        seen: dict[str, None] = {}
        for error in self._errors:
            seen.setdefault(error.field, None)
        return list(seen)

    def clear(self) -> None:
        self._errors.clear()

    def to_string(self) -> str:
        """Render the multi-line report.

        Returns:
            ``"No validation errors"`` when empty; otherwise a count header
            followed by one ``"<field>: <message>"`` line per error
        """
        if not self._errors:
            return NO_ERRORS_MESSAGE
        lines = [f"Validation failed with {len(self._errors)} error(s):"]
        lines.extend(str(error) for error in self._errors)
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": len(self._errors),
            "errors": [error.to_dict() for error in self._errors],
        }

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ValidationError(errors={self._errors!r})"

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[FieldError]:
        return iter(list(self._errors))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return self._errors == other._errors

    __hash__ = None  # type: ignore[assignment]


class FieldValidationError(BaseValidationError):
    """Raised by the ``assert_*`` validators when a field fails a check.

    The exception message is the rendered field error, and ``message``
    holds exactly the text the matching ``check_*`` validator reports.
    """

    def __init__(self, error: FieldError):
        self.field_error = error
        self.field = error.field
        self.message = error.message
        self.value = error.value
        super().__init__(str(error), context={"field": error.field, "value": error.value})
