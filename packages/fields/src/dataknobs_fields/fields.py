"""Field constraint builders.

A field is an immutable description of the rules for one named value.
Builder methods never modify the field they are called on; each returns a
new field with one more constraint, so chains read naturally and a field can
be shared freely:

    ```python
    username = StringField("username").required().min_length(3).alphanumeric()
    errors = username.validate("jo-")
    errors.count()  # 1
    ```

Validation order is fixed and observable through the order and number of
errors returned:

1. A required field with a missing value yields exactly one ``is required``
   error and nothing else is checked.
2. An optional string that is empty, or an optional number that is not set,
   passes without further checks.
3. Every remaining constraint runs, and every violation is reported.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any, TypeVar, Union

from dataknobs_common.exceptions import ConfigurationError

from .checks import (
    check_alpha,
    check_alphanumeric,
    check_email,
    check_gte,
    check_lte,
    check_max_length,
    check_min_length,
    check_numeric,
    check_one_of,
    check_required,
    check_url,
)
from .errors import FieldError, ValidationError

logger = logging.getLogger(__name__)

Number = Union[int, float]
F = TypeVar("F", bound="BaseField")
N = TypeVar("N", bound="NumericField")


@dataclass(frozen=True)
class BaseField:
    """Common part of every field: its name and whether it is required."""

    name: str
    is_required: bool = False

    def required(self: F) -> F:
        """Return a copy of this field that rejects missing values."""
        return replace(self, is_required=True)

    def constraints(self) -> dict[str, Any]:
        """Summarize the configured constraints, omitting unset ones."""
        summary: dict[str, Any] = {}
        for key, value in vars(self).items():
            if key == "name" or value is None or value is False:
                continue
            summary[key] = value
        return summary

    @staticmethod
    def _collect(errors: ValidationError, *results: FieldError | None) -> ValidationError:
        for result in results:
            if result is not None:
                errors.add_error(result)
        return errors


def _length_bound(value: int | None) -> int | None:
    if value is None or value < 0:
        return None
    return value


@dataclass(frozen=True)
class StringField(BaseField):
    """Constraints for a string value."""

    min_len: int | None = None
    max_len: int | None = None
    is_email: bool = False
    is_url: bool = False
    is_alpha: bool = False
    is_alphanumeric: bool = False
    is_numeric: bool = False
    allowed_values: tuple[str, ...] | None = None

    def min_length(self, length: int | None) -> StringField:
        """Require at least ``length`` characters; a negative length clears the bound."""
        return replace(self, min_len=_length_bound(length))

    def max_length(self, length: int | None) -> StringField:
        """Allow at most ``length`` characters; a negative length clears the bound."""
        return replace(self, max_len=_length_bound(length))

    def length(self, min_length: int | None = None, max_length: int | None = None) -> StringField:
        """Set both length bounds at once.

        Raises:
            ConfigurationError: If both bounds are set and min exceeds max
        """
        low, high = _length_bound(min_length), _length_bound(max_length)
        if low is not None and high is not None and low > high:
            raise ConfigurationError(
                f"min length ({low}) cannot be greater than max length ({high})",
                context={"field": self.name, "min_length": low, "max_length": high},
            )
        return replace(self, min_len=low, max_len=high)

    def email(self) -> StringField:
        return replace(self, is_email=True)

    def url(self) -> StringField:
        return replace(self, is_url=True)

    def alpha(self) -> StringField:
        return replace(self, is_alpha=True)

    def alphanumeric(self) -> StringField:
        return replace(self, is_alphanumeric=True)

    def numeric(self) -> StringField:
        return replace(self, is_numeric=True)

    def one_of(self, *values: str | Iterable[str]) -> StringField:
        """Restrict the value to an exact, case-sensitive list.

        Accepts either separate arguments, ``one_of("a", "b")``, or a single
        iterable, ``one_of(["a", "b"])``. Order is kept for error messages.

        Raises:
            ConfigurationError: If no allowed values are given
        """
        if len(values) == 1 and not isinstance(values[0], str):
            allowed = tuple(values[0])
        else:
            allowed = tuple(values)  # type: ignore[arg-type]
        if not allowed:
            raise ConfigurationError(
                "one_of requires at least one allowed value",
                context={"field": self.name},
            )
        return replace(self, allowed_values=allowed)

    def validate(self, value: str | None) -> ValidationError:
        """Check a value against every configured constraint.

        Args:
            value: Candidate value; ``None`` is treated as an empty string

        Returns:
            Errors in detection order, empty when the value is valid
        """
        errors = ValidationError()
        if value is None:
            value = ""

        if self.is_required:
            missing = check_required(self.name, value)
            if missing is not None:
                return errors.add_error(missing)

        if value == "":
            return errors

        self._collect(
            errors,
            check_min_length(self.name, value, self.min_len),
            check_max_length(self.name, value, self.max_len),
            check_email(self.name, value) if self.is_email else None,
            check_url(self.name, value) if self.is_url else None,
            check_alpha(self.name, value) if self.is_alpha else None,
            check_alphanumeric(self.name, value) if self.is_alphanumeric else None,
            check_numeric(self.name, value) if self.is_numeric else None,
            check_one_of(self.name, value, self.allowed_values)
            if self.allowed_values is not None
            else None,
        )
        if errors.has_errors():
            logger.debug("Field '%s' failed %d check(s)", self.name, errors.count())
        return errors


@dataclass(frozen=True)
class NumericField(BaseField):
    """Inclusive lower and upper bounds shared by integer and float fields."""

    min_value: Number | None = None
    max_value: Number | None = None

    def gte(self: N, value: Number) -> N:
        return replace(self, min_value=value)

    def lte(self: N, value: Number) -> N:
        return replace(self, max_value=value)

    def min(self: N, value: Number) -> N:
        """Alias for :meth:`gte`."""
        return self.gte(value)

    def max(self: N, value: Number) -> N:
        """Alias for :meth:`lte`."""
        return self.lte(value)

    def range(self: N, low: Number, high: Number) -> N:
        """Set both inclusive bounds.

        Raises:
            ConfigurationError: If ``low`` is greater than ``high``
        """
        if low > high:
            raise ConfigurationError(
                f"min ({low}) cannot be greater than max ({high})",
                context={"field": self.name, "min": low, "max": high},
            )
        return replace(self, min_value=low, max_value=high)

    def validate(self, value: Number | None = None, is_set: bool | None = None) -> ValidationError:
        """Check a value against the configured bounds.

        Args:
            value: Candidate value
            is_set: Whether a value was supplied at all; defaults to
                ``value is not None``

        Returns:
            Errors in detection order, empty when the value is valid
        """
        errors = ValidationError()
        present = (value is not None) if is_set is None else (is_set and value is not None)

        if not present:
            if self.is_required:
                errors.add(self.name, "is required")
            return errors

        if self.min_value is not None:
            self._collect(errors, check_gte(self.name, value, self.min_value))  # type: ignore[arg-type]
        if self.max_value is not None:
            self._collect(errors, check_lte(self.name, value, self.max_value))  # type: ignore[arg-type]
        if errors.has_errors():
            logger.debug("Field '%s' out of bounds: %s", self.name, value)
        return errors


@dataclass(frozen=True)
class IntField(NumericField):
    """Constraints for an integer value.

    Exclusive bounds are stored as the nearest inclusive integer, so
    ``gt(17)`` behaves exactly like ``gte(18)``.
    """

    min_value: int | None = None
    max_value: int | None = None

    def gt(self, value: int) -> IntField:
        return replace(self, min_value=value + 1)

    def lt(self, value: int) -> IntField:
        return replace(self, max_value=value - 1)

    def positive(self) -> IntField:
        """Require a value strictly greater than zero."""
        return self.gt(0)

    def negative(self) -> IntField:
        """Require a value strictly less than zero."""
        return self.lt(0)

    def non_negative(self) -> IntField:
        return self.gte(0)


@dataclass(frozen=True)
class FloatField(NumericField):
    """Constraints for a float value.

    Thresholds are stored as given. ``gt`` and ``gte`` set the same inclusive
    lower bound (and ``lt``/``lte`` the same upper bound); there is no
    integer-style shift, so ``gt(1.5)`` still accepts ``1.5``.
    """

    min_value: float | None = None
    max_value: float | None = None

    def gt(self, value: float) -> FloatField:
        return replace(self, min_value=value)

    def lt(self, value: float) -> FloatField:
        return replace(self, max_value=value)

    def positive(self) -> FloatField:
        """Require a value of at least ``0.0``; zero itself is accepted."""
        return replace(self, min_value=0.0)


__all__ = [
    "BaseField",
    "FloatField",
    "IntField",
    "NumericField",
    "StringField",
]
