"""Atomic field validators.

Each ``check_*`` function tests one value against one constraint and
returns either ``None`` (the value passes) or a single :class:`FieldError`
describing the violation. They are pure and never raise for invalid input,
which makes them usable on their own, outside any schema:

    ```python
    error = check_email("email", "not-an-email")
    if error:
        print(error)  # email: must be a valid email address (got: not-an-email)
    ```

Every check has an ``assert_*`` twin that raises
:class:`FieldValidationError` instead of returning the error. The twins are
generated from the checks, so both forms always agree on the outcome and on
the message text.
"""

from __future__ import annotations

import string
from collections.abc import Callable, Iterable
from functools import wraps
from typing import Any, Union

from .errors import FieldError, FieldValidationError

Number = Union[int, float]
CheckFunction = Callable[..., Union[FieldError, None]]

_ALPHA = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_ALPHANUMERIC = _ALPHA | _DIGITS

URL_PREFIXES = ("http://", "https://")


def _only(value: str, allowed: frozenset[str]) -> bool:
    return all(char in allowed for char in value)


def _unset(bound: int | None) -> bool:
    # A negative length means no bound.
    return bound is None or bound < 0


def check_required(field: str, value: str | None) -> FieldError | None:
    """Fail when the value is missing or has zero length."""
    if value is None or len(value) == 0:
        return FieldError(field, "is required")
    return None


def check_min_length(field: str, value: str, min_length: int | None) -> FieldError | None:
    """Fail when the value is shorter than ``min_length`` characters.

    An unset (``None`` or negative) bound never fails.
    """
    if _unset(min_length):
        return None
    if len(value) < min_length:  # type: ignore[operator]
        return FieldError(field, f"must be at least {min_length} characters", value)
    return None


def check_max_length(field: str, value: str, max_length: int | None) -> FieldError | None:
    """Fail when the value is longer than ``max_length`` characters.

    An unset (``None`` or negative) bound never fails.
    """
    if _unset(max_length):
        return None
    if len(value) > max_length:  # type: ignore[operator]
        return FieldError(field, f"must be at most {max_length} characters", value)
    return None


def check_gt(field: str, value: Number, threshold: Number) -> FieldError | None:
    if not value > threshold:
        return FieldError(field, f"must be greater than {threshold}", str(value))
    return None


def check_gte(field: str, value: Number, threshold: Number) -> FieldError | None:
    if not value >= threshold:
        return FieldError(field, f"must be greater than or equal to {threshold}", str(value))
    return None


def check_lt(field: str, value: Number, threshold: Number) -> FieldError | None:
    if not value < threshold:
        return FieldError(field, f"must be less than {threshold}", str(value))
    return None


def check_lte(field: str, value: Number, threshold: Number) -> FieldError | None:
    if not value <= threshold:
        return FieldError(field, f"must be less than or equal to {threshold}", str(value))
    return None


def check_email(field: str, value: str) -> FieldError | None:
    """Loose syntactic email check.

    The value passes when it contains both ``@`` and ``.`` and its ``@`` is
    neither the first nor the last character. Nothing else is verified, so
    ``"a@b."`` passes and ``"a.b@c"`` passes too.
    """
    at = value.find("@")
    if at <= 0 or at == len(value) - 1 or "." not in value:
        return FieldError(field, "must be a valid email address", value)
    return None


def check_url(field: str, value: str) -> FieldError | None:
    """Fail unless the value starts with ``http://`` or ``https://``."""
    if not value.startswith(URL_PREFIXES):
        return FieldError(field, "must be a valid URL", value)
    return None


def check_alpha(field: str, value: str) -> FieldError | None:
    """Fail unless every character is an ASCII letter."""
    if not _only(value, _ALPHA):
        return FieldError(field, "must contain only letters", value)
    return None


def check_alphanumeric(field: str, value: str) -> FieldError | None:
    """Fail unless every character is an ASCII letter or digit."""
    if not _only(value, _ALPHANUMERIC):
        return FieldError(field, "must contain only letters and numbers", value)
    return None


def check_numeric(field: str, value: str) -> FieldError | None:
    """Fail unless every character is an ASCII digit."""
    if not _only(value, _DIGITS):
        return FieldError(field, "must contain only digits", value)
    return None


def check_one_of(field: str, value: str, allowed: Iterable[str]) -> FieldError | None:
    """Fail unless the value exactly equals one of ``allowed``.

    Comparison is case-sensitive. The message lists the allowed values in
    the order given.
    """
    allowed = list(allowed)
    if value not in allowed:
        return FieldError(field, f"must be one of: {', '.join(allowed)}", value)
    return None


def raising(check: CheckFunction) -> Callable[..., None]:
    """Turn a ``check_*`` function into one that raises on failure.

    Args:
        check: Validator returning ``FieldError | None``

    Returns:
        Function with the same arguments that returns ``None`` when the value
        passes and raises :class:`FieldValidationError` otherwise
    """

    @wraps(check)
    def assert_check(*args: Any, **kwargs: Any) -> None:
        error = check(*args, **kwargs)
        if error is not None:
            raise FieldValidationError(error)

    assert_check.__name__ = check.__name__.replace("check_", "assert_", 1)
    assert_check.__qualname__ = assert_check.__name__
    assert_check.__doc__ = (
        f"Raise :class:`FieldValidationError` if ``{check.__name__}`` reports an error.\n\n"
        f"Takes the same arguments as ``{check.__name__}`` and returns ``None`` when the\n"
        "value passes."
    )
    return assert_check


CHECKS: dict[str, CheckFunction] = {
    "required": check_required,
    "min_length": check_min_length,
    "max_length": check_max_length,
    "gt": check_gt,
    "gte": check_gte,
    "lt": check_lt,
    "lte": check_lte,
    "email": check_email,
    "url": check_url,
    "alpha": check_alpha,
    "alphanumeric": check_alphanumeric,
    "numeric": check_numeric,
    "one_of": check_one_of,
}

assert_required = raising(check_required)
assert_min_length = raising(check_min_length)
assert_max_length = raising(check_max_length)
assert_gt = raising(check_gt)
assert_gte = raising(check_gte)
assert_lt = raising(check_lt)
assert_lte = raising(check_lte)
assert_email = raising(check_email)
assert_url = raising(check_url)
assert_alpha = raising(check_alpha)
assert_alphanumeric = raising(check_alphanumeric)
assert_numeric = raising(check_numeric)
assert_one_of = raising(check_one_of)


__all__ = [
    "CHECKS",
    "URL_PREFIXES",
    "assert_alpha",
    "assert_alphanumeric",
    "assert_email",
    "assert_gt",
    "assert_gte",
    "assert_lt",
    "assert_lte",
    "assert_max_length",
    "assert_min_length",
    "assert_numeric",
    "assert_one_of",
    "assert_required",
    "assert_url",
    "check_alpha",
    "check_alphanumeric",
    "check_email",
    "check_gt",
    "check_gte",
    "check_lt",
    "check_lte",
    "check_max_length",
    "check_min_length",
    "check_numeric",
    "check_one_of",
    "check_required",
    "check_url",
    "raising",
]
