"""Tests for the atomic check_* validators and their assert_* twins."""

import pytest

from dataknobs_fields import checks
from dataknobs_fields.checks import (
    CHECKS,
    assert_email,
    assert_gte,
    assert_one_of,
    assert_required,
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
    raising,
)
from dataknobs_fields.errors import FieldError, FieldValidationError


class TestRequired:
    """Test the required check."""

    def test_empty_fails(self):
        assert check_required("name", "") == FieldError("name", "is required")

    def test_none_fails(self):
        assert check_required("name", None) == FieldError("name", "is required")

    def test_whitespace_passes(self):
        """Test that only zero length counts as missing."""
        assert check_required("name", " ") is None


class TestLength:
    """Test the length checks."""

    @pytest.mark.parametrize("value,expected_ok", [("ab", False), ("abc", True), ("abcd", True)])
    def test_min_length(self, value, expected_ok):
        error = check_min_length("username", value, 3)
        assert (error is None) == expected_ok

    @pytest.mark.parametrize("value,expected_ok", [("abc", True), ("abcd", True), ("abcde", False)])
    def test_max_length(self, value, expected_ok):
        error = check_max_length("username", value, 4)
        assert (error is None) == expected_ok

    def test_messages(self):
        """Test the length messages and value echo."""
        assert check_min_length("u", "a", 3) == FieldError("u", "must be at least 3 characters", "a")
        assert check_max_length("u", "abcd", 2) == FieldError(
            "u", "must be at most 2 characters", "abcd"
        )

    @pytest.mark.parametrize("bound", [None, -1, -100])
    def test_unset_bounds_skip(self, bound):
        """Test that unset (None or negative) bounds never fail."""
        assert check_min_length("u", "", bound) is None
        assert check_max_length("u", "x" * 1000, bound) is None

    def test_zero_max_length(self):
        """Test that zero is a real bound, not the unset marker."""
        assert check_max_length("u", "a", 0) is not None


class TestNumericComparisons:
    """Test gt/gte/lt/lte on integers and floats."""

    def test_gt(self):
        assert check_gt("n", 6, 5) is None
        assert check_gt("n", 5, 5) == FieldError("n", "must be greater than 5", "5")

    def test_gte(self):
        assert check_gte("age", 18, 18) is None
        assert check_gte("age", 15, 18) == FieldError(
            "age", "must be greater than or equal to 18", "15"
        )

    def test_lt(self):
        assert check_lt("n", 4, 5) is None
        assert check_lt("n", 5, 5) == FieldError("n", "must be less than 5", "5")

    def test_lte(self):
        assert check_lte("age", 120, 120) is None
        assert check_lte("age", 200, 120) == FieldError(
            "age", "must be less than or equal to 120", "200"
        )

    def test_float_thresholds(self):
        """Test that float thresholds keep their float rendering."""
        assert check_gte("price", 0.5, 1.5) == FieldError(
            "price", "must be greater than or equal to 1.5", "0.5"
        )
        assert check_gt("price", 1.5000001, 1.5) is None
        assert check_lt("price", 1.5, 1.5) is not None


class TestFormats:
    """Test the email, URL and character class checks."""

    @pytest.mark.parametrize(
        "value",
        ["user@example.com", "a@b.c", "a.b@c", "a@b.", "x@y@z.com"],
    )
    def test_email_accepts(self, value):
        """Test values accepted by the loose email rule."""
        assert check_email("email", value) is None

    @pytest.mark.parametrize(
        "value",
        ["not-an-email", "@example.com", "user@", "user@example", "userexample.com", ""],
    )
    def test_email_rejects(self, value):
        error = check_email("email", value)
        assert error is not None
        assert "must be a valid email address" in error.message

    @pytest.mark.parametrize("value", ["http://example.com", "https://x", "http://"])
    def test_url_accepts(self, value):
        assert check_url("site", value) is None

    @pytest.mark.parametrize("value", ["ftp://example.com", "example.com", "HTTP://x", " http://x"])
    def test_url_rejects(self, value):
        assert check_url("site", value) == FieldError("site", "must be a valid URL", value)

    def test_alpha(self):
        assert check_alpha("name", "HelloWorld") is None
        assert check_alpha("name", "Hello World") is not None
        assert check_alpha("name", "abc1") is not None
        assert check_alpha("name", "café") is not None
        assert check_alpha("name", "") is None

    def test_alphanumeric(self):
        assert check_alphanumeric("u", "abc123XYZ") is None
        assert check_alphanumeric("u", "jo-") == FieldError(
            "u", "must contain only letters and numbers", "jo-"
        )
        assert check_alphanumeric("u", "ab_c") is not None

    def test_numeric(self):
        assert check_numeric("zip", "0123456789") is None
        assert check_numeric("zip", "12.5") == FieldError("zip", "must contain only digits", "12.5")
        assert check_numeric("zip", "-1") is not None
        # Non-ASCII digits are outside the accepted range
        assert check_numeric("zip", "١٢") is not None


class TestOneOf:
    """Test the allowed-values check."""

    def test_accepts_exact_match(self):
        assert check_one_of("role", "admin", ["admin", "user"]) is None

    def test_case_sensitive(self):
        assert check_one_of("role", "Admin", ["admin", "user"]) is not None

    def test_message_lists_values_in_order(self):
        error = check_one_of("color", "purple", ("red", "green", "blue"))
        assert error == FieldError("color", "must be one of: red, green, blue", "purple")


class TestAssertVariants:
    """Test that assert_* functions mirror the check_* functions."""

    def test_pass_returns_none(self):
        assert assert_email("email", "user@example.com") is None
        assert assert_gte("age", 20, 18) is None

    def test_failure_raises_with_same_message(self):
        """Test that the raised message is byte-identical to the check's."""
        with pytest.raises(FieldValidationError) as exc_info:
            assert_email("email", "not-an-email")
        expected = check_email("email", "not-an-email")
        assert exc_info.value.message == expected.message
        assert exc_info.value.field_error == expected

    def test_required_and_one_of(self):
        with pytest.raises(FieldValidationError, match="is required"):
            assert_required("name", "")
        with pytest.raises(FieldValidationError) as exc_info:
            assert_one_of("role", "root", ["admin", "user"])
        assert exc_info.value.message == "must be one of: admin, user"

    @pytest.mark.parametrize("name", sorted(CHECKS))
    def test_every_check_has_assert_twin(self, name):
        """Test that each check is exported with a matching assert function."""
        twin = getattr(checks, f"assert_{name}")
        assert twin.__name__ == f"assert_{name}"
        assert twin.__wrapped__ is CHECKS[name]

    def test_assert_docstring_describes_raising(self):
        """Test that assert_* functions document raising, not returning."""
        assert "Raise" in assert_email.__doc__
        assert "check_email" in assert_email.__doc__
        assert assert_email.__doc__ != check_email.__doc__

    def test_raising_wraps_any_check(self):
        def check_never(field, value):
            return FieldError(field, "never valid", str(value))

        assert_never = raising(check_never)
        assert assert_never.__name__ == "assert_never"
        with pytest.raises(FieldValidationError) as exc_info:
            assert_never("x", 1)
        assert str(exc_info.value) == "x: never valid (got: 1)"
