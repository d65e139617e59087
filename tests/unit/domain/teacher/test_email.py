"""Unit tests for the Email value object."""

import pytest

from attendance.domain.shared.exceptions import ErrorCode, ValidationError
from attendance.domain.teacher import Email, InvalidEmailError


class TestEmail:
    def test_valid_email_is_kept(self):
        assert Email("a@x.com").value == "a@x.com"

    def test_email_is_normalized(self):
        """Case and surrounding whitespace are dropped."""
        assert Email("  A.Smith@School.ORG ").value == "a.smith@school.org"

    def test_normalized_emails_are_equal(self):
        assert Email("A@X.com") == Email("a@x.COM")
        assert hash(Email("A@X.com")) == hash(Email("a@x.com"))

    @pytest.mark.parametrize(
        "value",
        ["", "   ", "plainaddress", "@x.com", "a@", "a@x", "a b@x.com", "a@x.c"],
    )
    def test_invalid_email_raises(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)

    def test_invalid_email_is_a_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            Email("not-an-email")

        assert exc_info.value.code == ErrorCode.VALIDATION_ERROR
        assert exc_info.value.message == "Invalid email format"
        # The raw input goes to the internal details only
        assert "not-an-email" not in str(exc_info.value)

    def test_str(self):
        assert str(Email("a@x.com")) == "a@x.com"
