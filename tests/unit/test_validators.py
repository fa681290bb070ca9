"""Tests for the input validators and the auth value objects built on them."""

import pytest
from pydantic import ValidationError

from medicine_reminder.modules.auth.domain.models.value_objects import OTP, EmailAddress, Password, Username, ValueObject
from medicine_reminder.shared.utils.validators import (
    validate_email_address,
    validate_otp,
    validate_password,
    validate_username,
)


class TestEmailValidation:
    """Email syntax checks (no DNS)."""

    @pytest.mark.parametrize("value", ["a@b.com", "jane.doe+meds@example.com", "x_y@sub.example.org"])
    def test_valid_addresses(self, value):
        assert validate_email_address(value).is_valid
        assert EmailAddress(value).is_valid()

    @pytest.mark.parametrize("value", ["", "plainaddress", "a@", "@b.com", "a b@example.com", "a@b", "  a@b.com "])
    def test_invalid_addresses(self, value):
        result = validate_email_address(value)
        assert not result.is_valid
        assert result.errors
        assert not EmailAddress(value).is_valid()

    def test_too_long_address(self):
        value = "a" * 250 + "@example.com"
        assert not validate_email_address(value).is_valid


class TestPasswordValidation:
    """Password strength rules."""

    def test_strong_password(self):
        assert validate_password("Secret1!").is_valid

    @pytest.mark.parametrize(
        "value,expected_error",
        [
            ("", "Password is required"),
            ("Sh0rt!", "at least 8 characters"),
            ("lowercase1!", "uppercase"),
            ("UPPERCASE1!", "lowercase"),
            ("NoDigits!!", "digit"),
            ("NoSpecial11", "special"),
            ("With Space1!", "spaces"),
        ],
    )
    def test_weak_passwords(self, value, expected_error):
        result = validate_password(value)
        assert not result.is_valid
        assert any(expected_error in error for error in result.errors)

    def test_password_value_object_hides_value(self):
        password = Password("Secret1!")
        assert "Secret" not in repr(password)
        assert "Secret" not in str(password)
        assert password.is_valid()


class TestUsernameValidation:

    @pytest.mark.parametrize("value", ["abc", "alice_01", "A" * 30])
    def test_valid_usernames(self, value):
        assert validate_username(value).is_valid
        assert Username(value).is_valid()

    @pytest.mark.parametrize("value", ["", "ab", "A" * 31, "has-dash", "has space", "admin", "Root", " abc ", "abc\n"])
    def test_invalid_usernames(self, value):
        assert not validate_username(value).is_valid


class TestOTPValidation:

    def test_six_digits(self):
        assert validate_otp("123456").is_valid
        assert OTP("000000").is_valid()

    @pytest.mark.parametrize("value", ["", "12345", "1234567", "12a456", " 123456", "123456\n"])
    def test_rejects_anything_else(self, value):
        assert not validate_otp(value).is_valid
        assert not OTP(value).is_valid()


class TestValueObjects:

    def test_equal_values_are_equal(self):
        assert EmailAddress("a@b.com") == EmailAddress("a@b.com")
        assert EmailAddress("a@b.com") != EmailAddress("c@d.com")

    def test_value_objects_are_immutable(self):
        email = EmailAddress("a@b.com")
        with pytest.raises(ValidationError):
            email.value = "c@d.com"

    def test_errors_lists_reasons(self):
        assert EmailAddress("nope").errors
        assert OTP("123456").errors == []

    def test_base_value_object_cannot_be_built(self):
        with pytest.raises(TypeError):
            ValueObject("a@b.com")
