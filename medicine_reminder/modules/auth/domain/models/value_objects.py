# 📄 File: medicine_reminder/modules/auth/domain/models/value_objects.py
# 🧭 Purpose (Layman Explanation):
# Small wrappers around what the user types (email, password, username, one-time code)
# that can each answer "does this look right?"
# 🧪 Purpose (Technical Summary):
# Immutable pydantic value objects over raw strings. Construction never fails; validity
# is asked explicitly through is_valid(), which delegates to shared validators.
# 🔗 Dependencies:
# pydantic, medicine_reminder.shared.utils.validators
# 🔄 Connected Modules / Calls From:
# auth_server_repository.py (input checks), user.py (Admin), dto/inputs.py

from abc import ABC, abstractmethod
from typing import List

from pydantic import BaseModel, ConfigDict

from medicine_reminder.shared.utils.validators import (
    ValidationResult,
    validate_email_address,
    validate_otp,
    validate_password,
    validate_username,
)


class ValueObject(BaseModel, ABC):
    """Immutable wrapper around one raw string value."""

    model_config = ConfigDict(frozen=True)

    value: str

    def __init__(self, value: str, **data):
        super().__init__(value=value, **data)

    @abstractmethod
    def validate_value(self) -> ValidationResult:
        """Run the validator for this kind of value."""
        pass

    def is_valid(self) -> bool:
        return self.validate_value().is_valid

    @property
    def errors(self) -> List[str]:
        return self.validate_value().errors

    def __str__(self) -> str:
        return self.value


class EmailAddress(ValueObject):
    """Email address as typed by the user"""

    def validate_value(self) -> ValidationResult:
        return validate_email_address(self.value)


class Password(ValueObject):
    """Password as typed by the user; never printed"""

    def validate_value(self) -> ValidationResult:
        return validate_password(self.value)

    def __repr__(self) -> str:
        return "Password('********')"

    def __str__(self) -> str:
        return "********"


class Username(ValueObject):
    """Public name of the account"""

    def validate_value(self) -> ValidationResult:
        return validate_username(self.value)


class OTP(ValueObject):
    """One-time password sent by email"""

    def validate_value(self) -> ValidationResult:
        return validate_otp(self.value)


__all__ = [
    "ValueObject",
    "EmailAddress",
    "Password",
    "Username",
    "OTP",
]
