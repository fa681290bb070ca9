# 📄 File: medicine_reminder/modules/auth/application/dto/auth_dto.py
# 🧭 Purpose (Layman Explanation):
# The exact packages of information the app sends to the auth server when someone
# signs up, logs in, asks for a code or resets their password.
#
# 🧪 Purpose (Technical Summary):
# Request-body DTOs for the four auth endpoints. Python attributes are snake_case,
# wire names are camelCase aliases; serialize with to_payload().
#
# 🔗 Dependencies:
# - pydantic for DTO validation and serialization
#
# 🔄 Connected Modules / Calls From:
# - auth_server_repository.py (builds inputs from value objects)
# - auth_api_client.py (serializes inputs into JSON bodies)

"""
Auth request DTOs

- CreateAccountInput: body of POST /auth/create-account
- LoginInput: body of POST /auth/login
- SendOTPInput: body of POST /auth/send-otp
- ForgotPasswordInput: body of POST /auth/forgot-password
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class AuthInputDTO(BaseModel):
    """Base class of every auth request body."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize using wire (camelCase) names."""
        return self.model_dump(by_alias=True)


class CreateAccountInput(AuthInputDTO):
    """Account creation request."""

    username: str = Field(..., description="Public username", examples=["jane_doe"])
    email: str = Field(..., description="Account email address", examples=["jane@example.com"])
    password: str = Field(..., description="Account password", repr=False)


class LoginInput(AuthInputDTO):
    """Email and password login request."""

    email: str = Field(..., description="Account email address", examples=["jane@example.com"])
    password: str = Field(..., description="Account password", repr=False)


class SendOTPInput(AuthInputDTO):
    """
    One-time password request.

    ``is_register`` tells the server whether the code is for a new account
    (the email must be free) or for a password reset (the email must exist).
    """

    email: str = Field(..., description="Email address receiving the code")
    is_register: bool = Field(..., alias="isRegister", description="Code is for registration")


class ForgotPasswordInput(AuthInputDTO):
    """Password reset request confirmed by an OTP."""

    email: str = Field(..., description="Account email address")
    new_password: str = Field(..., alias="newPassword", description="Replacement password", repr=False)
    otp: str = Field(..., description="One-time password received by email", examples=["123456"])


__all__ = [
    "AuthInputDTO",
    "CreateAccountInput",
    "LoginInput",
    "SendOTPInput",
    "ForgotPasswordInput",
]
