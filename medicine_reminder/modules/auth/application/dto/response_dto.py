# 📄 File: medicine_reminder/modules/auth/application/dto/response_dto.py
# 🧭 Purpose (Layman Explanation):
# Describes what the auth server sends back: the user's details, a one-time code,
# a confirmation message, or an error code explaining what went wrong.
#
# 🧪 Purpose (Technical Summary):
# Response payload DTOs parsed from the server's JSON. Unknown fields are ignored;
# an unknown error code parses to None so it can be treated as a server error.
#
# 🔗 Dependencies:
# - pydantic for parsing and validation
# - medicine_reminder.modules.auth.domain.failures (ServerFailure codes)
#
# 🔄 Connected Modules / Calls From:
# - auth_server_repository.py (parses success and error bodies)
# - auth_local_repository.py (persists UserApiResponse)

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from medicine_reminder.modules.auth.domain.failures import ServerFailure


class AuthResponseDTO(BaseModel):
    """Base class of every auth response payload."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class UserApiResponse(AuthResponseDTO):
    """User payload returned by create-account and login."""

    email: str = Field(..., description="Account email address")
    username: str = Field(..., description="Public username")


class SendOTPResponse(AuthResponseDTO):
    """Payload of send-otp."""

    otp: str = Field(..., description="One-time password that was emailed")

    @field_validator('otp', mode='before')
    @classmethod
    def coerce_otp(cls, v: Any) -> Any:
        """Some servers send the code as a number"""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class ForgotPasswordResponse(AuthResponseDTO):
    """Payload of forgot-password; the message is informational only."""

    message: Optional[str] = Field(default=None, description="Server confirmation message")


class ApiErrorResponse(AuthResponseDTO):
    """Error body sent with a non-2xx status."""

    error: Optional[ServerFailure] = Field(default=None, description="Machine readable error code")

    @field_validator('error', mode='before')
    @classmethod
    def drop_unknown_code(cls, v: Any) -> Any:
        if v is None:
            return None
        known = {failure.value for failure in ServerFailure}
        return v if isinstance(v, str) and v in known else None


__all__ = [
    "AuthResponseDTO",
    "UserApiResponse",
    "SendOTPResponse",
    "ForgotPasswordResponse",
    "ApiErrorResponse",
]
