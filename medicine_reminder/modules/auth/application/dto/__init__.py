# 📄 File: medicine_reminder/modules/auth/application/dto/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the request and response packages exchanged with the auth server
#
# 🧪 Purpose (Technical Summary):
# DTOs package initialization exporting auth request bodies and response payloads
#
# 🔗 Dependencies:
# - pydantic models for DTO validation and serialization
#
# 🔄 Connected Modules / Calls From:
# - auth infrastructure (API client, server and local repositories)

from .auth_dto import (
    AuthInputDTO,
    CreateAccountInput,
    ForgotPasswordInput,
    LoginInput,
    SendOTPInput,
)
from .response_dto import (
    ApiErrorResponse,
    AuthResponseDTO,
    ForgotPasswordResponse,
    SendOTPResponse,
    UserApiResponse,
)

__all__ = [
    # Requests
    "AuthInputDTO",
    "CreateAccountInput",
    "LoginInput",
    "SendOTPInput",
    "ForgotPasswordInput",
    # Responses
    "AuthResponseDTO",
    "UserApiResponse",
    "SendOTPResponse",
    "ForgotPasswordResponse",
    "ApiErrorResponse",
]
