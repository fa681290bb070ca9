# 📄 File: medicine_reminder/modules/auth/infrastructure/external/auth_api_client.py
# 🧭 Purpose (Layman Explanation):
# Knows the addresses of the auth server's sign-up, login, code and reset endpoints and
# sends the right package to each of them.
# 🧪 Purpose (Technical Summary):
# Thin typed facade over APIClient: one POST per auth endpoint, JSON body from the
# request DTO, raw decoded JSON returned. Transport and status errors propagate as
# ExternalAPIError / APIResponseError.
# 🔗 Dependencies:
# medicine_reminder.shared.infrastructure.external_apis.api_client, auth DTOs
# 🔄 Connected Modules / Calls From:
# auth_server_repository.py, presentation/dependencies.py

from typing import Any

from medicine_reminder.modules.auth.application.dto.auth_dto import (
    AuthInputDTO,
    CreateAccountInput,
    ForgotPasswordInput,
    LoginInput,
    SendOTPInput,
)
from medicine_reminder.modules.auth.domain.failures import AuthEndpoint
from medicine_reminder.shared.infrastructure.external_apis.api_client import APIClient


class AuthApiClient:
    """HTTP client for the remote auth endpoints."""

    def __init__(self, api_client: APIClient):
        self.api_client = api_client

    async def create_account(self, body: CreateAccountInput) -> Any:
        return await self._post(AuthEndpoint.CREATE_ACCOUNT, body)

    async def login(self, body: LoginInput) -> Any:
        return await self._post(AuthEndpoint.LOGIN, body)

    async def send_otp(self, body: SendOTPInput) -> Any:
        return await self._post(AuthEndpoint.SEND_OTP, body)

    async def forgot_password(self, body: ForgotPasswordInput) -> Any:
        return await self._post(AuthEndpoint.FORGOT_PASSWORD, body)

    async def _post(self, endpoint: AuthEndpoint, body: AuthInputDTO) -> Any:
        return await self.api_client.post(endpoint.value, data=body.to_payload())

    async def close(self) -> None:
        await self.api_client.close()


__all__ = ["AuthApiClient"]
