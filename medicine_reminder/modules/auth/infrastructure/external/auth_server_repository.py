# 📄 File: medicine_reminder/modules/auth/infrastructure/external/auth_server_repository.py
# 🧭 Purpose (Layman Explanation):
# Checks what the user typed, sends it to the auth server, and turns the server's answer
# (or silence) into either a result or a clear reason why it failed.
#
# 🧪 Purpose (Technical Summary):
# Concrete BaseAuthServerRepository over AuthApiClient. Validates value objects before
# any request, issues exactly one request, parses response DTOs and maps error bodies
# through the per-endpoint failure table. Exceptions never leave this class.
#
# 🔗 Dependencies:
# - pydantic (response parsing)
# - medicine_reminder.shared.core (exceptions, result type)
# - auth domain (failures, value objects, repository interface)
#
# 🔄 Connected Modules / Calls From:
# - auth_service.py via presentation/dependencies.py

from typing import Any, Awaitable, Callable, Optional, Type

from pydantic import ValidationError

from medicine_reminder.modules.auth.application.dto.auth_dto import (
    CreateAccountInput,
    ForgotPasswordInput,
    LoginInput,
    SendOTPInput,
)
from medicine_reminder.modules.auth.application.dto.response_dto import (
    ApiErrorResponse,
    AuthResponseDTO,
    ForgotPasswordResponse,
    SendOTPResponse,
    UserApiResponse,
)
from medicine_reminder.modules.auth.domain.failures import (
    AuthEndpoint,
    InfrastructureFailure,
    ServerFailure,
    map_server_failure,
)
from medicine_reminder.modules.auth.domain.models.value_objects import (
    OTP,
    EmailAddress,
    Password,
    Username,
    ValueObject,
)
from medicine_reminder.modules.auth.domain.repositories.auth_server_repository import BaseAuthServerRepository
from medicine_reminder.shared.core.exceptions import APIResponseError, ExternalAPIError, exception_to_dict
from medicine_reminder.shared.core.result import Failure, Result, Success
from medicine_reminder.shared.utils.logging import get_logger

from .auth_api_client import AuthApiClient

logger = get_logger(__name__)


class AuthServerRepository(BaseAuthServerRepository):
    """
    Remote auth repository.

    Each public method follows the same steps:
    1. Reject invalid inputs with INVALID_DATA (no request is made)
    2. Send one request through AuthApiClient
    3. Parse a 2xx body into the response DTO (unparsable: SERVER_ERROR)
    4. Map a non-2xx error code through the endpoint's table (unknown: SERVER_ERROR)
    5. Map transport failures (no response at all) to SERVER_ERROR
    """

    def __init__(self, api_client: AuthApiClient):
        self.api_client = api_client

    # ==========================================================================
    # OPERATIONS
    # ==========================================================================

    async def create_account_using_email_and_password(
        self,
        username: Username,
        email: EmailAddress,
        password: Password
    ) -> Result:
        if not self._all_valid(AuthEndpoint.CREATE_ACCOUNT, username=username, email=email, password=password):
            return Failure(InfrastructureFailure.INVALID_DATA)

        body = CreateAccountInput(username=username.value, email=email.value, password=password.value)
        return await self._execute(
            AuthEndpoint.CREATE_ACCOUNT,
            lambda: self.api_client.create_account(body),
            UserApiResponse
        )

    async def login_using_email_and_password(self, email: EmailAddress, password: Password) -> Result:
        if not self._all_valid(AuthEndpoint.LOGIN, email=email, password=password):
            return Failure(InfrastructureFailure.INVALID_DATA)

        body = LoginInput(email=email.value, password=password.value)
        return await self._execute(
            AuthEndpoint.LOGIN,
            lambda: self.api_client.login(body),
            UserApiResponse
        )

    async def send_otp(self, email: EmailAddress, is_register: bool) -> Result:
        if not self._all_valid(AuthEndpoint.SEND_OTP, email=email):
            return Failure(InfrastructureFailure.INVALID_DATA)

        body = SendOTPInput(email=email.value, is_register=is_register)
        return await self._execute(
            AuthEndpoint.SEND_OTP,
            lambda: self.api_client.send_otp(body),
            SendOTPResponse
        )

    async def forgot_password(self, email: EmailAddress, new_password: Password, otp: OTP) -> Result:
        if not self._all_valid(AuthEndpoint.FORGOT_PASSWORD, email=email, new_password=new_password, otp=otp):
            return Failure(InfrastructureFailure.INVALID_DATA)

        body = ForgotPasswordInput(email=email.value, new_password=new_password.value, otp=otp.value)
        return await self._execute(
            AuthEndpoint.FORGOT_PASSWORD,
            lambda: self.api_client.forgot_password(body),
            ForgotPasswordResponse
        )

    # ==========================================================================
    # HELPERS
    # ==========================================================================

    @staticmethod
    def _all_valid(endpoint: AuthEndpoint, **fields: ValueObject) -> bool:
        invalid = [name for name, field in fields.items() if not field.is_valid()]
        if invalid:
            logger.warning(
                f"Rejected {endpoint.value} request with invalid input",
                extra={'endpoint': endpoint.value, 'invalid_fields': invalid}
            )
            return False
        return True

    async def _execute(
        self,
        endpoint: AuthEndpoint,
        call: Callable[[], Awaitable[Any]],
        response_model: Type[AuthResponseDTO]
    ) -> Result:
        try:
            payload = await call()
        except APIResponseError as e:
            failure = map_server_failure(endpoint, self._parse_error_code(e.data))
            logger.warning(
                f"{endpoint.value} failed with status {e.status}",
                extra={'endpoint': endpoint.value, 'status': e.status, 'failure': failure.value}
            )
            return Failure(failure)
        except ExternalAPIError as e:
            # The request produced no usable response
            logger.error(
                f"{endpoint.value} transport failure: {e.message}",
                extra={'endpoint': endpoint.value, 'error': exception_to_dict(e)['error']}
            )
            return Failure(InfrastructureFailure.SERVER_ERROR)

        try:
            response = response_model.model_validate(payload)
        except ValidationError as e:
            logger.error(
                f"{endpoint.value} returned an unexpected payload",
                extra={'endpoint': endpoint.value, 'errors': e.error_count()}
            )
            return Failure(InfrastructureFailure.SERVER_ERROR)

        logger.info(f"{endpoint.value} succeeded", extra={'endpoint': endpoint.value})
        return Success(response)

    @staticmethod
    def _parse_error_code(data: Any) -> Optional[ServerFailure]:
        if not isinstance(data, dict):
            return None
        try:
            return ApiErrorResponse.model_validate(data).error
        except ValidationError:
            return None


__all__ = ["AuthServerRepository"]
