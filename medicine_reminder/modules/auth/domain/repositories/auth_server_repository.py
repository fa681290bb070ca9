# 📄 File: medicine_reminder/modules/auth/domain/repositories/auth_server_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines what the app can ask the auth server to do, without saying how it talks to it
# 🧪 Purpose (Technical Summary):
# Repository interface for the remote auth operations. Every method returns a Result;
# failures are InfrastructureFailure values, never exceptions.
# 🔗 Dependencies:
# abc, value objects, DTOs, shared result type
# 🔄 Connected Modules / Calls From:
# auth_service.py, infrastructure/external/auth_server_repository.py

from abc import ABC, abstractmethod

from medicine_reminder.shared.core.result import Result

from ..models.value_objects import OTP, EmailAddress, Password, Username


class BaseAuthServerRepository(ABC):
    """
    Repository interface for the remote auth API.

    Implementation Notes:
    - Invalid inputs are rejected with INVALID_DATA before any network call
    - Exactly one request per call, no retries
    - Server error codes are mapped per endpoint; anything else is SERVER_ERROR
    """

    @abstractmethod
    async def create_account_using_email_and_password(
        self,
        username: Username,
        email: EmailAddress,
        password: Password
    ) -> Result:
        """
        Register a new account.

        Returns:
            Success(UserApiResponse) or Failure(InfrastructureFailure)
        """
        pass

    @abstractmethod
    async def login_using_email_and_password(self, email: EmailAddress, password: Password) -> Result:
        """
        Log in with email and password.

        Returns:
            Success(UserApiResponse) or Failure(InfrastructureFailure)
        """
        pass

    @abstractmethod
    async def send_otp(self, email: EmailAddress, is_register: bool) -> Result:
        """
        Ask the server to email a one-time password.

        Returns:
            Success(SendOTPResponse) or Failure(InfrastructureFailure)
        """
        pass

    @abstractmethod
    async def forgot_password(self, email: EmailAddress, new_password: Password, otp: OTP) -> Result:
        """
        Reset the password of an account, confirmed by an OTP.

        Returns:
            Success(ForgotPasswordResponse) or Failure(InfrastructureFailure)
        """
        pass
