# 📄 File: medicine_reminder/modules/auth/domain/services/auth_service.py
# 🧭 Purpose (Layman Explanation):
# Ties the server and the phone's storage together: after the server accepts a login or
# a new account, the user is remembered on the device; sign-out forgets them.
# 🧪 Purpose (Technical Summary):
# Coordinator composing the remote and local auth repositories. Sequences remote call then
# local save; failures of whichever step failed are returned unchanged.
# 🔗 Dependencies:
# Auth repository interfaces, value objects, shared result type
# 🔄 Connected Modules / Calls From:
# application/controller.py, presentation/dependencies.py

import logging

from medicine_reminder.shared.core.result import Failure, Result

from ..models.value_objects import OTP, EmailAddress, Password, Username
from ..repositories.auth_local_repository import BaseAuthLocalRepository
from ..repositories.auth_server_repository import BaseAuthServerRepository

logger = logging.getLogger(__name__)


class AuthService:
    """
    Domain service coordinating remote auth calls with the local session store.

    Business rules:
    - The local record is written only after the server accepted the credentials
    - A local write failure after remote success is returned as WRITE_FAILURE;
      the server-side session is left as is
    - OTP and password reset never touch local storage
    """

    def __init__(
        self,
        server_repository: BaseAuthServerRepository,
        local_repository: BaseAuthLocalRepository
    ):
        self.server_repository = server_repository
        self.local_repository = local_repository

    async def create_account_using_email_and_password(
        self,
        username: Username,
        email: EmailAddress,
        password: Password
    ) -> Result:
        """
        Create an account remotely and remember the new user locally.

        Args:
            username: Requested username
            email: Account email
            password: Account password

        Returns:
            Success(Admin) or the failure of the step that failed
        """
        result = await self.server_repository.create_account_using_email_and_password(
            username=username,
            email=email,
            password=password
        )
        return self._persist(result, "create_account")

    async def login_using_email_and_password(self, email: EmailAddress, password: Password) -> Result:
        """
        Log in remotely and remember the user locally.

        Returns:
            Success(Admin) or the failure of the step that failed
        """
        result = await self.server_repository.login_using_email_and_password(email=email, password=password)
        return self._persist(result, "login")

    async def send_otp(self, email: EmailAddress, is_register: bool) -> Result:
        return await self.server_repository.send_otp(email=email, is_register=is_register)

    async def forgot_password(self, email: EmailAddress, new_password: Password, otp: OTP) -> Result:
        return await self.server_repository.forgot_password(email=email, new_password=new_password, otp=otp)

    def get_logged_in_user(self) -> Result:
        return self.local_repository.get_logged_in_user()

    def sign_out(self) -> Result:
        return self.local_repository.sign_out()

    def _persist(self, result: Result, operation: str) -> Result:
        if isinstance(result, Failure):
            logger.info(f"{operation} rejected remotely: {result.failure.value}")
            return result

        saved = self.local_repository.save_logged_in_user(result.value)
        if isinstance(saved, Failure):
            logger.error(f"{operation} succeeded remotely but the user could not be stored locally")
        return saved


__all__ = ["AuthService"]
