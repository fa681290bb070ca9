# 📄 File: medicine_reminder/modules/auth/application/controller.py
# 🧭 Purpose (Layman Explanation):
# The brain behind the sign-in screens: it runs each action the user taps, shows a
# spinner while waiting, then shows who is signed in or what went wrong.
#
# 🧪 Purpose (Technical Summary):
# AuthController is the single writer of AuthState. Each operation publishes a loading
# snapshot, awaits AuthService, and publishes exactly one terminal snapshot. The stored
# session is restored synchronously on construction.
#
# 🔗 Dependencies:
# - medicine_reminder.shared.core.state_notifier.StateNotifier
# - auth domain service, value objects and failures
# - medicine_reminder.shared.utils.logging (operation context)
#
# 🔄 Connected Modules / Calls From:
# - presentation/dependencies.py (construction)
# - UI layer (subscribes through add_listener)

from medicine_reminder.modules.auth.domain.models.value_objects import OTP, EmailAddress, Password, Username
from medicine_reminder.modules.auth.domain.services.auth_service import AuthService
from medicine_reminder.shared.core.result import UNIT, Failure, Result, Success
from medicine_reminder.shared.core.state_notifier import StateNotifier
from medicine_reminder.shared.utils.logging import get_logger, log_context

from .state import AuthState

logger = get_logger(__name__)


class AuthController(StateNotifier[AuthState]):
    """
    State controller for the auth screens.

    Every terminal snapshot carries either Success(UNIT) or the failure returned by
    the service, unchanged. There is no cancellation and no locking: callers are
    expected to await one operation at a time.
    """

    def __init__(self, auth_service: AuthService):
        super().__init__(AuthState.initial())
        self.auth_service = auth_service
        self._restore_session()

    def _restore_session(self) -> None:
        with log_context("restore_session"):
            self.auth_service.get_logged_in_user().fold(
                lambda failure: self._publish(admin=None, success_or_failure=Failure(failure)),
                lambda admin: self._publish(admin=admin, success_or_failure=Success(UNIT))
            )

    # ==========================================================================
    # REMOTE OPERATIONS
    # ==========================================================================

    async def create_account_using_email_and_password(
        self,
        username: Username,
        email: EmailAddress,
        password: Password
    ) -> None:
        with log_context("create_account"):
            self._publish(is_loading=True, admin=None, success_or_failure=None)
            result = await self.auth_service.create_account_using_email_and_password(
                username=username,
                email=email,
                password=password
            )
            self._publish_admin_result(result)

    async def login_using_email_and_password(self, email: EmailAddress, password: Password) -> None:
        with log_context("login"):
            self._publish(is_loading=True, admin=None, success_or_failure=None)
            result = await self.auth_service.login_using_email_and_password(email=email, password=password)
            self._publish_admin_result(result)

    async def send_otp(self, email: EmailAddress, is_register: bool) -> None:
        with log_context("send_otp"):
            self._publish(is_loading=True, success_or_failure=None)
            result = await self.auth_service.send_otp(email=email, is_register=is_register)
            result.fold(
                lambda failure: self._publish(is_loading=False, success_or_failure=Failure(failure)),
                lambda response: self._publish(is_loading=False, otp=response.otp, success_or_failure=Success(UNIT))
            )

    async def forgot_password(self, email: EmailAddress, new_password: Password, otp: OTP) -> None:
        with log_context("forgot_password"):
            self._publish(is_loading=True, success_or_failure=None)
            result = await self.auth_service.forgot_password(email=email, new_password=new_password, otp=otp)
            self._publish(
                is_loading=False,
                success_or_failure=result.fold(Failure, lambda _: Success(UNIT))
            )

    # ==========================================================================
    # LOCAL OPERATIONS
    # ==========================================================================

    def sign_out(self) -> None:
        with log_context("sign_out"):
            self._publish(success_or_failure=None)
            self.auth_service.sign_out().fold(
                # Admin is kept: the local record may still be there
                lambda failure: self._publish(success_or_failure=Failure(failure)),
                lambda _: self._publish(admin=None, success_or_failure=Success(UNIT))
            )

    # ==========================================================================
    # HELPERS
    # ==========================================================================

    def _publish_admin_result(self, result: Result) -> None:
        result.fold(
            lambda failure: self._publish(is_loading=False, success_or_failure=Failure(failure)),
            lambda admin: self._publish(is_loading=False, admin=admin, success_or_failure=Success(UNIT))
        )

    def _publish(self, **changes) -> None:
        self.state = self.state.copy_with(**changes)
        outcome = changes.get("success_or_failure")
        if isinstance(outcome, Failure):
            description = f"failure {outcome.failure.value}"
        elif outcome is None:
            description = "loading" if self.state.is_loading else "pending"
        else:
            description = "success"
        logger.log_state_transition(
            self.__class__.__name__,
            description,
            extra={'is_loading': self.state.is_loading, 'has_admin': self.state.admin is not None}
        )


__all__ = ["AuthController"]
