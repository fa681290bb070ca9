"""Tests for the AuthService coordinator."""

import pytest

from medicine_reminder.modules.auth.application.dto import ForgotPasswordResponse, SendOTPResponse, UserApiResponse
from medicine_reminder.modules.auth.domain.failures import InfrastructureFailure
from medicine_reminder.modules.auth.domain.models.user import Admin
from medicine_reminder.modules.auth.domain.services.auth_service import AuthService
from medicine_reminder.shared.core.result import UNIT, Failure, Success


@pytest.fixture
def service(mock_server_repository, mock_local_repository):
    return AuthService(mock_server_repository, mock_local_repository)


@pytest.fixture
def admin():
    return Admin.create(email="a@b.com", username="A")


class TestAuthService:

    @pytest.mark.asyncio
    async def test_login_saves_user_after_remote_success(
        self, service, mock_server_repository, mock_local_repository, email, password, user_response, admin
    ):
        mock_server_repository.login_using_email_and_password.return_value = Success(user_response)
        mock_local_repository.save_logged_in_user.return_value = Success(admin)

        result = await service.login_using_email_and_password(email, password)

        assert result == Success(admin)
        mock_server_repository.login_using_email_and_password.assert_awaited_once_with(email=email, password=password)
        mock_local_repository.save_logged_in_user.assert_called_once_with(user_response)

    @pytest.mark.asyncio
    async def test_create_account_saves_user_after_remote_success(
        self, service, mock_server_repository, mock_local_repository, username, email, password, admin
    ):
        response = UserApiResponse(email="a@b.com", username="A")
        mock_server_repository.create_account_using_email_and_password.return_value = Success(response)
        mock_local_repository.save_logged_in_user.return_value = Success(admin)

        result = await service.create_account_using_email_and_password(username, email, password)

        assert result == Success(admin)
        mock_local_repository.save_logged_in_user.assert_called_once_with(response)

    @pytest.mark.asyncio
    async def test_remote_failure_skips_local_save(
        self, service, mock_server_repository, mock_local_repository, username, email, password
    ):
        failure = Failure(InfrastructureFailure.USER_ALREADY_EXISTS)
        mock_server_repository.create_account_using_email_and_password.return_value = failure

        result = await service.create_account_using_email_and_password(username, email, password)

        assert result is failure
        mock_local_repository.save_logged_in_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_local_write_failure_after_remote_success(
        self, service, mock_server_repository, mock_local_repository, email, password, user_response
    ):
        mock_server_repository.login_using_email_and_password.return_value = Success(user_response)
        mock_local_repository.save_logged_in_user.return_value = Failure(InfrastructureFailure.WRITE_FAILURE)

        result = await service.login_using_email_and_password(email, password)

        assert result == Failure(InfrastructureFailure.WRITE_FAILURE)

    @pytest.mark.asyncio
    async def test_send_otp_is_remote_only(self, service, mock_server_repository, mock_local_repository, email):
        mock_server_repository.send_otp.return_value = Success(SendOTPResponse(otp="123456"))

        result = await service.send_otp(email, is_register=True)

        assert result == Success(SendOTPResponse(otp="123456"))
        mock_server_repository.send_otp.assert_awaited_once_with(email=email, is_register=True)
        mock_local_repository.save_logged_in_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_forgot_password_is_remote_only(
        self, service, mock_server_repository, mock_local_repository, email, password, otp
    ):
        mock_server_repository.forgot_password.return_value = Success(ForgotPasswordResponse())

        result = await service.forgot_password(email, password, otp)

        assert isinstance(result, Success)
        mock_server_repository.forgot_password.assert_awaited_once_with(email=email, new_password=password, otp=otp)
        mock_local_repository.save_logged_in_user.assert_not_called()

    def test_local_operations_delegate(self, service, mock_local_repository, admin):
        mock_local_repository.get_logged_in_user.return_value = Success(admin)
        mock_local_repository.sign_out.return_value = Success(UNIT)

        assert service.get_logged_in_user() == Success(admin)
        assert service.sign_out() == Success(UNIT)
