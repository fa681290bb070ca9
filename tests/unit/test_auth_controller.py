"""Tests for the AuthController state transitions."""

from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio
from aiohttp import test_utils, web
from pydantic import ValidationError

from medicine_reminder.modules.auth.application.controller import AuthController
from medicine_reminder.modules.auth.application.dto import ForgotPasswordResponse, SendOTPResponse
from medicine_reminder.modules.auth.application.state import AuthState
from medicine_reminder.modules.auth.domain.failures import InfrastructureFailure
from medicine_reminder.modules.auth.domain.models.user import Admin
from medicine_reminder.modules.auth.domain.services.auth_service import AuthService
from medicine_reminder.modules.auth.infrastructure.external.auth_api_client import AuthApiClient
from medicine_reminder.modules.auth.infrastructure.external.auth_server_repository import AuthServerRepository
from medicine_reminder.shared.core.exceptions import APIResponseError
from medicine_reminder.shared.core.result import UNIT, Failure, Success
from medicine_reminder.shared.infrastructure.external_apis.api_client import APIClient

ADMIN = Admin.create(email="a@b.com", username="A")
NOT_FOUND = Failure(InfrastructureFailure.NOT_FOUND)


def make_service(stored=NOT_FOUND):
    service = Mock(spec=AuthService)
    service.get_logged_in_user.return_value = stored
    service.create_account_using_email_and_password = AsyncMock()
    service.login_using_email_and_password = AsyncMock()
    service.send_otp = AsyncMock()
    service.forgot_password = AsyncMock()
    return service


def record(controller):
    states = []
    controller.add_listener(states.append, fire_immediately=False)
    return states


class TestSessionRestore:

    def test_stored_user_is_restored(self):
        controller = AuthController(make_service(stored=Success(ADMIN)))

        assert controller.state == AuthState(admin=ADMIN, success_or_failure=Success(UNIT))

    def test_missing_user_publishes_failure(self):
        controller = AuthController(make_service())

        assert controller.state == AuthState(admin=None, success_or_failure=NOT_FOUND)
        assert controller.state.is_loading is False


class TestLoginAndCreateAccount:

    @pytest.mark.asyncio
    async def test_login_success(self, email, password):
        service = make_service()
        service.login_using_email_and_password.return_value = Success(ADMIN)
        controller = AuthController(service)
        states = record(controller)

        await controller.login_using_email_and_password(email, password)

        assert states == [
            AuthState(is_loading=True, admin=None, success_or_failure=None),
            AuthState(is_loading=False, admin=ADMIN, success_or_failure=Success(UNIT)),
        ]
        service.login_using_email_and_password.assert_awaited_once_with(email=email, password=password)

    @pytest.mark.asyncio
    async def test_login_failure_clears_admin(self, email, password):
        service = make_service(stored=Success(ADMIN))
        service.login_using_email_and_password.return_value = Failure(InfrastructureFailure.INVALID_CREDENTIALS)
        controller = AuthController(service)

        await controller.login_using_email_and_password(email, password)

        assert controller.state == AuthState(
            is_loading=False,
            admin=None,
            success_or_failure=Failure(InfrastructureFailure.INVALID_CREDENTIALS),
        )

    @pytest.mark.asyncio
    async def test_create_account_user_already_exists(self, username, email, password):
        service = make_service()
        service.create_account_using_email_and_password.return_value = Failure(
            InfrastructureFailure.USER_ALREADY_EXISTS
        )
        controller = AuthController(service)

        await controller.create_account_using_email_and_password(username, email, password)

        assert controller.state.is_loading is False
        assert controller.state.admin is None
        assert controller.state.success_or_failure == Failure(InfrastructureFailure.USER_ALREADY_EXISTS)

    @pytest.mark.asyncio
    async def test_create_account_success(self, username, email, password):
        service = make_service()
        service.create_account_using_email_and_password.return_value = Success(ADMIN)
        controller = AuthController(service)

        await controller.create_account_using_email_and_password(username, email, password)

        assert controller.state == AuthState(is_loading=False, admin=ADMIN, success_or_failure=Success(UNIT))


class TestOTPAndPasswordReset:

    @pytest.mark.asyncio
    async def test_send_otp_success_stores_code(self, email):
        service = make_service(stored=Success(ADMIN))
        service.send_otp.return_value = Success(SendOTPResponse(otp="123456"))
        controller = AuthController(service)
        states = record(controller)

        await controller.send_otp(email, is_register=True)

        assert states[0] == AuthState(is_loading=True, admin=ADMIN, success_or_failure=None)
        assert states[-1] == AuthState(is_loading=False, admin=ADMIN, otp="123456", success_or_failure=Success(UNIT))

    @pytest.mark.asyncio
    async def test_send_otp_failure(self, email):
        service = make_service()
        service.send_otp.return_value = Failure(InfrastructureFailure.USER_ALREADY_EXISTS)
        controller = AuthController(service)

        await controller.send_otp(email, is_register=True)

        assert controller.state.otp is None
        assert controller.state.success_or_failure == Failure(InfrastructureFailure.USER_ALREADY_EXISTS)
        assert controller.state.is_loading is False

    @pytest.mark.asyncio
    async def test_forgot_password(self, email, password, otp):
        service = make_service()
        service.forgot_password.return_value = Success(ForgotPasswordResponse(message="ok"))
        controller = AuthController(service)
        states = record(controller)

        await controller.forgot_password(email, password, otp)

        assert [state.is_loading for state in states] == [True, False]
        assert controller.state.success_or_failure == Success(UNIT)

    @pytest.mark.asyncio
    async def test_forgot_password_failure(self, email, password, otp):
        service = make_service()
        service.forgot_password.return_value = Failure(InfrastructureFailure.INVALID_CREDENTIALS)
        controller = AuthController(service)

        await controller.forgot_password(email, password, otp)

        assert controller.state.success_or_failure == Failure(InfrastructureFailure.INVALID_CREDENTIALS)


class TestSignOut:

    def test_sign_out_success_clears_admin(self):
        service = make_service(stored=Success(ADMIN))
        service.sign_out.return_value = Success(UNIT)
        controller = AuthController(service)
        states = record(controller)

        controller.sign_out()

        assert states == [
            AuthState(admin=ADMIN, success_or_failure=None),
            AuthState(admin=None, success_or_failure=Success(UNIT)),
        ]

    def test_sign_out_failure_keeps_admin(self):
        service = make_service(stored=Success(ADMIN))
        service.sign_out.return_value = Failure(InfrastructureFailure.DELETE_FAILURE)
        controller = AuthController(service)

        controller.sign_out()

        assert controller.state.admin == ADMIN
        assert controller.state.success_or_failure == Failure(InfrastructureFailure.DELETE_FAILURE)


class TestStateSnapshots:

    def test_snapshots_are_frozen(self):
        controller = AuthController(make_service())
        with pytest.raises(ValidationError):
            controller.state.is_loading = True

    def test_outcome_must_be_a_result(self):
        assert AuthState(success_or_failure=NOT_FOUND).success_or_failure is NOT_FOUND
        with pytest.raises(ValidationError):
            AuthState(success_or_failure="notFound")

    def test_previous_snapshot_is_untouched(self):
        service = make_service(stored=Success(ADMIN))
        service.sign_out.return_value = Success(UNIT)
        controller = AuthController(service)
        before = controller.state

        controller.sign_out()

        assert before.admin == ADMIN
        assert controller.state is not before


class TestEndToEnd:
    """Controller wired to the real repositories, with only the HTTP client faked."""

    @pytest.mark.asyncio
    async def test_login_persists_user_and_publishes_success(
        self, mock_auth_api_client, auth_local_repository, email, password
    ):
        mock_auth_api_client.login.return_value = {"email": "a@b.com", "username": "A"}
        service = AuthService(AuthServerRepository(mock_auth_api_client), auth_local_repository)
        controller = AuthController(service)

        await controller.login_using_email_and_password(email, password)

        assert controller.state.is_loading is False
        assert controller.state.admin == ADMIN
        assert controller.state.success_or_failure == Success(UNIT)
        assert auth_local_repository.get_logged_in_user() == Success(ADMIN)

    @pytest.mark.asyncio
    async def test_create_account_conflict_publishes_failure(
        self, mock_auth_api_client, auth_local_repository, username, email, password
    ):
        mock_auth_api_client.create_account.side_effect = APIResponseError(
            status=409, data={"error": "userAlreadyExists"}
        )
        service = AuthService(AuthServerRepository(mock_auth_api_client), auth_local_repository)
        controller = AuthController(service)

        await controller.create_account_using_email_and_password(username, email, password)

        assert controller.state.admin is None
        assert controller.state.success_or_failure == Failure(InfrastructureFailure.USER_ALREADY_EXISTS)
        assert auth_local_repository.get_logged_in_user() == NOT_FOUND

    @pytest.mark.asyncio
    async def test_sign_out_then_restore_finds_nobody(
        self, mock_auth_api_client, auth_local_repository, email, password
    ):
        mock_auth_api_client.login.return_value = {"email": "a@b.com", "username": "A"}
        service = AuthService(AuthServerRepository(mock_auth_api_client), auth_local_repository)
        controller = AuthController(service)
        await controller.login_using_email_and_password(email, password)

        controller.sign_out()

        assert AuthController(service).state == AuthState(success_or_failure=NOT_FOUND)


async def garbled_body(request):
    status = 500 if request.path == "/auth/login" else 200
    return web.Response(body=b"\xff\xfe\xfa", status=status, content_type="application/json")


@pytest_asyncio.fixture
async def garbled_server():
    app = web.Application()
    app.router.add_post("/auth/login", garbled_body)
    app.router.add_post("/auth/send-otp", garbled_body)
    test_server = test_utils.TestServer(app)
    await test_server.start_server()
    yield test_server
    await test_server.close()


@pytest_asyncio.fixture
async def http_controller(garbled_server, auth_local_repository):
    api_client = APIClient(base_url=str(garbled_server.make_url("/")), api_name="test-api", timeout=5)
    server_repository = AuthServerRepository(AuthApiClient(api_client))
    yield AuthController(AuthService(server_repository, auth_local_repository))
    await api_client.close()


class TestOverHttp:
    """Controller wired to the real repositories and a live HTTP server."""

    @pytest.mark.asyncio
    async def test_non_utf8_error_body_ends_loading(self, http_controller, email, password):
        await http_controller.login_using_email_and_password(email, password)

        assert http_controller.state.is_loading is False
        assert http_controller.state.admin is None
        assert http_controller.state.success_or_failure == Failure(InfrastructureFailure.SERVER_ERROR)

    @pytest.mark.asyncio
    async def test_non_utf8_success_body_ends_loading(self, http_controller, email):
        await http_controller.send_otp(email, is_register=True)

        assert http_controller.state.is_loading is False
        assert http_controller.state.otp is None
        assert http_controller.state.success_or_failure == Failure(InfrastructureFailure.SERVER_ERROR)
