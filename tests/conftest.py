"""Shared fixtures for the Medicine Reminder test suite."""

from unittest.mock import AsyncMock, Mock

import pytest

from medicine_reminder.modules.auth.application.dto.response_dto import UserApiResponse
from medicine_reminder.modules.auth.domain.models.value_objects import OTP, EmailAddress, Password, Username
from medicine_reminder.modules.auth.domain.repositories.auth_local_repository import BaseAuthLocalRepository
from medicine_reminder.modules.auth.domain.repositories.auth_server_repository import BaseAuthServerRepository
from medicine_reminder.modules.auth.infrastructure.database.auth_local_repository import AuthLocalRepository
from medicine_reminder.modules.auth.infrastructure.external.auth_api_client import AuthApiClient
from medicine_reminder.shared.config.settings import Settings
from medicine_reminder.shared.infrastructure.database.connection import create_local_database

TEST_EMAIL = "a@b.com"
TEST_USERNAME = "A"
TEST_PASSWORD = "Secret1!"


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file."""
    return Settings(
        _env_file=None,
        API_BASE_URL="http://api.example.com",
        LOCAL_DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        ENVIRONMENT="test",
        LOG_FORMAT="text",
    )


@pytest.fixture
def database(settings):
    """Local database with the schema created."""
    db = create_local_database(settings)
    yield db
    db.dispose()


@pytest.fixture
def auth_local_repository(database):
    return AuthLocalRepository(database)


@pytest.fixture
def user_response():
    return UserApiResponse(email=TEST_EMAIL, username=TEST_USERNAME)


@pytest.fixture
def email():
    return EmailAddress(TEST_EMAIL)


@pytest.fixture
def password():
    return Password(TEST_PASSWORD)


@pytest.fixture
def username():
    return Username("alice_01")


@pytest.fixture
def otp():
    return OTP("123456")


@pytest.fixture
def mock_auth_api_client():
    """AuthApiClient double; every endpoint is an AsyncMock."""
    client = Mock(spec=AuthApiClient)
    client.create_account = AsyncMock()
    client.login = AsyncMock()
    client.send_otp = AsyncMock()
    client.forgot_password = AsyncMock()
    return client


@pytest.fixture
def mock_server_repository():
    repository = Mock(spec=BaseAuthServerRepository)
    repository.create_account_using_email_and_password = AsyncMock()
    repository.login_using_email_and_password = AsyncMock()
    repository.send_otp = AsyncMock()
    repository.forgot_password = AsyncMock()
    return repository


@pytest.fixture
def mock_local_repository():
    return Mock(spec=BaseAuthLocalRepository)
