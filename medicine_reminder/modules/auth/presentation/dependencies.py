# 📄 File: medicine_reminder/modules/auth/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Puts the sign-in machinery together piece by piece so the screens get a ready-to-use controller
# 🧪 Purpose (Technical Summary):
# Dependency factories for the auth module: APIClient -> AuthApiClient -> AuthServerRepository,
# LocalDatabase -> AuthLocalRepository, both -> AuthService -> AuthController.
# 🔗 Dependencies:
# Auth infrastructure, domain service, application controller, shared infrastructure
# 🔄 Connected Modules / Calls From:
# medicine_reminder.main, tests

from medicine_reminder.modules.auth.application.controller import AuthController
from medicine_reminder.modules.auth.domain.services.auth_service import AuthService
from medicine_reminder.modules.auth.infrastructure.database.auth_local_repository import AuthLocalRepository
from medicine_reminder.modules.auth.infrastructure.external.auth_api_client import AuthApiClient
from medicine_reminder.modules.auth.infrastructure.external.auth_server_repository import AuthServerRepository
from medicine_reminder.shared.infrastructure.database.connection import LocalDatabase
from medicine_reminder.shared.infrastructure.external_apis.api_client import APIClient


def get_auth_api_client(api_client: APIClient) -> AuthApiClient:
    return AuthApiClient(api_client)


def get_auth_server_repository(auth_api_client: AuthApiClient) -> AuthServerRepository:
    return AuthServerRepository(auth_api_client)


def get_auth_local_repository(database: LocalDatabase) -> AuthLocalRepository:
    return AuthLocalRepository(database)


def get_auth_service(api_client: APIClient, database: LocalDatabase) -> AuthService:
    """
    Build the auth coordinator from its two backends.

    Args:
        api_client: Shared HTTP client pointed at the auth server
        database: Local database holding the session record

    Returns:
        AuthService wired to a server and a local repository
    """
    return AuthService(
        server_repository=get_auth_server_repository(get_auth_api_client(api_client)),
        local_repository=get_auth_local_repository(database)
    )


def get_auth_controller(auth_service: AuthService) -> AuthController:
    """Build the controller; this restores any stored session immediately."""
    return AuthController(auth_service)


__all__ = [
    "get_auth_api_client",
    "get_auth_server_repository",
    "get_auth_local_repository",
    "get_auth_service",
    "get_auth_controller",
]
