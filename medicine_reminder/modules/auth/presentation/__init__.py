"""
Auth presentation layer: dependency factories used by the application bootstrap.
"""

from .dependencies import (
    get_auth_api_client,
    get_auth_controller,
    get_auth_local_repository,
    get_auth_server_repository,
    get_auth_service,
)

__all__ = [
    "get_auth_api_client",
    "get_auth_controller",
    "get_auth_local_repository",
    "get_auth_server_repository",
    "get_auth_service",
]
