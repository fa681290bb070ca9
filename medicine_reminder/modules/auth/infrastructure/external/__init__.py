"""
Remote side of the auth module: HTTP client and server repository.
"""

from .auth_api_client import AuthApiClient
from .auth_server_repository import AuthServerRepository

__all__ = [
    "AuthApiClient",
    "AuthServerRepository",
]
