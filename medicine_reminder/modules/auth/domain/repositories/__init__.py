"""
Auth repository interfaces.

Concrete implementations live in the infrastructure layer.
"""

from .auth_local_repository import BaseAuthLocalRepository
from .auth_server_repository import BaseAuthServerRepository

__all__ = [
    "BaseAuthLocalRepository",
    "BaseAuthServerRepository",
]
