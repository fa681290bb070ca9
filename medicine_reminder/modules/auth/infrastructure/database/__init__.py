"""
Local side of the auth module: ORM model and session repository.
"""

from .auth_local_repository import AuthLocalRepository
from .models import AuthLocalModel

__all__ = [
    "AuthLocalModel",
    "AuthLocalRepository",
]
