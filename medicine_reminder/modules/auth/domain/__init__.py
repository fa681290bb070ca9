# 📄 File: medicine_reminder/modules/auth/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules of signing in, independent of servers and databases
# 🧪 Purpose (Technical Summary):
# Auth domain layer: Admin entity, value objects, failure taxonomy, repository interfaces, AuthService
# 🔗 Dependencies:
# pydantic, shared.core.result
# 🔄 Connected Modules / Calls From:
# Auth application and infrastructure layers

from .failures import AuthEndpoint, InfrastructureFailure, ServerFailure, map_server_failure
from .models import OTP, Admin, EmailAddress, Password, Username
from .repositories import BaseAuthLocalRepository, BaseAuthServerRepository
from .services import AuthService

__all__ = [
    "Admin",
    "EmailAddress",
    "Password",
    "Username",
    "OTP",
    "AuthEndpoint",
    "InfrastructureFailure",
    "ServerFailure",
    "map_server_failure",
    "BaseAuthLocalRepository",
    "BaseAuthServerRepository",
    "AuthService",
]
