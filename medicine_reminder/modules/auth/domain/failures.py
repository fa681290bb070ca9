# 📄 File: medicine_reminder/modules/auth/domain/failures.py
# 🧭 Purpose (Layman Explanation):
# Lists every way a sign-in related action can fail, so the screen can show the right message
# 🧪 Purpose (Technical Summary):
# Closed failure taxonomy shared by the server repository, the local repository, the
# auth service and the auth controller. Values match the codes the auth server sends.
# 🔗 Dependencies:
# enum
# 🔄 Connected Modules / Calls From:
# auth_server_repository.py, auth_local_repository.py, auth_service.py, controller.py, dto/responses.py

from enum import Enum
from typing import Dict, FrozenSet


class ServerFailure(str, Enum):
    """Error codes the auth server reports in an error body"""
    INVALID_DATA = "invalidData"
    USER_ALREADY_EXISTS = "userAlreadyExists"
    INVALID_CREDENTIALS = "invalidCredentials"


class InfrastructureFailure(str, Enum):
    """Every failure an auth operation can return as a value"""
    # Remote
    INVALID_DATA = "invalidData"
    SERVER_ERROR = "serverError"
    USER_ALREADY_EXISTS = "userAlreadyExists"
    INVALID_CREDENTIALS = "invalidCredentials"
    # Local storage
    NOT_FOUND = "notFound"
    WRITE_FAILURE = "writeFailure"
    DELETE_FAILURE = "deleteFailure"

    @classmethod
    def from_server_failure(cls, server_failure: ServerFailure) -> "InfrastructureFailure":
        return cls(server_failure.value)


class AuthEndpoint(str, Enum):
    """Remote auth endpoints, relative to the API base URL"""
    CREATE_ACCOUNT = "/auth/create-account"
    LOGIN = "/auth/login"
    SEND_OTP = "/auth/send-otp"
    FORGOT_PASSWORD = "/auth/forgot-password"


# Error codes each endpoint is known to return; anything else is a server error
ENDPOINT_FAILURES: Dict[AuthEndpoint, FrozenSet[ServerFailure]] = {
    AuthEndpoint.CREATE_ACCOUNT: frozenset({
        ServerFailure.INVALID_DATA,
        ServerFailure.USER_ALREADY_EXISTS,
    }),
    AuthEndpoint.LOGIN: frozenset({
        ServerFailure.INVALID_DATA,
        ServerFailure.INVALID_CREDENTIALS,
    }),
    AuthEndpoint.SEND_OTP: frozenset({
        ServerFailure.INVALID_DATA,
        ServerFailure.INVALID_CREDENTIALS,
        ServerFailure.USER_ALREADY_EXISTS,
    }),
    AuthEndpoint.FORGOT_PASSWORD: frozenset({
        ServerFailure.INVALID_DATA,
        ServerFailure.INVALID_CREDENTIALS,
    }),
}


def map_server_failure(endpoint: AuthEndpoint, server_failure) -> InfrastructureFailure:
    """
    Map an error code reported by one endpoint to a failure value.

    Args:
        endpoint: Endpoint that produced the error
        server_failure: Parsed ServerFailure, or None when the body carried no known code

    Returns:
        The matching InfrastructureFailure, SERVER_ERROR for codes outside the endpoint's table
    """
    if server_failure is None or server_failure not in ENDPOINT_FAILURES[endpoint]:
        return InfrastructureFailure.SERVER_ERROR
    return InfrastructureFailure.from_server_failure(server_failure)


__all__ = [
    "ServerFailure",
    "InfrastructureFailure",
    "AuthEndpoint",
    "ENDPOINT_FAILURES",
    "map_server_failure",
]
