# 📄 File: medicine_reminder/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# Defines the special error types the app's plumbing uses internally when the server
# or the on-device database misbehaves, before they are turned into friendly failures.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy with error codes and structured details. Raised inside
# infrastructure (HTTP client, SQLite repositories) and converted to failure values
# at the repository boundary.
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# shared.infrastructure.external_apis.api_client, shared.infrastructure.database,
# auth and medicine infrastructure repositories

from typing import Any, Dict, Optional


class MedicineReminderException(Exception):
    """
    Base exception class for the Medicine Reminder application.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# =============================================================================
# EXTERNAL API EXCEPTIONS
# =============================================================================

class ExternalAPIError(MedicineReminderException):
    """
    Exception raised for external API failures.
    Used when the request never produced a usable response (connection refused,
    DNS failure, malformed payload).
    """

    def __init__(
        self,
        message: str = "External API error",
        api_name: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "EXTERNAL_API_ERROR"
    ):
        if not details:
            details = {}

        if api_name:
            details["api_name"] = api_name

        super().__init__(
            message=message,
            details=details,
            error_code=error_code
        )


class APIResponseError(ExternalAPIError):
    """
    Exception raised when the API answered with a non-2xx status.

    Carries the status code and the decoded body so callers can read the
    structured error code the server sent back.
    """

    def __init__(
        self,
        status: int,
        data: Any = None,
        api_name: Optional[str] = None,
        method: Optional[str] = None,
        url: Optional[str] = None
    ):
        self.status = status
        self.data = data
        super().__init__(
            message=f"{api_name or 'API'} responded with status {status}",
            api_name=api_name,
            details={"status": status, "method": method, "url": url},
            error_code="API_RESPONSE_ERROR"
        )


class APITimeoutError(ExternalAPIError):
    """Exception raised when an external API call times out."""

    def __init__(self, api_name: str, timeout_seconds: Optional[float] = None):
        super().__init__(
            message=f"{api_name} API request timed out after {timeout_seconds} seconds",
            api_name=api_name,
            details={"timeout_seconds": timeout_seconds},
            error_code="API_TIMEOUT_ERROR"
        )


# =============================================================================
# PERSISTENCE EXCEPTIONS
# =============================================================================

class DatabaseError(MedicineReminderException):
    """
    Exception raised for local database failures.
    Used for connection problems and failed statements.
    """

    def __init__(
        self,
        message: str = "Database operation failed",
        operation: Optional[str] = None,
        table: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table

        super().__init__(
            message=message,
            details=details,
            error_code="DATABASE_ERROR"
        )


class RepositoryError(MedicineReminderException):
    """Exception raised when a repository cannot complete an operation."""

    def __init__(
        self,
        message: str = "Repository operation failed",
        repository: Optional[str] = None,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if repository:
            details["repository"] = repository
        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            details=details,
            error_code="REPOSITORY_ERROR"
        )


class NotFoundError(MedicineReminderException):
    """
    Exception raised when requested resource is not found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            details=details,
            error_code="NOT_FOUND"
        )


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def exception_to_dict(exception: Exception) -> Dict[str, Any]:
    """
    Convert any exception to a dictionary format.

    Args:
        exception: Exception to convert

    Returns:
        Dictionary representation of the exception
    """
    if isinstance(exception, MedicineReminderException):
        return exception.to_dict()

    return {
        "error": {
            "code": "INTERNAL_ERROR",
            "message": str(exception) or exception.__class__.__name__,
            "details": {"exception_type": exception.__class__.__name__},
        }
    }
