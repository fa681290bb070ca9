"""
Core utilities package for the Medicine Reminder app.
Provides the result type, the exception hierarchy and the observable state holder.
"""

from .exceptions import (
    MedicineReminderException,
    ExternalAPIError,
    APIResponseError,
    APITimeoutError,
    DatabaseError,
    RepositoryError,
    NotFoundError,
)
from .result import Failure, Result, Success, Unit, UNIT
from .state_notifier import StateNotifier

__all__ = [
    # Exceptions
    "MedicineReminderException",
    "ExternalAPIError",
    "APIResponseError",
    "APITimeoutError",
    "DatabaseError",
    "RepositoryError",
    "NotFoundError",
    # Result
    "Failure",
    "Result",
    "Success",
    "Unit",
    "UNIT",
    # State
    "StateNotifier",
]
