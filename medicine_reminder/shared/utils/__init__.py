"""
Shared utilities: structured logging and field validators.
"""

from .logging import get_logger, log_context, setup_logging, StructuredLogger
from .validators import (
    ValidationResult,
    validate_email_address,
    validate_otp,
    validate_password,
    validate_username,
)

__all__ = [
    "get_logger",
    "log_context",
    "setup_logging",
    "StructuredLogger",
    "ValidationResult",
    "validate_email_address",
    "validate_otp",
    "validate_password",
    "validate_username",
]
