# 📄 File: medicine_reminder/shared/utils/validators.py

# 🧭 Purpose (Layman Explanation):
# Checks that what a person types on the sign-in screens (email, password, username,
# one-time code) looks right before the app bothers the server with it.

# 🧪 Purpose (Technical Summary):
# Field validators returning ValidationResult objects. Backs the is_valid() predicate
# of the auth value objects; email syntax is checked with email-validator, offline.

# 🔗 Dependencies:
# - email-validator: RFC-compliant email syntax checks
# - re: pattern matching

# 🔄 Connected Modules / Calls From:
# Used by: medicine_reminder.modules.auth.domain.models.value_objects

import re
from typing import List, Optional

from email_validator import EmailNotValidError, validate_email

# Password validation patterns
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128
PASSWORD_PATTERNS = {
    'uppercase': re.compile(r'[A-Z]'),
    'lowercase': re.compile(r'[a-z]'),
    'digit': re.compile(r'\d'),
    'special': re.compile(r'[!@#$%^&*(),.?":{}|<>_\-+=\[\]~;\'/\\`]'),
    'no_spaces': re.compile(r'^\S+$')
}

EMAIL_MAX_LENGTH = 254
USERNAME_PATTERN = re.compile(r'^[a-zA-Z0-9_]{3,30}$')
RESERVED_USERNAMES = {'admin', 'root', 'system', 'api', 'support'}
OTP_LENGTH = 6
OTP_PATTERN = re.compile(r'^\d{%d}$' % OTP_LENGTH)


class ValidationResult:
    """Result object for validation operations"""
    def __init__(self, is_valid: bool, errors: Optional[List[str]] = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: str):
        """Add validation error"""
        self.errors.append(error)
        self.is_valid = False

    def __bool__(self) -> bool:
        return self.is_valid

    def __repr__(self) -> str:
        return f"ValidationResult(is_valid={self.is_valid}, errors={self.errors})"


# ==============================================================================
# EMAIL VALIDATION
# ==============================================================================

def validate_email_address(email: str) -> ValidationResult:
    """
    Validate email address format (syntax only, no DNS lookup)

    Args:
        email: Email address to validate

    Returns:
        ValidationResult with validation status and errors
    """
    result = ValidationResult(True)

    if not email or not isinstance(email, str):
        result.add_error("Email address is required")
        return result

    if len(email) > EMAIL_MAX_LENGTH:
        result.add_error(f"Email address is too long (max {EMAIL_MAX_LENGTH} characters)")

    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError as e:
        result.add_error(f"Invalid email format: {str(e)}")

    return result


# ==============================================================================
# PASSWORD VALIDATION
# ==============================================================================

def validate_password(password: str) -> ValidationResult:
    """
    Validate password strength requirements

    Args:
        password: Password to validate

    Returns:
        ValidationResult with validation status and errors
    """
    result = ValidationResult(True)

    if not password or not isinstance(password, str):
        result.add_error("Password is required")
        return result

    if len(password) < PASSWORD_MIN_LENGTH:
        result.add_error(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")

    if len(password) > PASSWORD_MAX_LENGTH:
        result.add_error(f"Password must be no more than {PASSWORD_MAX_LENGTH} characters long")

    if not PASSWORD_PATTERNS['uppercase'].search(password):
        result.add_error("Password must contain at least one uppercase letter")

    if not PASSWORD_PATTERNS['lowercase'].search(password):
        result.add_error("Password must contain at least one lowercase letter")

    if not PASSWORD_PATTERNS['digit'].search(password):
        result.add_error("Password must contain at least one digit")

    if not PASSWORD_PATTERNS['special'].search(password):
        result.add_error("Password must contain at least one special character")

    if not PASSWORD_PATTERNS['no_spaces'].match(password):
        result.add_error("Password cannot contain spaces")

    return result


# ==============================================================================
# USERNAME AND OTP VALIDATION
# ==============================================================================

def validate_username(username: str) -> ValidationResult:
    """
    Validate username format

    Args:
        username: Username to validate

    Returns:
        ValidationResult with validation status and errors
    """
    result = ValidationResult(True)

    if not username or not isinstance(username, str):
        result.add_error("Username is required")
        return result

    if not USERNAME_PATTERN.fullmatch(username):
        result.add_error("Username must be 3-30 letters, numbers, or underscores")

    if username.lower() in RESERVED_USERNAMES:
        result.add_error("Username is reserved and cannot be used")

    return result


def validate_otp(otp: str) -> ValidationResult:
    """Validate a one-time password: exactly OTP_LENGTH digits."""
    result = ValidationResult(True)

    if not otp or not isinstance(otp, str):
        result.add_error("OTP is required")
        return result

    if not OTP_PATTERN.fullmatch(otp):
        result.add_error(f"OTP must be exactly {OTP_LENGTH} digits")

    return result
