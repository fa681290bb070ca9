# 📄 File: medicine_reminder/modules/auth/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the auth data models: the signed-in user and the checked input fields
# 🧪 Purpose (Technical Summary):
# Package initialization exporting the Admin entity and the input value objects
# 🔗 Dependencies:
# pydantic, shared validators
# 🔄 Connected Modules / Calls From:
# Auth repositories, auth service, application layer

from .user import Admin
from .value_objects import OTP, EmailAddress, Password, Username, ValueObject

__all__ = [
    "Admin",
    "EmailAddress",
    "Password",
    "Username",
    "OTP",
    "ValueObject",
]
