# 📄 File: medicine_reminder/modules/auth/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes everything about signing up, logging in, one-time codes and signing out
# 🧪 Purpose (Technical Summary):
# Package initialization for the auth module, laid out as domain / application /
# infrastructure / presentation layers
# 🔗 Dependencies:
# pydantic, aiohttp, SQLAlchemy, medicine_reminder.shared
# 🔄 Connected Modules / Calls From:
# medicine_reminder.main

"""
Auth Module

- Domain: Admin entity, input value objects, failure taxonomy, AuthService
- Application: request/response DTOs, AuthState, AuthController
- Infrastructure: AuthServerRepository (remote API), AuthLocalRepository (SQLite)
- Presentation: dependency factories
"""

__version__ = "1.0.0"

__all__ = []
