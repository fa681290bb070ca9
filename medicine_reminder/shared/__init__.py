# 📄 File: medicine_reminder/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a package of common tools that every part of the
# Medicine Reminder app can use, like settings, logging and the local database.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, result/error types, logging,
# validators, and infrastructure (SQLite engine, HTTP client).
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management
- Result and exception types
- Observable state primitive
- Local database and HTTP client infrastructure
- Validators and logging utilities
"""

__all__ = []
