# 📄 File: medicine_reminder/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the settings that tell the app which server to talk to, where to keep
# its on-device database, and how much to log.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting the pydantic-settings model
# and its cached factory.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - medicine_reminder.main (application bootstrap)
# - Logging setup, database connection, API client

"""
Configuration Management Package

Environment-based settings for the API endpoint, local database and logging.
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
