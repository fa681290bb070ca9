# 📄 File: medicine_reminder/shared/infrastructure/external_apis/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the code the app uses to talk to servers on the internet
# 🧪 Purpose (Technical Summary):
# Exports the generic aiohttp-based APIClient and its settings factory
# 🔗 Dependencies:
# aiohttp, medicine_reminder.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# medicine_reminder.modules.auth.infrastructure.external, medicine_reminder.main

from .api_client import APIClient, create_api_client

__all__ = [
    "APIClient",
    "create_api_client",
]
