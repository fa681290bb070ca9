# 📄 File: medicine_reminder/modules/auth/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The layer that runs sign-in actions for the screens and keeps their state
# 🧪 Purpose (Technical Summary):
# Auth application layer: DTOs, AuthState snapshot and the AuthController state notifier
# 🔗 Dependencies:
# pydantic, auth domain, shared.core.state_notifier
# 🔄 Connected Modules / Calls From:
# presentation/dependencies.py, medicine_reminder.main

__all__ = []
