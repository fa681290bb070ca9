# 📄 File: medicine_reminder/modules/auth/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The parts of sign-in that talk to the outside world: the server and the phone's storage
# 🧪 Purpose (Technical Summary):
# Auth infrastructure layer: aiohttp-backed server repository and SQLAlchemy-backed local repository
# 🔗 Dependencies:
# aiohttp (through APIClient), SQLAlchemy
# 🔄 Connected Modules / Calls From:
# presentation/dependencies.py

__all__ = []
