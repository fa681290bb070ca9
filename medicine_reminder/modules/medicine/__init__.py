# 📄 File: medicine_reminder/modules/medicine/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the medicines kept in the pill box and their reminder times
# 🧪 Purpose (Technical Summary):
# Package initialization for the medicine module: Medicine entity, repository interface
# and its SQLAlchemy implementation over the local database
# 🔗 Dependencies:
# pydantic, SQLAlchemy
# 🔄 Connected Modules / Calls From:
# medicine_reminder.main

__all__ = []
