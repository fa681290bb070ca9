# 📄 File: medicine_reminder/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python that this folder holds the Medicine Reminder app code and records
# the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Package initialization with version metadata for the Medicine Reminder
# client core (authentication flow and local medicine storage).
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - medicine_reminder.main (application bootstrap)
# - Package imports throughout the application

"""
Medicine Reminder - Client Core

Authentication against the reminder API, on-device persistence of the
logged-in user and of scheduled medicines, and an observable auth state
for the UI layer.
"""

__version__ = "1.0.0"
__title__ = "Medicine Reminder"
__description__ = "Medicine reminder client core: auth flow and local medicine storage"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
