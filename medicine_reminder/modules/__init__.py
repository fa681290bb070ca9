"""
Feature modules of the Medicine Reminder app.

- auth: account creation, login, OTP, password reset and the local session
- medicine: locally stored medicine schedules
"""

__all__ = []
