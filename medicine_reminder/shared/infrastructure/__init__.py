"""
Infrastructure layer package for the Medicine Reminder app.
Provides the local database connection and the external API client.
"""

__all__ = []
