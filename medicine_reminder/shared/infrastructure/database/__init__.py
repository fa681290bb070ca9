"""
Local database infrastructure: declarative Base, engine and session scope.
"""

from .connection import Base, LocalDatabase, create_local_database

__all__ = [
    "Base",
    "LocalDatabase",
    "create_local_database",
]
