"""
Medicine domain layer: entity and repository interface.
"""

from .models import Medicine
from .repositories import MedicineRepository

__all__ = [
    "Medicine",
    "MedicineRepository",
]
