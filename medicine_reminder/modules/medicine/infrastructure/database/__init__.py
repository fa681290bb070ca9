"""
Local persistence for medicines.
"""

from .medicine_repository_impl import MedicineRepositoryImpl
from .models import MedicineModel

__all__ = [
    "MedicineModel",
    "MedicineRepositoryImpl",
]
