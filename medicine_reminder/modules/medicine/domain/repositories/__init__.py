"""
Medicine repository interfaces.
"""

from .medicine_repository import MedicineRepository

__all__ = ["MedicineRepository"]
