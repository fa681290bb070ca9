"""
Medicine domain models.
"""

from .medicine import Medicine

__all__ = ["Medicine"]
