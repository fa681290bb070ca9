"""
Medicine infrastructure layer: SQLAlchemy model and repository.
"""

__all__ = []
