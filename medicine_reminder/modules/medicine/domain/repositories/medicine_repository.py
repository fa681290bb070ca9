# 📄 File: medicine_reminder/modules/medicine/domain/repositories/medicine_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how medicines are saved, found and removed on the device
# 🧪 Purpose (Technical Summary):
# Repository interface for Medicine entities over the local database. Synchronous.
# 🔗 Dependencies:
# abc, Medicine, auth Admin
# 🔄 Connected Modules / Calls From:
# infrastructure/database/medicine_repository_impl.py, medicine_reminder.main

from abc import ABC, abstractmethod
from typing import List, Optional

from medicine_reminder.modules.auth.domain.models.user import Admin

from ..models.medicine import Medicine


class MedicineRepository(ABC):
    """
    Repository interface for locally stored medicines.

    Implementation Notes:
    - Methods return domain entities, not database models
    - The owner link is an identifier; get_owner is an explicit lookup
    - Deleting a user never deletes medicines
    """

    @abstractmethod
    def save(self, medicine: Medicine) -> Medicine:
        """
        Insert a new medicine or update an existing one.

        Args:
            medicine: Medicine to store; inserted when id is None

        Returns:
            Stored Medicine with its id populated

        Raises:
            NotFoundError: If the medicine has an id that is not stored
            RepositoryError: If the database operation fails
        """
        pass

    @abstractmethod
    def get_by_id(self, medicine_id: int) -> Optional[Medicine]:
        """
        Get medicine by ID.

        Returns:
            Medicine if found, None otherwise
        """
        pass

    @abstractmethod
    def list_for_user(self, user_id: str) -> List[Medicine]:
        """
        List the medicines of one user, oldest first.

        Args:
            user_id: Owner identifier (email)
        """
        pass

    @abstractmethod
    def delete(self, medicine_id: int) -> bool:
        """
        Delete a medicine.

        Returns:
            True if a medicine was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    def get_owner(self, medicine: Medicine) -> Optional[Admin]:
        """
        Look up the locally stored user owning a medicine.

        Returns:
            Admin if the owner is stored on this device, None otherwise
        """
        pass
