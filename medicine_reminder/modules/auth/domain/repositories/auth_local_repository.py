# 📄 File: medicine_reminder/modules/auth/domain/repositories/auth_local_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how the app remembers, looks up and forgets the person signed in on this device
# 🧪 Purpose (Technical Summary):
# Repository interface for the single locally persisted user record. Synchronous;
# failures are returned as NOT_FOUND / WRITE_FAILURE / DELETE_FAILURE values.
# 🔗 Dependencies:
# abc, shared result type
# 🔄 Connected Modules / Calls From:
# auth_service.py, infrastructure/database/auth_local_repository.py

from abc import ABC, abstractmethod

from medicine_reminder.shared.core.result import Result


class BaseAuthLocalRepository(ABC):
    """Repository interface for the device-local session record."""

    @abstractmethod
    def get_logged_in_user(self) -> Result:
        """
        Read the stored user.

        Returns:
            Success(Admin), or Failure(NOT_FOUND) when nobody is signed in
        """
        pass

    @abstractmethod
    def save_logged_in_user(self, response) -> Result:
        """
        Store the user returned by the server, replacing any previous record.

        Args:
            response: UserApiResponse from login or account creation

        Returns:
            Success(Admin) or Failure(WRITE_FAILURE)
        """
        pass

    @abstractmethod
    def sign_out(self) -> Result:
        """
        Delete every locally stored auth record.

        Returns:
            Success(UNIT) or Failure(DELETE_FAILURE)
        """
        pass
