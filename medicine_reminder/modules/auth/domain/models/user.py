# 📄 File: medicine_reminder/modules/auth/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Describes the person signed in on this device: their email and their username
# 🧪 Purpose (Technical Summary):
# Admin domain entity (the local user record). Immutable; built from the server's user
# payload or from the local database row.
# 🔗 Dependencies:
# pydantic, value_objects
# 🔄 Connected Modules / Calls From:
# auth_local_repository.py, auth_service.py, application/state.py, medicine_repository_impl.py

from typing import Any

from pydantic import BaseModel, ConfigDict

from .value_objects import EmailAddress, Username


class Admin(BaseModel):
    """
    The user signed in on this device.

    There is at most one Admin stored locally. It exists after a successful
    login, account creation or session restore and is removed on sign-out.
    The email doubles as the user's identifier for locally stored medicines.
    """

    model_config = ConfigDict(frozen=True)

    email: EmailAddress
    username: Username

    @classmethod
    def create(cls, email: str, username: str) -> "Admin":
        """Build an Admin from raw strings."""
        return cls(email=EmailAddress(email), username=Username(username))

    @classmethod
    def from_response(cls, response: Any) -> "Admin":
        """
        Build an Admin from a server user payload.

        Args:
            response: Object exposing ``email`` and ``username`` strings (UserApiResponse)

        Returns:
            Admin entity
        """
        return cls.create(email=response.email, username=response.username)

    @property
    def user_id(self) -> str:
        return self.email.value


__all__ = ["Admin"]
