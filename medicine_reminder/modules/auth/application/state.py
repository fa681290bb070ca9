# 📄 File: medicine_reminder/modules/auth/application/state.py
# 🧭 Purpose (Layman Explanation):
# A snapshot of what the sign-in screens should show right now: busy or not, who is
# signed in, the last one-time code and whether the last action worked.
# 🧪 Purpose (Technical Summary):
# Immutable AuthState published by AuthController. Replaced through copy_with(), never mutated.
# 🔗 Dependencies:
# pydantic, auth domain Admin
# 🔄 Connected Modules / Calls From:
# controller.py, UI subscribers

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, InstanceOf

from medicine_reminder.modules.auth.domain.models.user import Admin
from medicine_reminder.shared.core.result import Failure, Success


class AuthState(BaseModel):
    """
    Auth screen state snapshot.

    Attributes:
        is_loading: A remote operation is in flight
        admin: The signed-in user, if any
        otp: Last one-time password returned by send-otp
        success_or_failure: Result of the last operation (Success(UNIT) or
            Failure(InfrastructureFailure)); None while loading or before any operation
    """

    model_config = ConfigDict(frozen=True)

    is_loading: bool = False
    admin: Optional[Admin] = None
    otp: Optional[str] = None
    success_or_failure: Optional[Union[InstanceOf[Success], InstanceOf[Failure]]] = None

    @classmethod
    def initial(cls) -> "AuthState":
        return cls()

    def copy_with(self, **changes: Any) -> "AuthState":
        """Return a new snapshot with the given fields replaced."""
        return self.model_copy(update=changes)


__all__ = ["AuthState"]
