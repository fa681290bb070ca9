# 📄 File: medicine_reminder/modules/medicine/domain/models/medicine.py
# 🧭 Purpose (Layman Explanation):
# Describes one medicine in the pill box: its name, which compartment it sits in,
# how many to take and at what times, and who it belongs to.
# 🧪 Purpose (Technical Summary):
# Medicine domain entity. The owner is referenced by identifier (the user's email),
# never by object, so removing a user does not remove their medicines.
# 🔗 Dependencies:
# pydantic, datetime
# 🔄 Connected Modules / Calls From:
# medicine_repository.py, medicine_repository_impl.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Medicine(BaseModel):
    """
    A scheduled medicine stored on the device.

    ``id`` is None until the medicine is first saved; the local database assigns it.
    ``time`` keeps the reminder times in the order they were entered.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = Field(default=None, description="Auto-assigned local identifier")
    name: str = Field(..., min_length=1, max_length=120, description="Medicine name")
    compartment: int = Field(..., ge=0, description="Pill box compartment number")
    number: int = Field(..., ge=0, description="Pills per dose")
    time: List[datetime] = Field(default_factory=list, description="Reminder times, in order")
    user_id: str = Field(..., min_length=1, description="Email of the owning user")

    @field_validator('name')
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('Medicine name cannot be blank')
        return v

    @property
    def is_persisted(self) -> bool:
        return self.id is not None


__all__ = ["Medicine"]
