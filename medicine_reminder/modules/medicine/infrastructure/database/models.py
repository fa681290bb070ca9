# 📄 File: medicine_reminder/modules/medicine/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Describes the table on the phone where each scheduled medicine is kept
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for medicines. Reminder times are an ordered JSON list of
# ISO-8601 strings; user_id is an indexed plain column without a foreign key.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - medicine_reminder.shared.infrastructure.database.connection (declarative Base)
#
# 🔄 Connected Modules / Calls From:
# - medicine_repository_impl.py (CRUD)
# - LocalDatabase.create_all (schema creation)

from sqlalchemy import JSON, Column, DateTime, Integer, String, func

from medicine_reminder.shared.infrastructure.database.connection import Base


class MedicineModel(Base):
    """A medicine stored on the device."""

    __tablename__ = "medicines"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(120), nullable=False)
    compartment = Column(Integer, nullable=False)
    number = Column(Integer, nullable=False)
    time = Column(JSON, nullable=False, default=list)

    # Owner email; no FK so medicines outlive a signed-out user
    user_id = Column(String(254), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<MedicineModel(id={self.id}, name='{self.name}', user_id='{self.user_id}')>"


__all__ = ["MedicineModel"]
