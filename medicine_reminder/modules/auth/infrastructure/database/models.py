# 📄 File: medicine_reminder/modules/auth/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Describes the table on the phone that remembers who is signed in
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the device-local session record. Holds at most one row;
# the repository replaces it on every save.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - medicine_reminder.shared.infrastructure.database.connection (declarative Base)
#
# 🔄 Connected Modules / Calls From:
# - auth_local_repository.py (CRUD)
# - medicine_repository_impl.py (owner lookup by email)
# - LocalDatabase.create_all (schema creation)

from sqlalchemy import Column, DateTime, Integer, String, func

from medicine_reminder.shared.infrastructure.database.connection import Base


class AuthLocalModel(Base):
    """The user signed in on this device."""

    __tablename__ = "auth_local_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(254), nullable=False, unique=True, index=True)
    username = Column(String(30), nullable=False)
    saved_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self) -> str:
        return f"<AuthLocalModel(id={self.id}, email='{self.email}', username='{self.username}')>"


__all__ = ["AuthLocalModel"]
