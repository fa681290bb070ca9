# 📄 File: medicine_reminder/modules/medicine/infrastructure/database/medicine_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves, finds and removes medicines in the phone's database, and can tell whose
# medicine it is if that person is signed in on this device.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of MedicineRepository over LocalDatabase. Maps between the
# Medicine entity and MedicineModel; database failures surface as RepositoryError.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM (select/delete)
# - medicine_reminder.shared.infrastructure.database.connection.LocalDatabase
# - auth AuthLocalModel (owner lookup)
#
# 🔄 Connected Modules / Calls From:
# - medicine_reminder.main (Application.medicine_repository)

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, select

from medicine_reminder.modules.auth.domain.models.user import Admin
from medicine_reminder.modules.auth.infrastructure.database.models import AuthLocalModel
from medicine_reminder.modules.medicine.domain.models.medicine import Medicine
from medicine_reminder.modules.medicine.domain.repositories.medicine_repository import MedicineRepository
from medicine_reminder.shared.core.exceptions import DatabaseError, NotFoundError, RepositoryError
from medicine_reminder.shared.infrastructure.database.connection import LocalDatabase
from medicine_reminder.shared.utils.logging import get_logger

from .models import MedicineModel

logger = get_logger(__name__)


class MedicineRepositoryImpl(MedicineRepository):
    """
    SQLAlchemy implementation of MedicineRepository.

    Each method opens its own session through LocalDatabase.session_scope().
    """

    def __init__(self, database: LocalDatabase):
        self.database = database

    def save(self, medicine: Medicine) -> Medicine:
        try:
            with self.database.session_scope() as session:
                if medicine.id is None:
                    model = self._domain_to_model(medicine)
                    session.add(model)
                    session.flush()  # Get the generated ID
                else:
                    model = session.get(MedicineModel, medicine.id)
                    if model is None:
                        raise NotFoundError(
                            f"Medicine {medicine.id} not found",
                            resource_type="medicine",
                            resource_id=str(medicine.id)
                        )
                    self._update_model(model, medicine)
                    session.flush()

                saved = self._model_to_domain(model)

        except DatabaseError as e:
            logger.error(f"Failed to save medicine '{medicine.name}': {e.message}")
            raise RepositoryError(
                f"Failed to save medicine: {e.message}",
                repository="medicine",
                operation="save"
            ) from e

        logger.info(f"Saved medicine with ID: {saved.id}", extra={'user_id': saved.user_id})
        return saved

    def get_by_id(self, medicine_id: int) -> Optional[Medicine]:
        try:
            with self.database.session_scope() as session:
                model = session.get(MedicineModel, medicine_id)
                medicine = self._model_to_domain(model) if model is not None else None

        except DatabaseError as e:
            logger.error(f"Failed to read medicine {medicine_id}: {e.message}")
            raise RepositoryError(
                f"Failed to read medicine: {e.message}",
                repository="medicine",
                operation="get_by_id"
            ) from e

        if medicine is None:
            logger.debug(f"Medicine not found: {medicine_id}")
        return medicine

    def list_for_user(self, user_id: str) -> List[Medicine]:
        try:
            with self.database.session_scope() as session:
                models = session.execute(
                    select(MedicineModel)
                    .where(MedicineModel.user_id == user_id)
                    .order_by(MedicineModel.id)
                ).scalars().all()
                medicines = [self._model_to_domain(model) for model in models]

        except DatabaseError as e:
            logger.error(f"Failed to list medicines for {user_id}: {e.message}")
            raise RepositoryError(
                f"Failed to list medicines: {e.message}",
                repository="medicine",
                operation="list_for_user"
            ) from e

        logger.debug(f"Listed {len(medicines)} medicines", extra={'user_id': user_id})
        return medicines

    def delete(self, medicine_id: int) -> bool:
        try:
            with self.database.session_scope() as session:
                removed = session.execute(
                    delete(MedicineModel).where(MedicineModel.id == medicine_id)
                ).rowcount

        except DatabaseError as e:
            logger.error(f"Failed to delete medicine {medicine_id}: {e.message}")
            raise RepositoryError(
                f"Failed to delete medicine: {e.message}",
                repository="medicine",
                operation="delete"
            ) from e

        if removed:
            logger.info(f"Deleted medicine: {medicine_id}")
        return bool(removed)

    def get_owner(self, medicine: Medicine) -> Optional[Admin]:
        try:
            with self.database.session_scope() as session:
                model = session.execute(
                    select(AuthLocalModel).where(AuthLocalModel.email == medicine.user_id)
                ).scalar_one_or_none()
                owner = Admin.create(email=model.email, username=model.username) if model is not None else None

        except DatabaseError as e:
            logger.error(f"Failed to look up owner of medicine {medicine.id}: {e.message}")
            raise RepositoryError(
                f"Failed to look up medicine owner: {e.message}",
                repository="medicine",
                operation="get_owner"
            ) from e

        return owner

    # ==========================================================================
    # MAPPERS
    # ==========================================================================

    @staticmethod
    def _serialize_times(times: List[datetime]) -> List[str]:
        return [moment.isoformat() for moment in times]

    @staticmethod
    def _deserialize_times(values: Optional[List[str]]) -> List[datetime]:
        return [datetime.fromisoformat(value) for value in values or []]

    def _domain_to_model(self, medicine: Medicine) -> MedicineModel:
        return MedicineModel(
            name=medicine.name,
            compartment=medicine.compartment,
            number=medicine.number,
            time=self._serialize_times(medicine.time),
            user_id=medicine.user_id
        )

    def _update_model(self, model: MedicineModel, medicine: Medicine) -> None:
        model.name = medicine.name
        model.compartment = medicine.compartment
        model.number = medicine.number
        model.time = self._serialize_times(medicine.time)
        model.user_id = medicine.user_id

    def _model_to_domain(self, model: MedicineModel) -> Medicine:
        return Medicine(
            id=model.id,
            name=model.name,
            compartment=model.compartment,
            number=model.number,
            time=self._deserialize_times(model.time),
            user_id=model.user_id
        )


__all__ = ["MedicineRepositoryImpl"]
