# 📄 File: medicine_reminder/modules/auth/infrastructure/database/auth_local_repository.py
# 🧭 Purpose (Layman Explanation):
# Remembers the signed-in person on the phone, reads them back when the app starts,
# and forgets them on sign-out.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of BaseAuthLocalRepository over the local SQLite database.
# Single-record upsert, read and delete; database exceptions are converted to
# NOT_FOUND / WRITE_FAILURE / DELETE_FAILURE values.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM (select/delete)
# - medicine_reminder.shared.infrastructure.database.connection.LocalDatabase
#
# 🔄 Connected Modules / Calls From:
# - auth_service.py via presentation/dependencies.py

from sqlalchemy import delete, select

from medicine_reminder.modules.auth.application.dto.response_dto import UserApiResponse
from medicine_reminder.modules.auth.domain.failures import InfrastructureFailure
from medicine_reminder.modules.auth.domain.models.user import Admin
from medicine_reminder.modules.auth.domain.repositories.auth_local_repository import BaseAuthLocalRepository
from medicine_reminder.shared.core.exceptions import DatabaseError
from medicine_reminder.shared.core.result import UNIT, Failure, Result, Success
from medicine_reminder.shared.infrastructure.database.connection import LocalDatabase
from medicine_reminder.shared.utils.logging import get_logger

from .models import AuthLocalModel

logger = get_logger(__name__)


class AuthLocalRepository(BaseAuthLocalRepository):
    """
    Local session store.

    Implementation Notes:
    - One session per call, committed on exit
    - save replaces every existing row, so at most one user is stored
    - sign_out deletes every row and succeeds when nothing was stored
    """

    def __init__(self, database: LocalDatabase):
        self.database = database

    def get_logged_in_user(self) -> Result:
        try:
            with self.database.session_scope() as session:
                model = session.execute(
                    select(AuthLocalModel).order_by(AuthLocalModel.id.desc()).limit(1)
                ).scalar_one_or_none()
                admin = self._model_to_domain(model) if model is not None else None

        except DatabaseError as e:
            logger.error(f"Failed to read the logged in user: {e.message}")
            return Failure(InfrastructureFailure.NOT_FOUND)

        if admin is None:
            logger.debug("No logged in user stored locally")
            return Failure(InfrastructureFailure.NOT_FOUND)

        logger.debug("Restored logged in user", extra={'email': admin.email.value})
        return Success(admin)

    def save_logged_in_user(self, response: UserApiResponse) -> Result:
        admin = Admin.from_response(response)

        try:
            with self.database.session_scope() as session:
                session.execute(delete(AuthLocalModel))
                session.add(self._domain_to_model(admin))

        except DatabaseError as e:
            logger.error(f"Failed to store the logged in user: {e.message}", extra={'email': response.email})
            return Failure(InfrastructureFailure.WRITE_FAILURE)

        logger.info("Stored logged in user", extra={'email': admin.email.value})
        return Success(admin)

    def sign_out(self) -> Result:
        try:
            with self.database.session_scope() as session:
                removed = session.execute(delete(AuthLocalModel)).rowcount

        except DatabaseError as e:
            logger.error(f"Failed to clear local auth data: {e.message}")
            return Failure(InfrastructureFailure.DELETE_FAILURE)

        logger.info("Signed out", extra={'removed_records': removed})
        return Success(UNIT)

    @staticmethod
    def _domain_to_model(admin: Admin) -> AuthLocalModel:
        return AuthLocalModel(email=admin.email.value, username=admin.username.value)

    @staticmethod
    def _model_to_domain(model: AuthLocalModel) -> Admin:
        return Admin.create(email=model.email, username=model.username)


__all__ = ["AuthLocalRepository"]
