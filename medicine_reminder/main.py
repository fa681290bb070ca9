# 📄 File: medicine_reminder/main.py
#
# 🧭 Purpose (Layman Explanation):
# The starting point of the Medicine Reminder app: it reads the configuration, opens the
# phone's database, connects to the auth server and hands the screens a ready controller.
#
# 🧪 Purpose (Technical Summary):
# Application factory and composition root. Configures logging, creates the local schema,
# wires APIClient -> AuthApiClient -> AuthServerRepository, AuthLocalRepository, AuthService,
# AuthController and MedicineRepositoryImpl, and releases resources on close().
#
# 🔗 Dependencies:
# - medicine_reminder.shared.config.settings
# - medicine_reminder.shared.infrastructure (database, external APIs)
# - medicine_reminder.modules.auth.presentation.dependencies
#
# 🔄 Connected Modules / Calls From:
# - UI layer entry point
# - python -m medicine_reminder.main

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from medicine_reminder.modules.auth.application.controller import AuthController
from medicine_reminder.modules.auth.domain.services.auth_service import AuthService
from medicine_reminder.modules.auth.presentation.dependencies import get_auth_controller, get_auth_service
from medicine_reminder.modules.medicine.domain.repositories.medicine_repository import MedicineRepository
from medicine_reminder.modules.medicine.infrastructure.database.medicine_repository_impl import MedicineRepositoryImpl
from medicine_reminder.shared.config.settings import Settings, get_settings
from medicine_reminder.shared.infrastructure.database.connection import LocalDatabase, create_local_database
from medicine_reminder.shared.infrastructure.external_apis.api_client import APIClient, create_api_client
from medicine_reminder.shared.utils.logging import log_shutdown_event, log_startup_event, setup_logging

logger = logging.getLogger(__name__)


class Application:
    """
    Container for the wired application objects.

    Attributes:
        settings: Settings the application was built from
        database: Local SQLite database
        api_client: Shared HTTP client for the auth server
        auth_service: Coordinator of remote and local auth operations
        auth_controller: State controller the UI subscribes to
        medicine_repository: Local medicine store
    """

    def __init__(
        self,
        settings: Settings,
        database: LocalDatabase,
        api_client: APIClient,
        auth_service: AuthService,
        auth_controller: AuthController,
        medicine_repository: MedicineRepository
    ):
        self.settings = settings
        self.database = database
        self.api_client = api_client
        self.auth_service = auth_service
        self.auth_controller = auth_controller
        self.medicine_repository = medicine_repository
        self._closed = False

    async def close(self) -> None:
        """Dispose the controller, close the HTTP session and the database engine."""
        if self._closed:
            return

        logger.info("🔄 Medicine Reminder shutting down...")
        self.auth_controller.dispose()
        await self.api_client.close()
        self.database.dispose()
        self._closed = True
        log_shutdown_event(self.settings.APP_NAME)


def create_application(settings: Optional[Settings] = None) -> Application:
    """
    Application factory function.

    Args:
        settings: Settings to use; loaded from the environment when omitted

    Returns:
        Wired Application; the stored session is already restored on its controller
    """
    settings = settings or get_settings()

    setup_logging(settings)
    log_startup_event(
        settings.APP_NAME,
        settings.APP_VERSION,
        extra={'environment': settings.ENVIRONMENT}
    )

    database = create_local_database(settings)
    logger.info("✅ Local database initialized")

    api_client = create_api_client(settings)

    auth_service = get_auth_service(api_client, database)
    auth_controller = get_auth_controller(auth_service)
    medicine_repository = MedicineRepositoryImpl(database)

    logger.info("✅ Medicine Reminder startup complete")
    return Application(
        settings=settings,
        database=database,
        api_client=api_client,
        auth_service=auth_service,
        auth_controller=auth_controller,
        medicine_repository=medicine_repository
    )


@asynccontextmanager
async def application_lifespan(settings: Optional[Settings] = None) -> AsyncGenerator[Application, None]:
    """Create the application and close it on exit."""
    application = create_application(settings)
    try:
        yield application
    finally:
        await application.close()


async def _run() -> None:
    async with application_lifespan() as application:
        state = application.auth_controller.state
        health = application.database.health_check()
        logger.info(
            f"Local database {health['status']}; "
            f"{'signed in as ' + state.admin.username.value if state.admin else 'nobody signed in'}"
        )


def main():
    """Bootstrap the application once, report its state and shut down."""
    asyncio.run(_run())


if __name__ == "__main__":
    main()
