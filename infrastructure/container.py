import logging

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.config import (
    STORE_MEMORY,
    STORE_MONGO,
    ConfigurationError,
    Settings,
    load_settings,
)
from infrastructure.memory.repository.task_repository import (
    InMemoryTaskRepository,
    sample_tasks,
)

logger = logging.getLogger(__name__)


def _memory_repository(settings: Settings) -> InMemoryTaskRepository:
    seed = sample_tasks() if settings.is_development else []
    return InMemoryTaskRepository(seed=seed)


def get_task_repository(settings: Settings | None = None) -> TaskRepository:
    """
    Builds the task store described by the settings.

    Remote stores without credentials fall back to the in-memory store in
    development and are refused in any other environment.
    """
    settings = settings or load_settings()

    if settings.use_mock_data or settings.task_store == STORE_MEMORY:
        logger.info("🔄 Using in-memory task store")
        return _memory_repository(settings)

    if not settings.has_credentials(settings.task_store):
        if settings.is_development:
            logger.warning(
                f"⚠️ Missing credentials for the {settings.task_store} store. "
                "Running in development mode with mock data."
            )
            return _memory_repository(settings)
        raise ConfigurationError(
            f"Missing credentials for the {settings.task_store} store "
            f"(APP_ENV={settings.app_env})"
        )

    # Drivers are imported lazily so the memory store never touches them.
    if settings.task_store == STORE_MONGO:
        from infrastructure.mongo.repository.task_repository import (
            MongoTaskRepository,
        )

        logger.info("✅ Using MongoDB task store")
        return MongoTaskRepository(settings.mongo_uri, settings.mongo_db_name)

    from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository

    logger.info("✅ Using Peewee task store")
    return PeeweeTaskRepository(settings.database_url)


def get_list_tasks_use_case(repository: TaskRepository) -> ListTasksUseCase:
    return ListTasksUseCase(repository=repository)


def get_get_task_use_case(repository: TaskRepository) -> GetTaskUseCase:
    return GetTaskUseCase(repository=repository)


def get_create_task_use_case(repository: TaskRepository) -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=repository)


def get_update_task_use_case(repository: TaskRepository) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=repository)


def get_delete_task_use_case(repository: TaskRepository) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=repository)
