import logging

from core.application.check_health import CheckHealthUseCase
from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository
from infrastructure.peewee.session.db import build_database
from infrastructure.settings import Settings
from infrastructure.sqlalchemy.repository.task_repository import (
    SqlAlchemyTaskRepository,
)
from infrastructure.sqlalchemy.session.db import build_engine

logger = logging.getLogger(__name__)


def get_task_repository(settings: Settings) -> TaskRepository:
    if settings.orm == "sqlalchemy":
        engine = build_engine(
            settings.database_url,
            pool_size=settings.pool_size,
            pool_timeout=settings.pool_timeout,
        )
        logger.info("Usando SQLAlchemy como almacén de tareas")
        return SqlAlchemyTaskRepository(engine)

    # Default to Peewee
    database = build_database(
        settings.database_url,
        max_connections=settings.pool_size,
        timeout=settings.pool_timeout,
    )
    logger.info("Usando Peewee como almacén de tareas")
    return PeeweeTaskRepository(database)


def get_create_task_use_case(repository: TaskRepository) -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=repository)


def get_list_tasks_use_case(repository: TaskRepository) -> ListTasksUseCase:
    return ListTasksUseCase(repository=repository)


def get_get_task_use_case(repository: TaskRepository) -> GetTaskUseCase:
    return GetTaskUseCase(repository=repository)


def get_update_task_use_case(repository: TaskRepository) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=repository)


def get_delete_task_use_case(repository: TaskRepository) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=repository)


def get_check_health_use_case(
    repository: TaskRepository, settings: Settings
) -> CheckHealthUseCase:
    return CheckHealthUseCase(repository=repository, environment=settings.environment())
