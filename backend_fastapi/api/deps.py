from fastapi import Depends, Request

from core.application.check_health import CheckHealthUseCase
from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.errors import StoreUnavailable
from core.domain.ports.task_repository import TaskRepository
from infrastructure.container import (
    get_check_health_use_case,
    get_create_task_use_case,
    get_delete_task_use_case,
    get_get_task_use_case,
    get_list_tasks_use_case,
    get_update_task_use_case,
)
from infrastructure.settings import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_repository(request: Request) -> TaskRepository:
    repository = request.app.state.repository
    if repository is None:
        raise StoreUnavailable("Task store is not initialised")
    return repository


def require_available_store(
    repository: TaskRepository = Depends(get_repository),
) -> None:
    """
    Gate de disponibilidad para las rutas /tasks.

    Lee el flag cacheado del almacén; no consulta la BDD.
    """
    if not repository.health.is_available:
        raise StoreUnavailable(
            f"Database is not connected: {repository.health.last_error}"
        )


def create_task_use_case(
    repository: TaskRepository = Depends(get_repository),
) -> CreateTaskUseCase:
    return get_create_task_use_case(repository)


def list_tasks_use_case(
    repository: TaskRepository = Depends(get_repository),
) -> ListTasksUseCase:
    return get_list_tasks_use_case(repository)


def get_task_use_case(
    repository: TaskRepository = Depends(get_repository),
) -> GetTaskUseCase:
    return get_get_task_use_case(repository)


def update_task_use_case(
    repository: TaskRepository = Depends(get_repository),
) -> UpdateTaskUseCase:
    return get_update_task_use_case(repository)


def delete_task_use_case(
    repository: TaskRepository = Depends(get_repository),
) -> DeleteTaskUseCase:
    return get_delete_task_use_case(repository)


def check_health_use_case(
    repository: TaskRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
) -> CheckHealthUseCase:
    return get_check_health_use_case(repository, settings)
