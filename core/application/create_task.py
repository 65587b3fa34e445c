import logging
from dataclasses import dataclass
from datetime import date

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    task_name: str
    task_description: str | None = None
    due_date: date | None = None


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        task = self._repository.create(
            task_name=cmd.task_name,
            task_description=cmd.task_description or None,
            due_date=cmd.due_date or None,
        )
        logger.info(f"📝 Tarea {task.id} creada")
        return task
