import logging
from dataclasses import dataclass

from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeleteTaskCommand:
    id: int


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: DeleteTaskCommand) -> int:
        affected = self._repository.delete(cmd.id)
        logger.info(f"🗑️ Tarea {cmd.id} eliminada")
        return affected
