import logging
from dataclasses import dataclass

from core.domain.models.task import TaskChanges
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateTaskCommand:
    id: int
    changes: TaskChanges


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: UpdateTaskCommand) -> int:
        affected = self._repository.update(cmd.id, cmd.changes)
        logger.info(
            f"✏️ Tarea {cmd.id} actualizada "
            f"(campos: {sorted(cmd.changes.as_columns()) or 'ninguno'})"
        )
        return affected
