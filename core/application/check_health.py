import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from core.domain.errors import TaskError
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HealthReport:
    healthy: bool
    timestamp: datetime
    database_error: str | None = None
    environment: dict[str, Any] = field(default_factory=dict)


class CheckHealthUseCase:
    """
    Sondea el almacén con una consulta trivial.

    Nunca lanza: cualquier fallo del almacén se refleja en el informe.
    """

    def __init__(
        self,
        repository: TaskRepository,
        environment: dict[str, Any] | None = None,
    ) -> None:
        self._repository = repository
        self._environment = environment or {}

    def execute(self) -> HealthReport:
        timestamp = datetime.now(timezone.utc)
        try:
            self._repository.ping()
        except TaskError as e:
            logger.error(f"🔴 Health check fallido: {e.message}")
            return HealthReport(
                healthy=False,
                timestamp=timestamp,
                database_error=e.message,
                environment=self._environment,
            )
        return HealthReport(
            healthy=True, timestamp=timestamp, environment=self._environment
        )
