from abc import ABC, abstractmethod
from datetime import date

from core.domain.models.store_health import StoreHealth
from core.domain.models.task import Task, TaskChanges


class TaskRepository(ABC):
    health: StoreHealth

    @abstractmethod
    def create(
        self,
        task_name: str,
        task_description: str | None = None,
        due_date: date | None = None,
    ) -> Task:
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: int) -> Task:
        raise NotImplementedError

    @abstractmethod
    def update(self, task_id: int, changes: TaskChanges) -> int:
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def ping(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        raise NotImplementedError
