from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from core.domain.errors import ValidationError


def validate_task_name(name: str | None) -> str:
    if name is None or not str(name).strip():
        raise ValidationError("Task name is required")
    return name


@dataclass(slots=True)
class Task:
    id: int
    task_name: str
    task_description: str | None = None
    due_date: date | None = None
    completed: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(slots=True)
class TaskChanges:
    """
    Campos presentes en una actualización parcial.

    `None` significa "no enviado": la columna conserva su valor actual.
    """

    task_name: str | None = None
    task_description: str | None = None
    due_date: date | None = None
    completed: Any = None

    def __post_init__(self) -> None:
        if self.task_name is not None:
            validate_task_name(self.task_name)
        if self.completed is not None:
            self.completed = bool(self.completed)

    def as_columns(self) -> dict[str, Any]:
        columns = {
            "task_name": self.task_name,
            "task_description": self.task_description,
            "due_date": self.due_date,
            "completed": self.completed,
        }
        return {name: value for name, value in columns.items() if value is not None}
