from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from core.domain.models.task import Task, TaskChanges


class CreateTaskRequest(BaseModel):
    """
    Cuerpo de POST /tasks.

    Una descripción o fecha vacía se guarda como null.
    """

    task_name: str | None = Field(default=None, alias="taskName")
    task_description: str | None = Field(default=None, alias="taskDescription")
    due_date: date | None = Field(default=None, alias="dueDate")

    model_config = {"populate_by_name": True}

    @field_validator("task_description", "due_date", mode="before")
    @classmethod
    def _empty_as_none(cls, value: Any) -> Any:
        return value or None


class UpdateTaskRequest(BaseModel):
    """
    Cuerpo de PUT /tasks/{id}: cualquier subconjunto de campos.

    Los campos ausentes (o vacíos) conservan su valor actual. `completed`,
    si aparece, se convierte a booleano aunque venga como null.
    """

    task_name: str | None = Field(default=None, alias="taskName")
    task_description: str | None = Field(default=None, alias="taskDescription")
    due_date: date | None = Field(default=None, alias="dueDate")
    completed: Any = None

    model_config = {"populate_by_name": True}

    @field_validator("task_name", "task_description", "due_date", mode="before")
    @classmethod
    def _empty_as_none(cls, value: Any) -> Any:
        return value or None

    def to_changes(self) -> TaskChanges:
        completed = None
        if "completed" in self.model_fields_set:
            completed = bool(self.completed)
        return TaskChanges(
            task_name=self.task_name,
            task_description=self.task_description,
            due_date=self.due_date,
            completed=completed,
        )


class TaskCreatedResponse(BaseModel):
    message: str
    task_id: int = Field(serialization_alias="taskId")
    task: Task


class MessageResponse(BaseModel):
    message: str


class ConfigResponse(BaseModel):
    api_base_url: str = Field(serialization_alias="API_BASE_URL")


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    database: str
    database_error: str | None = None
    environment: dict[str, Any] = Field(default_factory=dict)
