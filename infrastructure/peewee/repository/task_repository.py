import logging
from contextlib import contextmanager
from datetime import date
from typing import Iterator

from peewee import Database, InterfaceError, OperationalError, PeeweeException
from playhouse.pool import MaxConnectionsExceeded

from core.domain.errors import NotFound, StoreUnavailable, UnexpectedStoreError
from core.domain.models.store_health import StoreHealth
from core.domain.models.task import Task, TaskChanges, validate_task_name
from core.domain.ports.task_repository import TaskRepository
from infrastructure.errors import driver_error_code
from infrastructure.peewee.model.models import TaskModel, bind_task_model, utcnow

logger = logging.getLogger(__name__)


class PeeweeTaskRepository(TaskRepository):
    def __init__(self, database: Database) -> None:
        # The table is created by setup_database.py; only DML is issued here.
        self._db = database
        self._model = bind_task_model(database)
        self.health = StoreHealth(name="peewee")

    @contextmanager
    def _session(self, action: str) -> Iterator[None]:
        try:
            with self._db.connection_context():
                yield
        except MaxConnectionsExceeded as e:
            logger.error(f"⏳ Pool agotado al intentar {action}: {e}")
            raise StoreUnavailable(
                "Database connection pool exhausted", cause=e
            ) from e
        except (OperationalError, InterfaceError) as e:
            self.health.record_failure(e)
            logger.error(f"🔴 BDD no disponible al intentar {action}: {e}")
            raise StoreUnavailable(f"Database unavailable: {e}", cause=e) from e
        except PeeweeException as e:
            logger.error(f"✗ Error inesperado al intentar {action}: {e}")
            raise UnexpectedStoreError(
                f"Could not {action}", cause=e, code=driver_error_code(e)
            ) from e
        else:
            self.health.record_success()

    @staticmethod
    def _to_domain(model: TaskModel) -> Task:
        return Task(
            id=model.id,
            task_name=model.task_name,
            task_description=model.task_description,
            due_date=model.due_date,
            completed=bool(model.completed),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def create(
        self,
        task_name: str,
        task_description: str | None = None,
        due_date: date | None = None,
    ) -> Task:
        validate_task_name(task_name)
        now = utcnow()
        with self._session("create task"):
            model = self._model.create(
                task_name=task_name,
                task_description=task_description,
                due_date=due_date,
                completed=False,
                created_at=now,
                updated_at=now,
            )
        return self._to_domain(model)

    def list(self) -> list[Task]:
        with self._session("fetch tasks"):
            query = self._model.select().order_by(
                self._model.created_at.desc(), self._model.id.desc()
            )
            return [self._to_domain(t) for t in query]

    def get(self, task_id: int) -> Task:
        with self._session("fetch task"):
            model = self._model.get_or_none(self._model.id == task_id)
        if model is None:
            raise NotFound("Task not found")
        return self._to_domain(model)

    def update(self, task_id: int, changes: TaskChanges) -> int:
        columns = changes.as_columns()
        with self._session("update task"):
            if not columns:
                exists = (
                    self._model.select().where(self._model.id == task_id).exists()
                )
                affected = 1 if exists else 0
            else:
                columns["updated_at"] = utcnow()
                affected = (
                    self._model.update(**columns)
                    .where(self._model.id == task_id)
                    .execute()
                )
        if affected == 0:
            raise NotFound("Task not found")
        return affected

    def delete(self, task_id: int) -> int:
        with self._session("delete task"):
            affected = (
                self._model.delete().where(self._model.id == task_id).execute()
            )
        if affected == 0:
            raise NotFound("Task not found")
        return affected

    def ping(self) -> None:
        try:
            with self._db.connection_context():
                self._db.execute_sql("SELECT 1")
        except MaxConnectionsExceeded as e:
            # Pool ocupado, la BDD sigue accesible: no se toca el flag.
            logger.error(f"⏳ Pool agotado durante el ping: {e}")
            raise StoreUnavailable(
                "Database connection pool exhausted", cause=e
            ) from e
        except PeeweeException as e:
            self.health.record_failure(e)
            logger.error(f"🔴 Ping a BDD fallido: {e}")
            raise StoreUnavailable(str(e), cause=e) from e
        self.health.record_success()

    def close(self) -> None:
        self._db.close_all()
        logger.info("🔌 Pool de conexiones Peewee cerrado")
