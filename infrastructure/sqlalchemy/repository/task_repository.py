import logging
from contextlib import contextmanager
from datetime import date
from typing import Iterator

from sqlalchemy import Engine, delete, select, text, update
from sqlalchemy.exc import (
    DisconnectionError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from core.domain.errors import NotFound, StoreUnavailable, UnexpectedStoreError
from core.domain.models.store_health import StoreHealth
from core.domain.models.task import Task, TaskChanges, validate_task_name
from core.domain.ports.task_repository import TaskRepository
from infrastructure.errors import driver_error_code
from infrastructure.sqlalchemy.model.models import TaskModel, utcnow
from infrastructure.sqlalchemy.session.db import build_session_factory

logger = logging.getLogger(__name__)


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._session_factory = build_session_factory(engine)
        self.health = StoreHealth(name="sqlalchemy")

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except PoolTimeoutError as e:
            session.rollback()
            logger.error(f"⏳ Pool agotado al intentar {action}: {e}")
            raise StoreUnavailable(
                "Database connection pool exhausted", cause=e
            ) from e
        except (OperationalError, InterfaceError, DisconnectionError) as e:
            session.rollback()
            self.health.record_failure(e)
            logger.error(f"🔴 BDD no disponible al intentar {action}: {e}")
            raise StoreUnavailable(f"Database unavailable: {e}", cause=e) from e
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"✗ Error inesperado al intentar {action}: {e}")
            raise UnexpectedStoreError(
                f"Could not {action}", cause=e, code=driver_error_code(e)
            ) from e
        except Exception:
            session.rollback()
            raise
        else:
            self.health.record_success()
        finally:
            session.close()

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
        with self._session("create task") as session:
            model = TaskModel(
                task_name=task_name,
                task_description=task_description,
                due_date=due_date,
                completed=False,
                created_at=now,
                updated_at=now,
            )
            session.add(model)
            session.flush()
            task = self._to_domain(model)
        return task

    def list(self) -> list[Task]:
        with self._session("fetch tasks") as session:
            stmt = select(TaskModel).order_by(
                TaskModel.created_at.desc(), TaskModel.id.desc()
            )
            return [self._to_domain(t) for t in session.scalars(stmt)]

    def get(self, task_id: int) -> Task:
        with self._session("fetch task") as session:
            model = session.get(TaskModel, task_id)
            task = self._to_domain(model) if model is not None else None
        if task is None:
            raise NotFound("Task not found")
        return task

    def update(self, task_id: int, changes: TaskChanges) -> int:
        columns = changes.as_columns()
        with self._session("update task") as session:
            if not columns:
                found = session.scalar(
                    select(TaskModel.id).where(TaskModel.id == task_id)
                )
                affected = 1 if found is not None else 0
            else:
                columns["updated_at"] = utcnow()
                result = session.execute(
                    update(TaskModel)
                    .where(TaskModel.id == task_id)
                    .values(**columns)
                    .execution_options(synchronize_session=False)
                )
                affected = result.rowcount
        if affected == 0:
            raise NotFound("Task not found")
        return affected

    def delete(self, task_id: int) -> int:
        with self._session("delete task") as session:
            result = session.execute(
                delete(TaskModel)
                .where(TaskModel.id == task_id)
                .execution_options(synchronize_session=False)
            )
            affected = result.rowcount
        if affected == 0:
            raise NotFound("Task not found")
        return affected

    def ping(self) -> None:
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except PoolTimeoutError as e:
            # Pool ocupado, la BDD sigue accesible: no se toca el flag.
            logger.error(f"⏳ Pool agotado durante el ping: {e}")
            raise StoreUnavailable(
                "Database connection pool exhausted", cause=e
            ) from e
        except SQLAlchemyError as e:
            self.health.record_failure(e)
            logger.error(f"🔴 Ping a BDD fallido: {e}")
            raise StoreUnavailable(str(e), cause=e) from e
        self.health.record_success()

    def close(self) -> None:
        self._engine.dispose()
        logger.info("🔌 Pool de conexiones SQLAlchemy cerrado")

