import unittest
from datetime import date

from fakes import InMemoryTaskRepository

from core.application.check_health import CheckHealthUseCase
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.errors import NotFound, ValidationError
from core.domain.models.store_health import StoreHealth
from core.domain.models.task import TaskChanges


class CoreUseCasesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = InMemoryTaskRepository()

    def _create(self, name: str, **kwargs):
        return CreateTaskUseCase(self.repo).execute(
            CreateTaskCommand(task_name=name, **kwargs)
        )

    def test_create_task_defaults_to_pending_with_nulls(self) -> None:
        task = self._create("Write report")

        self.assertIsInstance(task.id, int)
        self.assertFalse(task.completed)
        self.assertIsNone(task.task_description)
        self.assertIsNone(task.due_date)
        self.assertEqual(GetTaskUseCase(self.repo).execute(task.id), task)

    def test_create_task_keeps_supplied_fields(self) -> None:
        task = self._create(
            "Buy milk", task_description="2 litres", due_date=date(2024, 12, 31)
        )

        loaded = GetTaskUseCase(self.repo).execute(task.id)
        self.assertEqual(loaded.task_name, "Buy milk")
        self.assertEqual(loaded.task_description, "2 litres")
        self.assertEqual(loaded.due_date, date(2024, 12, 31))

    def test_create_task_treats_empty_description_as_null(self) -> None:
        task = self._create("Call mum", task_description="")

        self.assertIsNone(task.task_description)

    def test_create_task_with_blank_name_fails_and_persists_nothing(self) -> None:
        for name in ["", "   ", "\t\n"]:
            with self.assertRaises(ValidationError):
                self._create(name)

        self.assertEqual(ListTasksUseCase(self.repo).execute(), [])

    def test_list_returns_most_recent_first(self) -> None:
        a = self._create("A")
        b = self._create("B")
        c = self._create("C")

        ids = [t.id for t in ListTasksUseCase(self.repo).execute()]

        self.assertEqual(ids, [c.id, b.id, a.id])

    def test_list_empty(self) -> None:
        self.assertEqual(ListTasksUseCase(self.repo).execute(), [])

    def test_update_completed_only_touches_completed_and_updated_at(self) -> None:
        original = self._create("Inicial", task_description="d1")

        affected = UpdateTaskUseCase(self.repo).execute(
            UpdateTaskCommand(id=original.id, changes=TaskChanges(completed=True))
        )

        updated = GetTaskUseCase(self.repo).execute(original.id)
        self.assertEqual(affected, 1)
        self.assertTrue(updated.completed)
        self.assertEqual(updated.task_name, original.task_name)
        self.assertEqual(updated.task_description, original.task_description)
        self.assertEqual(updated.due_date, original.due_date)
        self.assertEqual(updated.created_at, original.created_at)
        self.assertGreaterEqual(updated.updated_at, original.updated_at)

    def test_missing_id_is_not_found_everywhere(self) -> None:
        with self.assertRaises(NotFound):
            GetTaskUseCase(self.repo).execute(999)
        with self.assertRaises(NotFound):
            UpdateTaskUseCase(self.repo).execute(
                UpdateTaskCommand(id=999, changes=TaskChanges(completed=True))
            )
        with self.assertRaises(NotFound):
            DeleteTaskUseCase(self.repo).execute(DeleteTaskCommand(id=999))

    def test_delete_task_removes_record(self) -> None:
        task = self._create("Eliminar")

        affected = DeleteTaskUseCase(self.repo).execute(DeleteTaskCommand(id=task.id))

        self.assertEqual(affected, 1)
        with self.assertRaises(NotFound):
            GetTaskUseCase(self.repo).execute(task.id)

    def test_check_health_reports_connected_store(self) -> None:
        report = CheckHealthUseCase(self.repo, environment={"orm": "memory"}).execute()

        self.assertTrue(report.healthy)
        self.assertIsNone(report.database_error)
        self.assertEqual(report.environment, {"orm": "memory"})
        self.assertEqual(self.repo.health.state, StoreHealth.HEALTHY)

    def test_check_health_never_raises_when_store_is_down(self) -> None:
        self.repo.reachable = False

        report = CheckHealthUseCase(self.repo).execute()

        self.assertFalse(report.healthy)
        self.assertIn("connection refused", report.database_error)
        self.assertFalse(self.repo.health.is_available)


class TaskChangesTests(unittest.TestCase):
    def test_only_present_fields_become_columns(self) -> None:
        changes = TaskChanges(task_description="nueva")

        self.assertEqual(changes.as_columns(), {"task_description": "nueva"})

    def test_empty_changes_have_no_columns(self) -> None:
        self.assertEqual(TaskChanges().as_columns(), {})

    def test_completed_is_coerced_to_bool(self) -> None:
        self.assertIs(TaskChanges(completed=1).completed, True)
        self.assertIs(TaskChanges(completed=0).completed, False)
        self.assertIs(TaskChanges(completed="yes").completed, True)

    def test_false_completed_is_still_a_column(self) -> None:
        self.assertEqual(TaskChanges(completed=False).as_columns(), {"completed": False})

    def test_whitespace_name_is_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            TaskChanges(task_name="   ")


if __name__ == "__main__":
    unittest.main()
