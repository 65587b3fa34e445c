from pathlib import Path

import pytest
from peewee import SqliteDatabase
from sqlalchemy import create_engine, inspect

import setup_database
from infrastructure.bootstrap import create_schema, ensure_database
from infrastructure.settings import Settings


@pytest.fixture
def db_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.db"


def _columns_with_sqlalchemy(db_file: Path) -> set[str]:
    engine = create_engine(f"sqlite:///{db_file}")
    try:
        return {c["name"] for c in inspect(engine).get_columns("Tasks")}
    finally:
        engine.dispose()


EXPECTED_COLUMNS = {
    "id",
    "task_name",
    "task_description",
    "due_date",
    "completed",
    "created_at",
    "updated_at",
}


@pytest.mark.parametrize("orm", ["peewee", "sqlalchemy"])
def test_create_schema_creates_tasks_table(db_file, orm):
    create_schema(Settings(orm=orm, database_url=f"sqlite:///{db_file}"))

    assert _columns_with_sqlalchemy(db_file) == EXPECTED_COLUMNS


@pytest.mark.parametrize("orm", ["peewee", "sqlalchemy"])
def test_create_schema_is_idempotent(db_file, orm):
    settings = Settings(orm=orm, database_url=f"sqlite:///{db_file}")

    create_schema(settings)
    create_schema(settings)

    database = SqliteDatabase(str(db_file))
    try:
        assert database.table_exists("Tasks")
    finally:
        database.close()


def test_ensure_database_skips_sqlite(db_file):
    assert ensure_database(f"sqlite:///{db_file}") is False


def test_setup_script_with_sample(db_file, capsys, monkeypatch):
    monkeypatch.delenv("ORM", raising=False)

    exit_code = setup_database.main(["--database-url", f"sqlite:///{db_file}", "--sample"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Sample task inserted successfully" in out
    assert "Test Task" in out


def test_setup_script_reports_failure(tmp_path, capsys):
    url = f"sqlite:///{tmp_path / 'missing' / 'tasks.db'}"

    exit_code = setup_database.main(["--database-url", url])

    assert exit_code == 1
    assert "Database setup failed" in capsys.readouterr().err
