#!/usr/bin/env python3
"""
Prepara la base de datos del Task Tracker.

Uso:
    python setup_database.py            # crea BDD (Postgres) y tabla Tasks
    python setup_database.py --sample   # además inserta una tarea de prueba
"""

import argparse
import sys
from dataclasses import replace
from datetime import date

from infrastructure.bootstrap import create_schema, ensure_database
from infrastructure.container import get_task_repository
from infrastructure.logging_setup import configure_logging
from infrastructure.settings import Settings, get_settings, redact_url


def insert_sample_task(settings: Settings) -> None:
    repository = get_task_repository(settings)
    try:
        task = repository.create(
            task_name="Test Task",
            task_description="This is a test task to verify database connection",
            due_date=date(2024, 12, 31),
        )
        print(f"✅ Sample task inserted successfully with ID: {task.id}")
        print("📋 Current tasks in database:")
        for t in repository.list():
            status = "x" if t.completed else " "
            print(f"  [{status}] #{t.id} {t.task_name} (due: {t.due_date or '-'})")
    finally:
        repository.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="setup_database",
        description="Create the database and the Tasks table if they do not exist.",
    )
    parser.add_argument("--database-url", help="Override DATABASE_URL")
    parser.add_argument(
        "--orm", choices=["peewee", "sqlalchemy"], help="Override ORM"
    )
    parser.add_argument(
        "--sample", action="store_true", help="Insert a sample task afterwards"
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.database_url:
        settings = replace(settings, database_url=args.database_url)
    if args.orm:
        settings = replace(settings, orm=args.orm)

    configure_logging(settings.log_level)
    print(f"📊 Setting up {redact_url(settings.database_url)} ({settings.orm})")

    try:
        if ensure_database(settings.database_url):
            print("✅ Database created")
        create_schema(settings)
        print("✅ Tasks table created or already exists")
        if args.sample:
            insert_sample_task(settings)
    except Exception as e:
        print(f"❌ Database setup failed: {e}", file=sys.stderr)
        return 1

    print("🎉 Database setup completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
