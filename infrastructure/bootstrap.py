"""
Creación de la base de datos y de la tabla Tasks.

La API solo ejecuta DML; este módulo lo usa `setup_database.py` (y los
tests) para dejar el esquema listo.
"""

import logging
from urllib.parse import urlsplit, urlunsplit

import psycopg2
from psycopg2 import sql

from infrastructure.peewee.model.models import bind_task_model
from infrastructure.peewee.session.db import build_database
from infrastructure.settings import Settings
from infrastructure.sqlalchemy.session.db import build_engine, init_db

logger = logging.getLogger(__name__)

_CONNECT_TIMEOUT_SECS = 5


def ensure_database(url: str) -> bool:
    """
    Crea la base de datos de Postgres si no existe.

    Se conecta a la BDD de mantenimiento `postgres` con autocommit
    (CREATE DATABASE no admite transacciones). Para SQLite no hace nada:
    el fichero se crea al conectar.

    Returns:
        True si se ha creado la base de datos.
    """
    parts = urlsplit(url)
    if not parts.scheme.startswith("postgres"):
        return False

    db_name = parts.path.lstrip("/")
    admin_dsn = urlunsplit(parts._replace(scheme="postgresql", path="/postgres"))

    conn = psycopg2.connect(dsn=admin_dsn, connect_timeout=_CONNECT_TIMEOUT_SECS)
    try:
        conn.autocommit = True
        with conn.cursor() as cur:
            cur.execute("SELECT 1 FROM pg_database WHERE datname = %s", (db_name,))
            if cur.fetchone() is not None:
                logger.info(f"Database {db_name} already exists")
                return False
            cur.execute(
                sql.SQL("CREATE DATABASE {}").format(sql.Identifier(db_name))
            )
            logger.info(f"Database {db_name} created")
            return True
    finally:
        conn.close()


def create_schema(settings: Settings) -> None:
    """Crea la tabla Tasks (si no existe) con el ORM configurado."""
    if settings.orm == "sqlalchemy":
        engine = build_engine(settings.database_url, pool_size=1)
        try:
            init_db(engine)
        finally:
            engine.dispose()
    else:
        database = build_database(settings.database_url, max_connections=1)
        try:
            with database.connection_context():
                database.create_tables([bind_task_model(database)], safe=True)
        finally:
            database.close_all()
    logger.info("Tasks table created or already exists")
