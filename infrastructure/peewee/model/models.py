from datetime import datetime, timezone

from peewee import (
    SQL,
    AutoField,
    BooleanField,
    CharField,
    Database,
    DateField,
    DateTimeField,
    Model,
    NodeList,
    SqliteDatabase,
    TextField,
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TaskIdField(AutoField):
    """
    Clave autoincremental que nunca reutiliza ids.

    En SQLite un `INTEGER PRIMARY KEY` sin `AUTOINCREMENT` vuelve a entregar
    el id más alto si esa fila se borra. Postgres (SERIAL) y MySQL
    (AUTO_INCREMENT) ya se comportan así.
    """

    def ddl(self, ctx):
        node_list = super().ddl(ctx)
        if isinstance(self.model._meta.database, SqliteDatabase):
            return NodeList((node_list, SQL("AUTOINCREMENT")))
        return node_list


class TaskModel(Model):
    id = TaskIdField()
    task_name = CharField(max_length=255)
    task_description = TextField(null=True)
    due_date = DateField(null=True)
    completed = BooleanField(default=False)
    created_at = DateTimeField(default=utcnow)
    updated_at = DateTimeField(default=utcnow)

    class Meta:
        table_name = "Tasks"


def bind_task_model(database: Database) -> type[TaskModel]:
    """
    Subclase de `TaskModel` atada a `database`.

    Cada repositorio usa la suya, así dos repositorios sobre bases de datos
    distintas no comparten el binding de la clase.
    """
    meta = type("Meta", (), {"database": database, "table_name": "Tasks"})
    return type("TaskModel", (TaskModel,), {"Meta": meta, "__module__": __name__})
