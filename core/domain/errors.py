class TaskError(Exception):
    """
    Error base del dominio de tareas.

    Cada variante lleva un mensaje legible y, opcionalmente, la excepción
    original (`cause`) para los logs.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ValidationError(TaskError):
    """Entrada mal formada o incompleta (p. ej. nombre de tarea vacío)."""


class NotFound(TaskError):
    """No existe ninguna tarea con el id solicitado."""


class StoreUnavailable(TaskError):
    """El almacén no está disponible (gate activo o pool agotado)."""


class UnexpectedStoreError(TaskError):
    """Cualquier otro fallo de la capa de persistencia."""

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message, cause)
        self.code = code
