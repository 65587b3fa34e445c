"""
Estado de salud del almacén de tareas.

Lo actualiza únicamente el propio almacén (ping y resultado de sus
operaciones) y lo lee el gate de disponibilidad de la API.

Estados:
    UNKNOWN   → Todavía no se ha comprobado. No bloquea peticiones.
    HEALTHY   → Última comprobación correcta.
    UNHEALTHY → Última comprobación fallida. Las rutas /tasks responden 503.
"""

import logging
import threading
from datetime import datetime, timezone

logger = logging.getLogger(__name__)


class StoreHealth:
    """
    Flag de conectividad thread-safe.

    Args:
        name: Nombre descriptivo (para logs), ej: "peewee", "sqlalchemy".
    """

    UNKNOWN = "UNKNOWN"
    HEALTHY = "HEALTHY"
    UNHEALTHY = "UNHEALTHY"

    def __init__(self, name: str = "default") -> None:
        self.name = name

        self._state = self.UNKNOWN
        self._last_error: str | None = None
        self._last_checked: datetime | None = None
        self._lock = threading.Lock()

    @property
    def state(self) -> str:
        with self._lock:
            return self._state

    @property
    def last_error(self) -> str | None:
        with self._lock:
            return self._last_error

    @property
    def last_checked(self) -> datetime | None:
        with self._lock:
            return self._last_checked

    @property
    def is_available(self) -> bool:
        """False solo si la última comprobación conocida falló."""
        return self.state != self.UNHEALTHY

    def record_success(self) -> None:
        with self._lock:
            if self._state == self.UNHEALTHY:
                logger.info(f"✅ Store [{self.name}]: UNHEALTHY → HEALTHY")
            self._state = self.HEALTHY
            self._last_error = None
            self._last_checked = datetime.now(timezone.utc)

    def record_failure(self, error: BaseException | str) -> None:
        with self._lock:
            if self._state != self.UNHEALTHY:
                logger.warning(
                    f"🔴 Store [{self.name}]: {self._state} → UNHEALTHY ({error})"
                )
            self._state = self.UNHEALTHY
            self._last_error = str(error)
            self._last_checked = datetime.now(timezone.utc)
