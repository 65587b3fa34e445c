from peewee import Database
from playhouse.db_url import connect


def build_database(
    url: str,
    max_connections: int = 10,
    timeout: float = 10.0,
) -> Database:
    """
    Crea una base de datos Peewee con pool de conexiones acotado.

    Argumentos:
        url: URL de conexión (sqlite://, postgres://, mysql://...). Se le
            añade el sufijo `+pool` si no lo trae.
        max_connections: Conexiones simultáneas máximas.
        timeout: Segundos de espera por una conexión libre antes de lanzar
            `MaxConnectionsExceeded`.
    """
    scheme, _, rest = url.partition("://")
    if not scheme.endswith("+pool"):
        scheme = f"{scheme}+pool"

    kwargs = {
        "max_connections": max_connections,
        "timeout": timeout,
        "stale_timeout": 300,
    }
    if scheme.startswith("sqlite"):
        # Las peticiones se atienden en varios threads del servidor.
        kwargs["check_same_thread"] = False

    return connect(f"{scheme}://{rest}", **kwargs)
