import os
from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

from dotenv import load_dotenv

load_dotenv()


def as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def redact_url(url: str) -> str:
    """Quita la contraseña de una URL de conexión para poder mostrarla."""
    parts = urlsplit(url)
    if parts.password is None:
        return url
    netloc = parts.netloc.replace(f":{parts.password}@", ":***@", 1)
    return urlunsplit(parts._replace(netloc=netloc))


@dataclass(frozen=True, slots=True)
class Settings:
    orm: str = "peewee"
    database_url: str = "sqlite:///tasks.db"
    pool_size: int = 10
    pool_timeout: float = 10.0
    api_base_url: str = "http://localhost:8000"
    app_env: str = "development"
    cors_origins: tuple[str, ...] = ("*",)
    cors_allow_credentials: bool = True
    cors_allow_methods: tuple[str, ...] = ("*",)
    cors_allow_headers: tuple[str, ...] = ("*",)
    static_dir: str | None = None
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> "Settings":
        cors_origins = os.getenv("CORS_ORIGINS", "*")
        if cors_origins == "*":
            origins: tuple[str, ...] = ("*",)
        else:
            origins = tuple(origin.strip() for origin in cors_origins.split(","))

        return cls(
            orm=os.getenv("ORM", "peewee").lower(),
            database_url=os.getenv("DATABASE_URL", "sqlite:///tasks.db"),
            pool_size=int(os.getenv("DB_POOL_SIZE", "10")),
            pool_timeout=float(os.getenv("DB_POOL_TIMEOUT", "10")),
            api_base_url=os.getenv("API_BASE_URL", "http://localhost:8000"),
            app_env=os.getenv("APP_ENV", "development"),
            cors_origins=origins,
            cors_allow_credentials=as_bool(os.getenv("CORS_ALLOW_CREDENTIALS", "true")),
            cors_allow_methods=tuple(os.getenv("CORS_ALLOW_METHODS", "*").split(",")),
            cors_allow_headers=tuple(os.getenv("CORS_ALLOW_HEADERS", "*").split(",")),
            static_dir=os.getenv("STATIC_DIR") or None,
            log_level=os.getenv("LOG_LEVEL", "info"),
        )

    def environment(self) -> dict[str, str]:
        """Resumen de configuración que expone /health."""
        return {
            "app_env": self.app_env,
            "orm": self.orm,
            "database_url": redact_url(self.database_url),
            "api_base_url": self.api_base_url,
        }


def get_settings() -> Settings:
    return Settings.from_env()
