import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool

from backend_fastapi.api.errors import register_exception_handlers
from backend_fastapi.api.routes.system import router as system_router
from backend_fastapi.api.routes.tasks import router as tasks_router
from core.domain.errors import StoreUnavailable
from core.domain.ports.task_repository import TaskRepository
from infrastructure.container import get_task_repository
from infrastructure.logging_setup import configure_logging
from infrastructure.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(
    repository: TaskRepository | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Construye la aplicación FastAPI.

    Args:
        repository: Almacén de tareas. Si es None, se crea en el arranque
            según la configuración (ORM, DATABASE_URL...).
        settings: Configuración. Si es None, se lee del entorno.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.log_level)
        if app.state.repository is None:
            app.state.repository = get_task_repository(settings)
        store: TaskRepository = app.state.repository

        # Un fallo aquí no es fatal: el gate protege /tasks hasta que
        # /health vuelva a ver la BDD.
        try:
            await run_in_threadpool(store.ping)
            logger.info("✅ Conectado a la base de datos")
        except StoreUnavailable as e:
            logger.error(
                f"🔴 Base de datos no disponible al arrancar: {e.message}. "
                f"El servicio sigue activo."
            )

        yield

        store.close()

    app = FastAPI(title="Task Tracker API", lifespan=lifespan)
    app.state.settings = settings
    app.state.repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=list(settings.cors_allow_methods),
        allow_headers=list(settings.cors_allow_headers),
    )

    register_exception_handlers(app)
    app.include_router(system_router)
    app.include_router(tasks_router)

    if settings.static_dir and os.path.isdir(settings.static_dir):
        app.mount(
            "/", StaticFiles(directory=settings.static_dir, html=True), name="static"
        )

    return app


app = create_app()
