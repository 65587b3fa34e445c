import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.domain.errors import (
    NotFound,
    StoreUnavailable,
    UnexpectedStoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message}
    )


async def _request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    problems = [
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "; ".join(problems) or "Invalid request"},
    )


async def _not_found(request: Request, exc: NotFound) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"error": exc.message}
    )


async def _store_unavailable(request: Request, exc: StoreUnavailable) -> JSONResponse:
    logger.warning(f"⚡ {request.method} {request.url.path} → 503: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": "Service unavailable", "message": exc.message},
    )


async def _unexpected_store_error(
    request: Request, exc: UnexpectedStoreError
) -> JSONResponse:
    logger.error(
        f"❌ {request.method} {request.url.path} → 500: {exc.message} ({exc.cause})"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": exc.message,
            "details": str(exc.cause) if exc.cause is not None else exc.message,
            "code": exc.code,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Traduce los errores del dominio a respuestas HTTP."""
    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(NotFound, _not_found)
    app.add_exception_handler(StoreUnavailable, _store_unavailable)
    app.add_exception_handler(UnexpectedStoreError, _unexpected_store_error)
