from fastapi import APIRouter, Depends, Response, status

from backend_fastapi.api.deps import check_health_use_case, get_settings
from backend_fastapi.api.schemas import ConfigResponse, HealthResponse
from core.application.check_health import CheckHealthUseCase
from infrastructure.settings import Settings

router = APIRouter(tags=["system"])


@router.get(
    "/config",
    response_model=ConfigResponse,
    summary="URL base de la API para el frontend",
)
def get_config(settings: Settings = Depends(get_settings)) -> ConfigResponse:
    return ConfigResponse(api_base_url=settings.api_base_url)


@router.get(
    "/health",
    response_model=HealthResponse,
    response_model_exclude_none=True,
    summary="Estado del servicio y de la base de datos",
)
def health(
    response: Response,
    use_case: CheckHealthUseCase = Depends(check_health_use_case),
) -> HealthResponse:
    """
    Sondea la base de datos y refresca el flag que usa el gate de /tasks.

    Responde 200 si la BDD contesta y 503 en caso contrario.
    """
    report = use_case.execute()
    if not report.healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(
        status="healthy" if report.healthy else "unhealthy",
        timestamp=report.timestamp,
        database="connected" if report.healthy else "disconnected",
        database_error=report.database_error,
        environment=report.environment,
    )
