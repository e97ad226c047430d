from typing import Annotated

from fastapi import APIRouter, Depends

from api.dependencies import get_rate_service
from api.schemas import HealthResponse
from application.services import RateService

router = APIRouter(tags=['health'])


@router.get(
    '/health',
    response_model=HealthResponse,
    summary='Service health check',
)
async def health_check(service: Annotated[RateService, Depends(get_rate_service)]) -> HealthResponse:
    """
    Reports whether a fresh rate snapshot is cached and which providers are configured.
    Never triggers an upstream fetch.
    """
    cached = service.cache.get()
    return HealthResponse(
        status='degraded' if cached is not None and cached.is_fallback else 'healthy',
        cache='warm' if cached is not None else 'cold',
        providers=[provider.name for provider in service.providers],
        last_provider=cached.provider if cached is not None else None,
    )
