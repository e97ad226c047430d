from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from api.dependencies import get_rate_service
from api.schemas import ExchangeRateResponse
from application.services import RateService
from domain.exceptions.currency import ExchangeRateUnavailableError

router = APIRouter(prefix='/api', tags=['exchange-rate'])


@router.get(
	'/exchange-rate',
	response_model=ExchangeRateResponse,
	response_model_exclude_unset=True,
	status_code=status.HTTP_200_OK,
	summary='Get the USD rate table for the supported currencies',
)
async def get_exchange_rate(
	response: Response,
	service: Annotated[RateService, Depends(get_rate_service)],
	target: Annotated[
		str | None,
		Query(
			min_length=3,
			max_length=5,
			pattern='^[A-Za-z]+$',
		),
	] = None,
) -> ExchangeRateResponse:
	try:
		snapshot = await service.get_snapshot()
	except Exception as e:
		raise ExchangeRateUnavailableError(str(e), snapshot=service.unavailable_snapshot(str(e))) from e

	ttl_seconds = service.cache.ttl_seconds
	response.headers['Cache-Control'] = f'public, s-maxage={ttl_seconds}, stale-while-revalidate=60'

	return ExchangeRateResponse.from_snapshot(snapshot, target=target.upper() if target else None)
