from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status

from api.dependencies import get_conversion_service
from api.schemas import DonationSuggestionsResponse
from application.services import ConversionService
from application.services.geo_service import country_from_headers, geo_from_country

router = APIRouter(prefix='/api', tags=['donations'])


@router.get(
	'/donation-suggestions',
	response_model=DonationSuggestionsResponse,
	status_code=status.HTTP_200_OK,
	summary='Suggested donation amounts in the visitor currency',
)
async def get_donation_suggestions(
	request: Request,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
	country: Annotated[
		str | None,
		Query(
			min_length=2,
			max_length=2,
		),
	] = None,
) -> DonationSuggestionsResponse:
	geo = geo_from_country(country or country_from_headers(request.headers))
	suggestions = await service.suggest(geo)
	return DonationSuggestionsResponse.from_suggestions(suggestions)
