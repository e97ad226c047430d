from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from domain.models.geo import DonationSuggestions
from domain.models.rates import RateSnapshot


def _as_number(value: Decimal) -> int | float:
	return int(value) if value == value.to_integral_value() else float(value)


class ExchangeRateResponse(BaseModel):
	base: str = Field(..., description='Currency all rates are relative to')
	rates: dict[str, float | None] = Field(..., description='Rate per allow-listed currency, null when unknown')
	fetched_at: int = Field(..., alias='fetchedAt', description='When the snapshot was produced (ms since epoch)')
	provider: str | None = Field(None, description='Upstream source, or fallback/none')
	error: str | None = Field(None, description='Diagnostic for fallback responses')
	note: str | None = Field(None, description='Human readable note for fallback responses')
	target: str | None = Field(None, description='Requested target currency')
	rate: float | None = Field(None, description='Rate for the requested target currency')

	model_config = ConfigDict(
		populate_by_name=True,
		json_schema_extra={
			'example': {
				'base': 'USD',
				'rates': {'USD': 1.0, 'EUR': 0.92, 'INR': 83.12, 'CNY': None},
				'fetchedAt': 1760781600000,
				'provider': 'exchangerate.host',
				'error': None,
			}
		},
	)

	@classmethod
	def from_snapshot(cls, snapshot: RateSnapshot, target: str | None = None) -> 'ExchangeRateResponse':
		fields = {
			'base': snapshot.base,
			'rates': snapshot.rates,
			'fetchedAt': snapshot.fetched_at,
			'provider': snapshot.provider,
			'error': snapshot.error,
		}
		if snapshot.note is not None:
			fields['note'] = snapshot.note
		if target is not None:
			fields['target'] = target
			fields['rate'] = snapshot.rate_for(target)
		return cls(**fields)


class DonationSuggestionsResponse(BaseModel):
	country: str = Field(..., description='ISO 3166-1 alpha-2 country code')
	currency: str = Field(..., description='Currency the amounts are expressed in')
	symbol: str = Field(..., description='Display symbol for the currency')
	amounts: list[int | float] = Field(..., description='Suggested donation amounts')
	rate: float | None = Field(None, description='USD rate used for the conversion')
	provider: str | None = Field(None, description='Source of the rate')
	converted: bool = Field(..., description='Whether the amounts were converted from USD')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'country': 'IN',
				'currency': 'INR',
				'symbol': '₹',
				'amounts': [250, 830, 2080, 4150],
				'rate': 83.0,
				'provider': 'er-api',
				'converted': True,
			}
		}
	)

	@classmethod
	def from_suggestions(cls, suggestions: DonationSuggestions) -> 'DonationSuggestionsResponse':
		return cls(
			country=suggestions.country,
			currency=suggestions.currency,
			symbol=suggestions.symbol,
			amounts=[_as_number(amount) for amount in suggestions.amounts],
			rate=suggestions.rate,
			provider=suggestions.provider,
			converted=suggestions.converted,
		)


class HealthResponse(BaseModel):
	status: str = Field(..., description='Overall service status')
	cache: str = Field(..., description='warm when a fresh snapshot is cached, else cold')
	providers: list[str] = Field(..., description='Rate providers in priority order')
	last_provider: str | None = Field(None, description='Source of the cached snapshot')
