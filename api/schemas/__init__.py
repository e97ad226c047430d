from .responses import DonationSuggestionsResponse, ExchangeRateResponse, HealthResponse

__all__ = [
	'DonationSuggestionsResponse',
	'ExchangeRateResponse',
	'HealthResponse',
]
