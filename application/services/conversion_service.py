import logging
import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from application.services.geo_service import currency_symbol
from application.services.rate_service import RateService
from domain.models.geo import DonationSuggestions, GeoInfo

logger = logging.getLogger(__name__)

BASE_SUGGESTED_USD = (3, 10, 25, 50)

# currencies whose minor amounts are meaningless; suggestions snap to tens
TENS_ROUNDED_SYMBOLS = frozenset({'₹', '¥'})


def round_amount(value: Decimal, symbol: str) -> Decimal:
	if symbol in TENS_ROUNDED_SYMBOLS:
		return (value / 10).to_integral_value(rounding=ROUND_HALF_UP) * 10
	if value < 10:
		return value.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)
	return value.to_integral_value(rounding=ROUND_HALF_UP)


def convert_amounts(amounts: Sequence[int | float | Decimal], rate: float | Decimal, symbol: str) -> list[Decimal]:
	"""Converts base-currency amounts with `rate` and rounds them for display.

	`rate` must be finite and positive; callers fall back to the base amounts otherwise.
	"""
	multiplier = Decimal(str(rate))
	return [round_amount(Decimal(str(amount)) * multiplier, symbol) for amount in amounts]


class ConversionService:
	def __init__(self, rate_service: RateService):
		self.rate_service = rate_service

	async def suggest(self, geo: GeoInfo) -> DonationSuggestions:
		base_amounts = [Decimal(amount) for amount in BASE_SUGGESTED_USD]
		base_currency = self.rate_service.base_currency

		if geo.currency == base_currency:
			return DonationSuggestions(
				country=geo.country,
				currency=geo.currency,
				symbol=geo.symbol,
				amounts=base_amounts,
				rate=None,
				provider=None,
				converted=False,
			)

		snapshot = await self.rate_service.get_snapshot()
		rate = snapshot.rate_for(geo.currency)

		if rate is None or not math.isfinite(rate) or rate <= 0:
			logger.warning(f'No usable {geo.currency} rate from {snapshot.provider}; suggesting {base_currency} amounts')
			return DonationSuggestions(
				country=geo.country,
				currency=base_currency,
				symbol=currency_symbol(base_currency),
				amounts=base_amounts,
				rate=None,
				provider=snapshot.provider,
				converted=False,
			)

		return DonationSuggestions(
			country=geo.country,
			currency=geo.currency,
			symbol=geo.symbol,
			amounts=convert_amounts(base_amounts, rate, geo.symbol),
			rate=rate,
			provider=snapshot.provider,
			converted=True,
		)
