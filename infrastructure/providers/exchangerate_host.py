from domain.exceptions.currency import ProviderError
from infrastructure.providers.base import BaseRatesProvider


class ExchangerateHostProvider(BaseRatesProvider):
	BASE_URL = 'https://api.exchangerate.host'

	@property
	def name(self) -> str:
		return 'exchangerate.host'

	def _build_request(self) -> tuple[str, dict]:
		return f'{self.BASE_URL}/latest', {'base': self.base_currency, 'places': 6}

	def _check_payload(self, data: dict) -> None:
		if data.get('success') is False:
			error = data.get('error')
			info = error.get('info', 'Unknown error') if isinstance(error, dict) else 'Unknown error'
			raise ProviderError(f'exchangerate.host API error: {info}')
