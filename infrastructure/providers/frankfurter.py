from domain.exceptions.currency import ProviderError
from infrastructure.providers.base import BaseRatesProvider


class FrankfurterProvider(BaseRatesProvider):
    BASE_URL = "https://api.frankfurter.app"

    @property
    def name(self) -> str:
        return "frankfurter"

    def _build_request(self) -> tuple[str, dict]:
        return f"{self.BASE_URL}/latest", {"from": self.base_currency}

    def _check_payload(self, data: dict) -> None:
        if "message" in data and "rates" not in data:
            raise ProviderError(f"frankfurter error: {data['message']}")
