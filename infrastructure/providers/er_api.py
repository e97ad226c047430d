from domain.exceptions.currency import ProviderError
from infrastructure.providers.base import BaseRatesProvider


class ErApiProvider(BaseRatesProvider):
    BASE_URL = "https://open.er-api.com/v6"

    @property
    def name(self) -> str:
        return "er-api"

    def _build_request(self) -> tuple[str, dict]:
        return f"{self.BASE_URL}/latest/{self.base_currency}", {}

    def _check_payload(self, data: dict) -> None:
        if data.get("result") == "error":
            raise ProviderError(f"er-api error: {data.get('error-type', 'Unknown error')}")

    def _extract_base(self, data: dict) -> str:
        # the open endpoint reports its base as base_code
        base = data.get("base") or data.get("base_code")
        return base.upper() if isinstance(base, str) and base else self.base_currency
