from domain.models.rates import RateSnapshot


class CurrencyException(Exception):
    pass


class ProviderError(CurrencyException):
    pass

class ProviderUnavailableError(ProviderError):
    """Network failure or timeout talking to a provider."""

class CacheError(CurrencyException):
    pass

class ExchangeRateUnavailableError(CurrencyException):
    def __init__(self, message: str, snapshot: RateSnapshot | None = None):
        super().__init__(message)
        self.snapshot = snapshot
