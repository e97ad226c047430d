from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class GeoInfo:
    country: str  # ISO 3166-1 alpha-2
    currency: str  # ISO 4217
    symbol: str


@dataclass(frozen=True)
class DonationSuggestions:
    country: str
    currency: str
    symbol: str
    amounts: list[Decimal]
    rate: float | None
    provider: str | None
    converted: bool
