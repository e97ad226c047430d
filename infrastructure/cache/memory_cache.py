import logging
from collections.abc import Callable

from domain.exceptions.currency import CacheError
from domain.models.rates import RateSnapshot
from utils.time import now_ms

logger = logging.getLogger(__name__)


class InMemoryRateCache:
    """Single-slot, process-local cache for the latest rate snapshot."""

    def __init__(self, ttl_ms: int, clock: Callable[[], int] = now_ms):
        if ttl_ms < 0:
            raise CacheError(f'Cache TTL must not be negative, got {ttl_ms}')
        self.ttl_ms = ttl_ms
        self._clock = clock
        self._snapshot: RateSnapshot | None = None
        self._inserted_at: int | None = None

    @property
    def ttl_seconds(self) -> int:
        return self.ttl_ms // 1000

    def now(self) -> int:
        return self._clock()

    def get(self) -> RateSnapshot | None:
        if self._snapshot is None or self._inserted_at is None:
            return None

        age = self._clock() - self._inserted_at
        if age >= self.ttl_ms:
            logger.debug(f'Cached snapshot expired ({age} ms old)')
            return None

        return self._snapshot

    def put(self, snapshot: RateSnapshot) -> None:
        self._snapshot = snapshot
        self._inserted_at = self._clock()

    def clear(self) -> None:
        self._snapshot = None
        self._inserted_at = None
