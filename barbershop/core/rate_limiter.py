from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from threading import Lock

DEFAULT_LIMIT = 100
DEFAULT_WINDOW_SECONDS = 60


@dataclass
class RateLimitDecision:
    allowed: bool
    limit: int
    remaining: int
    retry_after_seconds: int


class RateLimiterService(ABC):
    @abstractmethod
    def check(self, *, client_id: str) -> RateLimitDecision:
        """Valida se a requisição do cliente deve prosseguir."""


class InMemoryRateLimiterService(RateLimiterService):
    """Janela deslizante em memória por cliente, válida para a API inteira."""

    def __init__(
        self,
        *,
        limit: int = DEFAULT_LIMIT,
        window_seconds: int = DEFAULT_WINDOW_SECONDS,
        clock=time.monotonic,
    ) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        self._store: dict[str, deque[float]] = {}
        self._lock = Lock()
        self._last_sweep = clock()

    def check(self, *, client_id: str) -> RateLimitDecision:
        now = self._clock()

        with self._lock:
            cutoff = now - self.window_seconds
            if now - self._last_sweep >= self.window_seconds:
                self._sweep(cutoff)
                self._last_sweep = now

            bucket = self._store.setdefault(client_id, deque())
            while bucket and bucket[0] <= cutoff:
                bucket.popleft()

            if len(bucket) >= self.limit:
                retry_after = max(1, int(self.window_seconds - (now - bucket[0])))
                return RateLimitDecision(
                    allowed=False,
                    limit=self.limit,
                    remaining=0,
                    retry_after_seconds=retry_after,
                )

            bucket.append(now)
            remaining = max(0, self.limit - len(bucket))
            return RateLimitDecision(
                allowed=True,
                limit=self.limit,
                remaining=remaining,
                retry_after_seconds=0,
            )

    def _sweep(self, cutoff: float) -> None:
        # remove clientes sem requisições dentro da janela
        stale = [key for key, bucket in self._store.items() if not bucket or bucket[-1] <= cutoff]
        for key in stale:
            del self._store[key]
