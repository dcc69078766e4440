import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional


@dataclass
class _Entry:
    fetched_at: float
    data: List[Any]


class TTLCache:
    """
    Cache mémoire par URL avec durée de vie.
    Une entrée est remplacée en bloc, jamais modifiée, et n'est plus servie
    dès que son âge atteint le TTL. Horloge injectable pour les tests.
    """

    def __init__(self, ttl_seconds: float = 300, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._store: Dict[str, _Entry] = {}

    def now(self) -> float:
        return self._clock()

    def get(self, key: str) -> Optional[List[Any]]:
        entry = self._store.get(key)
        if entry is None:
            return None
        if self.now() - entry.fetched_at >= self.ttl_seconds:
            return None
        return entry.data

    def set(self, key: str, data: List[Any], fetched_at: Optional[float] = None) -> None:
        ts = self.now() if fetched_at is None else fetched_at
        self._store[key] = _Entry(fetched_at=ts, data=data)

    def summary(self) -> Dict[str, dict]:
        """Métadonnées seulement (exposables dans /health)."""
        now = self.now()
        return {
            key: {"age_s": round(now - e.fetched_at, 1), "rows": len(e.data)}
            for key, e in self._store.items()
        }

    def clear(self) -> None:
        self._store.clear()
