from __future__ import annotations

from collections.abc import Iterable
import threading


class InMemoryWatchlistRepository:
    """Process-local, append-only watchlist. Lost on restart.

    Appends and reads are serialised with a lock so concurrent requests
    never observe a half-applied append; ``list_symbols`` returns a copy.
    """

    def __init__(self, *, seed: Iterable[str] = ()) -> None:
        self._symbols: list[str] = list(seed)
        self._lock = threading.Lock()

    def list_symbols(self) -> list[str]:
        with self._lock:
            return list(self._symbols)

    def add_symbol(self, *, symbol: str) -> None:
        with self._lock:
            self._symbols.append(symbol)
