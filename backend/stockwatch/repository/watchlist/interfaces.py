from __future__ import annotations

from typing import Protocol


class WatchlistRepository(Protocol):
    def list_symbols(self) -> list[str]: ...

    def add_symbol(self, *, symbol: str) -> None: ...
