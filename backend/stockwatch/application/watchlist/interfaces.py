from __future__ import annotations

from typing import Protocol


class WatchlistService(Protocol):
    def list_items(self) -> list[str]: ...

    def add_item(self, *, symbol: str) -> str: ...
