from __future__ import annotations

import logging
from urllib.parse import quote

from stockwatch.repository.watchlist.interfaces import WatchlistRepository

logger = logging.getLogger(__name__)


class WatchlistApplicationService:
    def __init__(self, *, repository: WatchlistRepository) -> None:
        self._repository = repository

    def list_items(self) -> list[str]:
        return self._repository.list_symbols()

    def add_item(self, *, symbol: str) -> str:
        """Append *symbol* as given and return the detail page to redirect to.

        Symbols are neither normalised nor checked against the provider; an
        unknown symbol only fails once its detail page is requested.
        """
        symbol = str(symbol)
        self._repository.add_symbol(symbol=symbol)
        logger.info("Added %s to watchlist", symbol)
        return detail_path(symbol)


def detail_path(symbol: str) -> str:
    return f"/detail/{quote(symbol, safe='')}"
