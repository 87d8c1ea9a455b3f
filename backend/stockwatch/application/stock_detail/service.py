from __future__ import annotations

import logging

from stockwatch.application.market_data.interfaces import MarketDataService
from stockwatch.application.watchlist.interfaces import WatchlistService
from stockwatch.domain.market_data.schemas import (
    ALL_RANGES,
    DEFAULT_RANGE,
    Range,
    SelectedStock,
    StockDetailView,
)
from stockwatch.domain.market_data.services import parse_range

logger = logging.getLogger(__name__)


class StockDetailApplicationService:
    """Assembles the detail page for one watchlist symbol.

    Company details are loaded first; a failure there aborts before the
    history request. Both calls run sequentially and either error type from
    the market data layer propagates unchanged.
    """

    def __init__(
        self,
        *,
        market_data_service: MarketDataService,
        watchlist_service: WatchlistService,
    ) -> None:
        self._market_data_service = market_data_service
        self._watchlist_service = watchlist_service

    async def get_detail(self, *, symbol: str, range: str | Range | None = None) -> StockDetailView:
        selected_range = resolve_range(range)

        details = await self._market_data_service.get_stock_details(symbol=symbol)
        historical_data = await self._market_data_service.get_historical_data(
            symbol=symbol,
            range=selected_range,
        )

        return StockDetailView(
            watchlist=self._watchlist_service.list_items(),
            selected_stock=SelectedStock(
                company_name=details.company_name,
                symbol=details.symbol,
                change=details.change,
                historical_data=historical_data,
            ),
            all_ranges=ALL_RANGES,
            selected_range=selected_range,
        )


def resolve_range(raw: str | Range | None) -> Range:
    parsed = parse_range(raw)
    if parsed is None:
        if raw is not None:
            logger.warning("Unsupported range %r, falling back to %s", raw, DEFAULT_RANGE)
        return DEFAULT_RANGE
    return parsed
