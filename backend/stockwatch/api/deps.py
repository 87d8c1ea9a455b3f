from __future__ import annotations

from stockwatch.application.container import (
    build_stock_detail_service,
    build_watchlist_service,
)
from stockwatch.application.stock_detail.service import StockDetailApplicationService
from stockwatch.application.watchlist.service import WatchlistApplicationService


def get_watchlist_service() -> WatchlistApplicationService:
    return build_watchlist_service()


def get_stock_detail_service() -> StockDetailApplicationService:
    return build_stock_detail_service()
