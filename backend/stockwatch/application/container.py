from __future__ import annotations

from functools import lru_cache

from stockwatch.application.market_data.service import MarketDataApplicationService
from stockwatch.application.stock_detail.service import StockDetailApplicationService
from stockwatch.application.watchlist.service import WatchlistApplicationService
from stockwatch.core.config import settings
from stockwatch.infrastructure.clients.iex_cloud import IexCloudClient
from stockwatch.repository.watchlist.repo import InMemoryWatchlistRepository


@lru_cache
def _iex_cloud_client() -> IexCloudClient | None:
    if not settings.iex_token:
        return None
    return IexCloudClient(
        settings.iex_token,
        base_url=settings.iex_api_url,
        timeout=settings.iex_timeout_seconds,
    )


@lru_cache
def _watchlist_repository() -> InMemoryWatchlistRepository:
    return InMemoryWatchlistRepository(seed=settings.watchlist_seed_symbols)


def build_market_data_service() -> MarketDataApplicationService:
    return MarketDataApplicationService(provider=_iex_cloud_client())


def build_watchlist_service() -> WatchlistApplicationService:
    return WatchlistApplicationService(repository=_watchlist_repository())


def build_stock_detail_service() -> StockDetailApplicationService:
    return StockDetailApplicationService(
        market_data_service=build_market_data_service(),
        watchlist_service=build_watchlist_service(),
    )


def reset_container() -> None:
    _iex_cloud_client.cache_clear()
    _watchlist_repository.cache_clear()
