from __future__ import annotations

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from stockwatch.api.deps import get_stock_detail_service, get_watchlist_service
from stockwatch.api.errors import install_api_error_handlers
from stockwatch.api.pages.views import router as pages_router
from stockwatch.api.v1.router import api_router
from stockwatch.application.market_data.errors import MarketDataError, NotFoundError
from stockwatch.application.stock_detail.service import StockDetailApplicationService
from stockwatch.application.watchlist.service import WatchlistApplicationService
from stockwatch.domain.market_data.schemas import Range, StockClose, StockDetails
from stockwatch.repository.watchlist.repo import InMemoryWatchlistRepository


class FakeMarketDataService:
    def __init__(self) -> None:
        self.details_error: MarketDataError | None = None
        self.history_error: MarketDataError | None = None
        self.details_calls: list[str] = []
        self.history_calls: list[tuple[str, Range]] = []

    async def get_stock_details(self, *, symbol: str) -> StockDetails:
        self.details_calls.append(symbol)
        if self.details_error is not None:
            raise self.details_error
        return StockDetails(company_name=f"{symbol} Inc.", symbol=symbol, change=1.2346)

    async def get_historical_data(self, *, symbol: str, range: Range) -> list[StockClose]:
        self.history_calls.append((symbol, range))
        if self.history_error is not None:
            raise self.history_error
        return [
            StockClose(date="2026-02-09", close=100.0),
            StockClose(date="2026-02-10", close=101.23456),
        ]


@pytest.fixture
def watchlist_repository() -> InMemoryWatchlistRepository:
    return InMemoryWatchlistRepository(seed=["AAPL", "GOOG"])


@pytest.fixture
def watchlist_service(watchlist_repository: InMemoryWatchlistRepository) -> WatchlistApplicationService:
    return WatchlistApplicationService(repository=watchlist_repository)


@pytest.fixture
def market_data_service() -> FakeMarketDataService:
    return FakeMarketDataService()


@pytest.fixture
def api_client(
    watchlist_service: WatchlistApplicationService,
    market_data_service: FakeMarketDataService,
) -> Generator[TestClient, None, None]:
    detail_service = StockDetailApplicationService(
        market_data_service=market_data_service,
        watchlist_service=watchlist_service,
    )
    app = FastAPI()
    install_api_error_handlers(app)
    app.include_router(pages_router)
    app.include_router(api_router, prefix="/api/v1")
    app.dependency_overrides[get_watchlist_service] = lambda: watchlist_service
    app.dependency_overrides[get_stock_detail_service] = lambda: detail_service
    with TestClient(app) as client:
        yield client


@pytest.fixture
def missing_company() -> NotFoundError:
    return NotFoundError("company information")
