from __future__ import annotations

from typing import Any, Protocol

from stockwatch.domain.market_data.schemas import Range, StockClose, StockDetails


class StockDataProvider(Protocol):
    async def query_company(self, symbol: str, *, last: int = 1) -> list[dict[str, Any]]: ...

    async def query_price_history(
        self,
        symbol: str,
        *,
        last: int | None = None,
        range: Range | None = None,
        sort: str | None = None,
    ) -> list[dict[str, Any]]: ...


class MarketDataService(Protocol):
    async def get_stock_details(self, *, symbol: str) -> StockDetails: ...

    async def get_historical_data(self, *, symbol: str, range: Range) -> list[StockClose]: ...
