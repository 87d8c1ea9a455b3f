from __future__ import annotations

from collections.abc import Awaitable
import logging
from typing import TypeVar

from stockwatch.application.market_data.errors import MarketDataError, NotFoundError, ProviderError
from stockwatch.application.market_data.interfaces import StockDataProvider
from stockwatch.domain.market_data.schemas import Range, StockClose, StockDetails
from stockwatch.domain.market_data.services import latest_close_change, sort_closes_ascending
from stockwatch.infrastructure.clients.iex_mapper import (
    map_iex_close,
    map_iex_company_name,
    map_iex_prices_to_stock_closes,
)

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class MarketDataApplicationService:
    """Company details and close-price history for a single stock symbol.

    Every call goes straight to the provider; nothing is cached or retried.
    Failures surface as :class:`NotFoundError` or :class:`ProviderError`.
    """

    def __init__(self, *, provider: StockDataProvider | None = None) -> None:
        self._provider = provider

    async def get_stock_details(self, *, symbol: str) -> StockDetails:
        provider = self._require_provider()

        companies = await _call_provider(provider.query_company(symbol, last=1))
        if not companies:
            raise NotFoundError("company information")

        # Provider default order is newest first.
        last_two_prices = await _call_provider(provider.query_price_history(symbol, last=2))
        if not last_two_prices:
            raise NotFoundError("latest price")

        try:
            closes = [map_iex_close(row) for row in last_two_prices[:2]]
            company_name = map_iex_company_name(companies[0])
        except (TypeError, ValueError) as exc:
            raise ProviderError(str(exc)) from exc

        return StockDetails(
            company_name=company_name,
            symbol=symbol,
            change=latest_close_change(closes),
        )

    async def get_historical_data(self, *, symbol: str, range: Range) -> list[StockClose]:
        if not isinstance(range, Range):
            raise ValueError(f"Unsupported range: {range!r}")
        provider = self._require_provider()

        rows = await _call_provider(provider.query_price_history(symbol, range=range, sort="ASC"))
        try:
            closes = map_iex_prices_to_stock_closes(rows)
        except (TypeError, ValueError) as exc:
            raise ProviderError(str(exc)) from exc
        return sort_closes_ascending(closes)

    def _require_provider(self) -> StockDataProvider:
        if self._provider is None:
            raise ProviderError("IEX Cloud client not configured")
        return self._provider


async def _call_provider(call: Awaitable[_T]) -> _T:
    try:
        return await call
    except MarketDataError:
        raise
    except Exception as exc:
        logger.warning("Market data provider call failed: %s", exc)
        raise ProviderError(str(exc)) from exc
