from __future__ import annotations

import asyncio
from typing import Any

import pytest

from stockwatch.application.market_data.errors import NotFoundError, ProviderError
from stockwatch.application.market_data.service import MarketDataApplicationService
from stockwatch.domain.market_data.schemas import Range, StockClose


class FakeProvider:
    def __init__(
        self,
        *,
        companies: list[dict[str, Any]] | None = None,
        prices: list[dict[str, Any]] | None = None,
        history: list[dict[str, Any]] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.companies = [{"companyName": "Apple Inc.", "symbol": "AAPL"}] if companies is None else companies
        self.prices = prices or []
        self.history = history or []
        self.error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def query_company(self, symbol: str, *, last: int = 1) -> list[dict[str, Any]]:
        self.calls.append(("COMPANY", {"symbol": symbol, "last": last}))
        if self.error is not None:
            raise self.error
        return self.companies

    async def query_price_history(
        self,
        symbol: str,
        *,
        last: int | None = None,
        range: Range | None = None,
        sort: str | None = None,
    ) -> list[dict[str, Any]]:
        self.calls.append(("HISTORICAL_PRICES", {"symbol": symbol, "last": last, "range": range, "sort": sort}))
        if self.error is not None:
            raise self.error
        if last is not None:
            return self.prices[:last]
        return self.history


def _price(price_date: str, close: float) -> dict[str, Any]:
    return {"priceDate": price_date, "close": close, "open": close, "high": close, "low": close, "symbol": "AAPL"}


def test_stock_details_change_is_latest_minus_previous() -> None:
    provider = FakeProvider(prices=[_price("2026-02-10", 101.23456), _price("2026-02-09", 100.0)])
    service = MarketDataApplicationService(provider=provider)

    details = asyncio.run(service.get_stock_details(symbol="AAPL"))

    assert details.company_name == "Apple Inc."
    assert details.symbol == "AAPL"
    assert details.change == 1.2346
    assert provider.calls == [
        ("COMPANY", {"symbol": "AAPL", "last": 1}),
        ("HISTORICAL_PRICES", {"symbol": "AAPL", "last": 2, "range": None, "sort": None}),
    ]


def test_stock_details_negative_change_keeps_sign() -> None:
    provider = FakeProvider(prices=[_price("2026-02-10", 100.0), _price("2026-02-09", 101.23456)])
    service = MarketDataApplicationService(provider=provider)

    details = asyncio.run(service.get_stock_details(symbol="AAPL"))

    assert details.change == -1.2346


def test_stock_details_single_price_has_no_change() -> None:
    provider = FakeProvider(prices=[_price("2026-02-10", 100.0)])
    service = MarketDataApplicationService(provider=provider)

    details = asyncio.run(service.get_stock_details(symbol="AAPL"))

    assert details.change is None


def test_stock_details_echoes_input_symbol() -> None:
    provider = FakeProvider(
        companies=[{"companyName": "Alphabet Inc.", "symbol": "GOOGL"}],
        prices=[_price("2026-02-10", 100.0)],
    )
    service = MarketDataApplicationService(provider=provider)

    details = asyncio.run(service.get_stock_details(symbol="goog"))

    assert details.symbol == "goog"
    assert details.company_name == "Alphabet Inc."


def test_stock_details_missing_company_skips_price_lookup() -> None:
    provider = FakeProvider(companies=[], prices=[_price("2026-02-10", 100.0)])
    service = MarketDataApplicationService(provider=provider)

    with pytest.raises(NotFoundError, match="Could not find company information for the stock symbol."):
        asyncio.run(service.get_stock_details(symbol="FAKE"))

    assert [dataset for dataset, _ in provider.calls] == ["COMPANY"]


def test_stock_details_missing_prices_is_not_found() -> None:
    provider = FakeProvider(prices=[])
    service = MarketDataApplicationService(provider=provider)

    with pytest.raises(NotFoundError, match="Could not find the latest price for the specified stock."):
        asyncio.run(service.get_stock_details(symbol="AAPL"))


def test_provider_failure_wraps_original_message() -> None:
    provider = FakeProvider(error=RuntimeError("Unauthorized: invalid token"))
    service = MarketDataApplicationService(provider=provider)

    with pytest.raises(ProviderError) as exc_info:
        asyncio.run(service.get_stock_details(symbol="AAPL"))

    assert exc_info.value.message == "Unauthorized: invalid token"
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_provider_error_passes_through_unchanged() -> None:
    original = ProviderError("rate limited")
    provider = FakeProvider(error=original)
    service = MarketDataApplicationService(provider=provider)

    with pytest.raises(ProviderError) as exc_info:
        asyncio.run(service.get_historical_data(symbol="AAPL", range=Range.ONE_YEAR))

    assert exc_info.value is original


def test_unconfigured_provider_raises_provider_error() -> None:
    service = MarketDataApplicationService(provider=None)

    with pytest.raises(ProviderError, match="IEX Cloud client not configured"):
        asyncio.run(service.get_stock_details(symbol="AAPL"))


def test_historical_data_requests_ascending_range() -> None:
    provider = FakeProvider(history=[_price("2026-02-09", 100.0), _price("2026-02-10", 101.5)])
    service = MarketDataApplicationService(provider=provider)

    closes = asyncio.run(service.get_historical_data(symbol="AAPL", range=Range.THREE_MONTHS))

    assert closes == [
        StockClose(date="2026-02-09", close=100.0),
        StockClose(date="2026-02-10", close=101.5),
    ]
    assert provider.calls == [
        ("HISTORICAL_PRICES", {"symbol": "AAPL", "last": None, "range": Range.THREE_MONTHS, "sort": "ASC"}),
    ]


def test_historical_data_sorts_descending_provider_rows() -> None:
    raw = [_price("2026-02-11", 103.0), _price("2026-02-10", 102.0), _price("2026-02-09", 101.0)]
    provider = FakeProvider(history=raw)
    service = MarketDataApplicationService(provider=provider)

    closes = asyncio.run(service.get_historical_data(symbol="AAPL", range=Range.FIVE_DAYS))

    assert [point.date for point in closes] == ["2026-02-09", "2026-02-10", "2026-02-11"]
    closes_by_date = {row["priceDate"]: row["close"] for row in raw}
    assert all(point.close == closes_by_date[point.date] for point in closes)


def test_historical_data_empty_is_not_an_error() -> None:
    service = MarketDataApplicationService(provider=FakeProvider(history=[]))

    assert asyncio.run(service.get_historical_data(symbol="NEWCO", range=Range.ONE_DAY)) == []


def test_historical_data_rejects_unknown_range() -> None:
    service = MarketDataApplicationService(provider=FakeProvider())

    with pytest.raises(ValueError, match="Unsupported range"):
        asyncio.run(service.get_historical_data(symbol="AAPL", range="2W"))  # type: ignore[arg-type]


def test_historical_data_undated_row_is_provider_error() -> None:
    rows = [
        _price("2026-02-09", 100.0),
        {"priceDate": None, "close": 100.5},
        _price("2026-02-11", 101.0),
    ]
    service = MarketDataApplicationService(provider=FakeProvider(history=rows))

    with pytest.raises(ProviderError, match="no priceDate value"):
        asyncio.run(service.get_historical_data(symbol="AAPL", range=Range.FIVE_DAYS))


def test_stock_details_ignore_adjusted_close() -> None:
    prices = [
        {"priceDate": "2026-02-10", "close": 101.0, "fClose": 50.0},
        {"priceDate": "2026-02-09", "close": None, "fClose": 99.5},
    ]
    service = MarketDataApplicationService(provider=FakeProvider(prices=prices))

    with pytest.raises(ProviderError, match="no close value"):
        asyncio.run(service.get_stock_details(symbol="AAPL"))
