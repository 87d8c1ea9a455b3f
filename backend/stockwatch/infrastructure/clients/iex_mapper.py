from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timezone

from stockwatch.domain.market_data.schemas import StockClose


def map_iex_company_name(row: object) -> str:
    value = _extract_value(row, "companyName")
    return "" if value is None else str(value)


def map_iex_close(row: object) -> float:
    value = _extract_value(row, "close")
    if value is None:
        raise ValueError("price row has no close value")
    return float(value)


def map_iex_prices_to_stock_closes(rows: Iterable[object]) -> list[StockClose]:
    closes: list[StockClose] = []
    for row in rows:
        price_date = _to_price_date(_extract_value(row, "priceDate"))
        if price_date is None:
            raise ValueError("price row has no priceDate value")
        closes.append(StockClose(date=price_date, close=map_iex_close(row)))
    return closes


def _extract_value(row: object, *keys: str) -> object | None:
    if isinstance(row, dict):
        for key in keys:
            value = row.get(key)
            if value is not None:
                return value
        return None

    for key in keys:
        if hasattr(row, key):
            value = getattr(row, key)
            if value is not None:
                return value
    return None


def _to_price_date(value: object | None) -> str | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (int, float)):
        # Apperate epoch fields are milliseconds.
        return datetime.fromtimestamp(float(value) / 1_000.0, tz=timezone.utc).date().isoformat()
    if isinstance(value, str):
        raw = value.strip()
        return raw or None
    return None
