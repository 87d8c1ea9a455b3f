from __future__ import annotations

from pydantic import BaseModel


class StockCloseOut(BaseModel):
    date: str
    close: float


class SelectedStockOut(BaseModel):
    company_name: str
    symbol: str
    change: float | None = None
    historical_data: list[StockCloseOut]


class StockDetailOut(BaseModel):
    stocks: list[str]
    selected_stock: SelectedStockOut
    ranges: list[str]
    selected_range: str


class RangesOut(BaseModel):
    ranges: list[str]
    default: str
