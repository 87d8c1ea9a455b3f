from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Range(str, Enum):
    """Named windows accepted by the HISTORICAL_PRICES dataset."""

    ONE_DAY = "1D"
    FIVE_DAYS = "5D"
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    SIX_MONTHS = "6M"
    YEAR_TO_DATE = "YTD"
    ONE_YEAR = "1Y"
    THREE_YEARS = "3Y"
    FIVE_YEARS = "5Y"
    FIFTEEN_YEARS = "15Y"

    def __str__(self) -> str:
        return self.value


ALL_RANGES: tuple[Range, ...] = tuple(Range)
DEFAULT_RANGE = Range.ONE_MONTH


@dataclass(slots=True)
class StockDetails:
    company_name: str
    symbol: str
    change: float | None = None


@dataclass(slots=True)
class StockClose:
    date: str
    close: float


@dataclass(slots=True)
class SelectedStock:
    company_name: str
    symbol: str
    change: float | None
    historical_data: list[StockClose] = field(default_factory=list)


@dataclass(slots=True)
class StockDetailView:
    watchlist: list[str]
    selected_stock: SelectedStock
    all_ranges: tuple[Range, ...]
    selected_range: Range
