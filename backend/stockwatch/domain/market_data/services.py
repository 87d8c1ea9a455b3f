from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from stockwatch.domain.market_data.schemas import Range, StockClose

_CHANGE_SCALE = 10_000


def round_change(value: float) -> float:
    """Round *value* to four decimals, halves away from zero.

    The value is scaled by 10**4 before rounding so the result matches
    ``round(value * 10000) / 10000`` rather than the binary expansion of
    ``value`` itself.
    """
    scaled = Decimal(value * _CHANGE_SCALE)
    return float(scaled.to_integral_value(rounding=ROUND_HALF_UP)) / _CHANGE_SCALE


def latest_close_change(closes: Sequence[float]) -> float | None:
    """Most recent close minus the prior close; closes are newest first."""
    if len(closes) < 2:
        return None
    return round_change(closes[0] - closes[1])


def sort_closes_ascending(closes: list[StockClose]) -> list[StockClose]:
    if all(closes[i].date <= closes[i + 1].date for i in range(len(closes) - 1)):
        return closes
    return sorted(closes, key=lambda item: item.date)


def parse_range(raw: str | Range | None) -> Range | None:
    if raw is None:
        return None
    if isinstance(raw, Range):
        return raw
    normalized = raw.strip().upper()
    try:
        return Range(normalized)
    except ValueError:
        return None
