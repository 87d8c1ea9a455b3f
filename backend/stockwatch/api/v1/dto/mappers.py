from __future__ import annotations

from stockwatch.api.v1.dto.stocks import SelectedStockOut, StockCloseOut, StockDetailOut
from stockwatch.domain.market_data.schemas import StockClose, StockDetailView


def to_stock_close_out(point: StockClose) -> StockCloseOut:
    return StockCloseOut(date=point.date, close=point.close)


def to_stock_detail_out(view: StockDetailView) -> StockDetailOut:
    selected = view.selected_stock
    return StockDetailOut(
        stocks=view.watchlist,
        selected_stock=SelectedStockOut(
            company_name=selected.company_name,
            symbol=selected.symbol,
            change=selected.change,
            historical_data=[to_stock_close_out(point) for point in selected.historical_data],
        ),
        ranges=[item.value for item in view.all_ranges],
        selected_range=view.selected_range.value,
    )
