from __future__ import annotations

from fastapi import APIRouter, Depends

from stockwatch.api.deps import get_stock_detail_service
from stockwatch.api.errors import raise_market_data_error
from stockwatch.api.v1.dto.mappers import to_stock_detail_out
from stockwatch.api.v1.dto.stocks import RangesOut, StockDetailOut
from stockwatch.application.market_data.errors import MarketDataError
from stockwatch.application.stock_detail.service import StockDetailApplicationService
from stockwatch.domain.market_data.schemas import ALL_RANGES, DEFAULT_RANGE

router = APIRouter()


@router.get("/ranges", response_model=RangesOut)
def list_ranges() -> RangesOut:
    return RangesOut(ranges=[item.value for item in ALL_RANGES], default=DEFAULT_RANGE.value)


@router.get("/stocks/{symbol:path}", response_model=StockDetailOut)
async def get_stock_detail(
    symbol: str,
    range: str | None = None,
    service: StockDetailApplicationService = Depends(get_stock_detail_service),
) -> StockDetailOut:
    try:
        view = await service.get_detail(symbol=symbol, range=range)
    except MarketDataError as exc:
        raise_market_data_error(exc)
    return to_stock_detail_out(view)
