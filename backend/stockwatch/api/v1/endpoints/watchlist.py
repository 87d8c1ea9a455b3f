from fastapi import APIRouter, Depends

from stockwatch.api.deps import get_watchlist_service
from stockwatch.api.v1.dto.watchlist import WatchlistItemCreate, WatchlistItemCreatedOut, WatchlistOut
from stockwatch.application.watchlist.service import WatchlistApplicationService

router = APIRouter()


@router.get("", response_model=WatchlistOut)
def list_watchlist(
    service: WatchlistApplicationService = Depends(get_watchlist_service),
) -> WatchlistOut:
    return WatchlistOut(stocks=service.list_items())


@router.post("", response_model=WatchlistItemCreatedOut, status_code=201)
def add_watchlist_item(
    payload: WatchlistItemCreate,
    service: WatchlistApplicationService = Depends(get_watchlist_service),
) -> WatchlistItemCreatedOut:
    detail_url = service.add_item(symbol=payload.symbol)
    return WatchlistItemCreatedOut(symbol=payload.symbol, detail_url=detail_url)
