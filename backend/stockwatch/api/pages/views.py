from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from stockwatch.api.deps import get_stock_detail_service, get_watchlist_service
from stockwatch.application.market_data.errors import MarketDataError
from stockwatch.application.stock_detail.service import StockDetailApplicationService
from stockwatch.application.watchlist.service import WatchlistApplicationService

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    service: WatchlistApplicationService = Depends(get_watchlist_service),
) -> HTMLResponse:
    return templates.TemplateResponse(request, "index.html", {"stocks": service.list_items()})


@router.get("/add", response_class=HTMLResponse)
def add(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "add.html", {})


@router.get("/add/save")
def add_save(
    symbol: str,
    service: WatchlistApplicationService = Depends(get_watchlist_service),
) -> RedirectResponse:
    target = service.add_item(symbol=symbol)
    return RedirectResponse(url=target, status_code=303)


@router.get("/detail/{symbol:path}", response_class=HTMLResponse)
async def detail(
    request: Request,
    symbol: str,
    range: str | None = None,
    service: StockDetailApplicationService = Depends(get_stock_detail_service),
) -> HTMLResponse:
    try:
        view = await service.get_detail(symbol=symbol, range=range)
    except MarketDataError as exc:
        raise HTTPException(status_code=400, detail=exc.message) from exc

    selected = view.selected_stock
    return templates.TemplateResponse(
        request,
        "detail.html",
        {
            "stocks": view.watchlist,
            "selected_stock": selected,
            "chart_data": [asdict(point) for point in selected.historical_data],
            "ranges": [item.value for item in view.all_ranges],
            "selected_range": view.selected_range.value,
        },
    )
