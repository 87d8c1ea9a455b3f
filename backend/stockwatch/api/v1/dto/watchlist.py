from __future__ import annotations

from pydantic import BaseModel, Field


class WatchlistItemCreate(BaseModel):
    symbol: str = Field(min_length=1, max_length=16)


class WatchlistOut(BaseModel):
    stocks: list[str]


class WatchlistItemCreatedOut(BaseModel):
    symbol: str
    detail_url: str
