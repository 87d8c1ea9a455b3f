from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from stockwatch.application.market_data.errors import ProviderError
from stockwatch.domain.market_data.schemas import Range

logger = logging.getLogger(__name__)

CORE_WORKSPACE = "CORE"
COMPANY_DATASET = "COMPANY"
HISTORICAL_PRICES_DATASET = "HISTORICAL_PRICES"


class IexCloudClient:
    def __init__(
        self,
        api_token: str,
        base_url: str = "https://cloud.iexapis.com/v1",
        *,
        timeout: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_token:
            raise ValueError("IEX Cloud API token is not configured")

        self.api_token = api_token
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def query_company(self, symbol: str, *, last: int = 1) -> list[dict[str, Any]]:
        return await self.query_data(
            workspace=CORE_WORKSPACE,
            dataset_id=COMPANY_DATASET,
            key=symbol,
            last=last,
        )

    async def query_price_history(
        self,
        symbol: str,
        *,
        last: int | None = None,
        range: Range | None = None,
        sort: str | None = None,
    ) -> list[dict[str, Any]]:
        return await self.query_data(
            workspace=CORE_WORKSPACE,
            dataset_id=HISTORICAL_PRICES_DATASET,
            key=symbol,
            last=last,
            range=range,
            sort=sort,
        )

    async def query_data(
        self,
        *,
        workspace: str,
        dataset_id: str,
        key: str,
        last: int | None = None,
        range: Range | None = None,
        sort: str | None = None,
    ) -> list[dict[str, Any]]:
        path = f"/data/{workspace}/{dataset_id}/{quote(key, safe='')}"
        params: dict[str, Any] = {"token": self.api_token}
        if last is not None:
            params["last"] = last
        if range is not None:
            params["range"] = str(range)
        if sort:
            params["sort"] = sort

        payload = await self._get(path, params=params)
        return _normalize_rows(payload)

    async def _get(self, path: str, params: dict[str, Any]) -> Any:
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                resp = await client.get(f"{self.base_url}{path}", params=params)
                resp.raise_for_status()
            except httpx.HTTPStatusError as exc:
                logger.warning("IEX Cloud returned %s for %s", exc.response.status_code, path)
                raise ProviderError(_describe_status_error(exc)) from exc
            except httpx.HTTPError as exc:
                logger.warning("IEX Cloud request failed for %s: %s", path, exc)
                raise ProviderError(str(exc) or exc.__class__.__name__) from exc

            try:
                return resp.json()
            except ValueError as exc:
                raise ProviderError("IEX Cloud returned a malformed response") from exc


def _normalize_rows(payload: Any) -> list[dict[str, Any]]:
    if payload is None:
        return []
    if isinstance(payload, dict):
        # Single-row datasets may come back unwrapped.
        return [payload]
    if not isinstance(payload, list) or not all(isinstance(row, dict) for row in payload):
        raise ProviderError("IEX Cloud returned a malformed response")
    return payload


def _describe_status_error(exc: httpx.HTTPStatusError) -> str:
    body = exc.response.text.strip()
    if body:
        return body
    return f"IEX Cloud request failed with status {exc.response.status_code}"
