from __future__ import annotations


class MarketDataError(Exception):
    """Base error for the market data application layer."""

    code = "STOCK_MARKET_DATA_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(MarketDataError):
    """Raised when the provider returns no rows for a required lookup."""

    code = "STOCK_NOT_FOUND"

    _MESSAGES = {
        "company information": "Could not find company information for the stock symbol.",
        "latest price": "Could not find the latest price for the specified stock.",
    }

    def __init__(self, subject: str) -> None:
        self.subject = subject
        super().__init__(self._MESSAGES.get(subject, f"Could not find {subject} for the stock symbol."))


class ProviderError(MarketDataError):
    """Raised for any other failure reported by the market data provider."""

    code = "STOCK_PROVIDER_ERROR"
