from pathlib import Path

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]
ENV_FILE = BASE_DIR / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_env: str = "dev"
    log_level: str = "INFO"

    iex_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("IEX_TOKEN", "IEX_API_TOKEN"),
    )
    iex_base_url: str = "https://cloud.iexapis.com"
    iex_api_version: str = "v1"
    iex_timeout_seconds: float = 20.0

    watchlist_seed_symbols: list[str] = ["AAPL", "GOOG"]

    @model_validator(mode="after")
    def _validate_iex_token(self) -> "Settings":
        normalized = (self.iex_token or "").strip()
        is_prod = self.app_env.lower() in {"prod", "production"}

        if not normalized:
            if is_prod:
                raise ValueError("IEX_TOKEN is required in production")
            self.iex_token = None
            return self

        self.iex_token = normalized
        return self

    @property
    def iex_api_url(self) -> str:
        return f"{self.iex_base_url.rstrip('/')}/{self.iex_api_version.strip('/')}"


settings = Settings()
