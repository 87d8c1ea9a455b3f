from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from stockwatch.api.errors import install_api_error_handlers
from stockwatch.api.pages.views import router as pages_router
from stockwatch.api.v1.router import api_router
from stockwatch.core.config import settings
from stockwatch.core.logging import configure_logging


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging(settings.log_level)
    yield


def create_app() -> FastAPI:
    application = FastAPI(title="Stock Watchlist", version="0.1.0", lifespan=lifespan)
    install_api_error_handlers(application)

    application.include_router(pages_router)
    application.include_router(api_router, prefix="/api/v1")

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run("stockwatch.main:app", host="0.0.0.0", port=8000, reload=True)
