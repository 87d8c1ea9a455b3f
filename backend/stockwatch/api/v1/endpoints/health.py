from fastapi import APIRouter

from stockwatch.core.config import settings

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {
        "status": "ok",
        "env": settings.app_env,
        "provider_configured": bool(settings.iex_token),
    }
