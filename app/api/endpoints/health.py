from typing import Any

from fastapi import APIRouter

from app.core.config import get_settings
from engine.config import CURRENCY_FORMATS

router = APIRouter(tags=["Health"])


@router.get("/health", summary="Service health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": get_settings().APP_VERSION}


@router.get("/health/live", summary="Service liveness")
async def health_live() -> dict[str, str]:
    return {"status": "live"}


@router.get("/health/ready", summary="Service readiness")
async def health_ready() -> dict[str, Any]:
    # the engine is stateless, so ready as soon as the currency table is loaded
    return {"status": "ready", "currencies": sorted(CURRENCY_FORMATS)}
