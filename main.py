import logging
from typing import Any

from fastapi import FastAPI
from starlette.responses import JSONResponse
import orjson

from app.api.endpoints import health, valuation
from app.core.config import get_settings
from app.core.handlers import engine_exception_handler
from engine.exceptions import EngineError


class ORJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        # orjson writes NaN and inf as null
        return orjson.dumps(content)


settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    default_response_class=ORJSONResponse,
)

app.add_exception_handler(EngineError, engine_exception_handler)

app.include_router(health.router)
app.include_router(valuation.router, prefix="/valuation")


@app.get("/")
async def root():
    """Provides a welcome message and a link to the API documentation."""
    return {"message": "Welcome to the Wealth Valuation API. Access /docs for API documentation."}
