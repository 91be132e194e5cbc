import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from core.errors import to_api_error
from engine.exceptions import EngineError, InvalidEngineInputError

logger = logging.getLogger(__name__)


async def engine_exception_handler(request: Request, exc: EngineError):
    """
    Handles EngineError and its subclasses: input errors become 400, anything else 500.
    """
    if isinstance(exc, InvalidEngineInputError):
        logger.warning(f"Rejected valuation input on {request.url.path}: {exc.message}")
    else:
        logger.error(f"EngineError caught: {exc.message}", exc_info=True)

    api_error = to_api_error(exc)
    return JSONResponse(status_code=api_error.status_code, content={"detail": api_error.detail})
