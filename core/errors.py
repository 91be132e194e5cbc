# core/errors.py
from fastapi import HTTPException, status

from engine.exceptions import EngineError, InvalidEngineInputError, UnsupportedCurrencyError


class APIError(HTTPException):
    """Base class for custom API exceptions for consistent error handling."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)


class APIBadRequestError(APIError):
    """Invalid domain input: non-positive price ratio, malformed cash flow series, bad rates."""

    def __init__(self, detail: str = "Bad Request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class APIUnsupportedCurrencyError(APIBadRequestError):
    """The requested display currency is not in the rate table or the supported set."""

    def __init__(self, currency: str = ""):
        self.currency = currency
        super().__init__(detail=f"Unsupported currency: '{currency}'.")


class APICalculationError(APIError):
    """An engine calculation failed for reasons other than the input."""

    def __init__(self, detail: str = "Calculation Error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def to_api_error(exc: EngineError) -> APIError:
    """Maps an engine exception onto the HTTP error returned to the dashboard."""
    if isinstance(exc, UnsupportedCurrencyError):
        return APIUnsupportedCurrencyError(exc.currency)
    if isinstance(exc, InvalidEngineInputError):
        return APIBadRequestError(exc.message)
    return APICalculationError(f"Calculation Error: {exc.message}")
