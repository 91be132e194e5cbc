# engine/exceptions.py


class EngineError(Exception):
    """Base exception for all engine-related errors."""

    def __init__(self, message="An error occurred in the valuation engine."):
        self.message = message
        super().__init__(self.message)


class InvalidEngineInputError(EngineError):
    """Raised when the input data for the engine is invalid."""

    def __init__(self, message="Invalid input data provided to the engine."):
        self.message = message
        super().__init__(self.message)


class UnsupportedCurrencyError(InvalidEngineInputError):
    """Raised when a currency code is missing from the rate table or is not supported."""

    def __init__(self, currency: str = "", message: str = None):
        self.currency = currency
        if message is None:
            message = f"Unsupported currency: '{currency}'." if currency else "Unsupported currency."
        super().__init__(message)


class EngineCalculationError(EngineError):
    """Raised when there's an error in the core engine calculation logic."""

    def __init__(self, message="An error occurred during an engine calculation."):
        self.message = message
        super().__init__(self.message)
