from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """
    Application settings, loaded from environment variables.
    """
    APP_NAME: str = "Wealth Valuation API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "API for portfolio valuation, IRR and impermanent loss calculations."
    LOG_LEVEL: str = "INFO"

    # Engine defaults, overridable per request
    FEE_PROJECTION_YEARS: float = 20
    FEE_COMPOUNDING_FACTOR: float = 1.5
    IRR_MAX_ITERATIONS: int = 100
    IRR_TOLERANCE: float = 1e-5

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache()
def get_settings():
    """Caches the settings object for efficient access."""
    return Settings()
