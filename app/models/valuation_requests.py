# app/models/valuation_requests.py
from typing import Dict, List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator, model_validator

from app.models.portfolio import AggregationFilters, PortfolioSnapshot
from common.enums import CurrencyCode
from engine.config import DEFAULT_EXCHANGE_RATES


class IRRRequest(BaseModel):
    """Request model for solving the IRR of a period-indexed cash flow series."""
    calculation_id: UUID = Field(default_factory=uuid4)
    cash_flows: List[float] = Field(..., description="Signed amounts for t = 0..n-1; t=0 is usually the investment")
    initial_guess: float = 0.10
    periods_per_year: Optional[float] = Field(
        default=None, gt=0, description="When set, the periodic IRR is also annualized"
    )

    @field_validator("cash_flows")
    @classmethod
    def needs_two_cash_flows(cls, v):
        if len(v) < 2:
            raise ValueError("cash_flows must contain at least 2 entries")
        return v


class ImpermanentLossRequest(BaseModel):
    """Either a price ratio or an entry/current price pair."""
    price_ratio: Optional[float] = None
    entry_price: Optional[float] = None
    current_price: Optional[float] = None

    @model_validator(mode="after")
    def check_inputs(self) -> "ImpermanentLossRequest":
        has_pair = self.entry_price is not None and self.current_price is not None
        if self.price_ratio is None and not has_pair:
            raise ValueError("provide price_ratio, or both entry_price and current_price")
        if self.price_ratio is not None and (self.entry_price is not None or self.current_price is not None):
            raise ValueError("price_ratio cannot be combined with entry_price/current_price")
        return self


class DisplayOptions(BaseModel):
    """UI toggle state used to render amounts."""
    currency: str = CurrencyCode.EUR.value
    rates: Dict[str, float] = Field(default_factory=lambda: dict(DEFAULT_EXCHANGE_RATES))
    privacy_mode: bool = False


class PortfolioValuationRequest(BaseModel):
    """Request model for aggregating a wealth snapshot."""
    calculation_id: UUID = Field(default_factory=uuid4)
    snapshot: PortfolioSnapshot
    filters: AggregationFilters = Field(default_factory=AggregationFilters)
    display: DisplayOptions = Field(default_factory=DisplayOptions)
    fee_projection_years: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    fee_compounding_factor: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)


class FormatRequest(BaseModel):
    value: float
    currency: str = CurrencyCode.EUR.value
    rates: Dict[str, float] = Field(default_factory=lambda: dict(DEFAULT_EXCHANGE_RATES))
    privacy_mode: bool = False
    is_percent: bool = False
