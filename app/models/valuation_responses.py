# app/models/valuation_responses.py
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel

from app.models.metrics import PortfolioMetrics


class IRRResponse(BaseModel):
    """Response model for an IRR solve. `irr_pct` is null when the result is not finite."""
    calculation_id: UUID
    irr_pct: Optional[float] = None
    irr_annualized_pct: Optional[float] = None
    available: bool
    converged: bool
    iterations: int
    notes: List[str]


class ImpermanentLossResponse(BaseModel):
    price_ratio: float
    impermanent_loss_pct: float


class PortfolioDisplay(BaseModel):
    """Pre-formatted strings for the dashboard header and asset list."""
    currency: str
    privacy_mode: bool
    net_worth: str
    total_assets: str
    liabilities: str
    unrealized_gain: str
    unrealized_gain_pct: Optional[str] = None
    projected_fees: str
    asset_values: Dict[str, str]


class PortfolioValuationResponse(BaseModel):
    calculation_id: UUID
    metrics: PortfolioMetrics
    display: PortfolioDisplay


class FormatResponse(BaseModel):
    formatted: str
