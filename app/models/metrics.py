# app/models/metrics.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from common.enums import AssetCategory


class AssetGain(BaseModel):
    """Unrealized gain of a single asset. `gain_pct` is None when nothing was invested."""
    model_config = ConfigDict(frozen=True)

    asset_id: str
    value: float
    invested: float
    gain: float
    gain_pct: Optional[float] = None


class AllocationSlice(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: AssetCategory
    value: float
    percentage: float


class DeFiSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    positions: int
    total_unclaimed_rewards: float
    weighted_impermanent_loss_pct: float


class PortfolioMetrics(BaseModel):
    """A simple data container for the results of a portfolio aggregation from the engine."""
    model_config = ConfigDict(frozen=True)

    total_assets: float
    liabilities_applied: float
    net_worth: float
    total_invested: float
    unrealized_gain: float
    unrealized_gain_pct: Optional[float] = None
    projected_fees: float
    fee_projection_years: float
    included_asset_ids: List[str]
    asset_gains: List[AssetGain]
    allocation: List[AllocationSlice]
    defi_summary: Optional[DeFiSummary] = None
