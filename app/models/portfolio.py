# app/models/portfolio.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from common.enums import AssetCategory, StrategyTag


class DeFiPosition(BaseModel):
    """Liquidity-pool details attached to a DeFi asset."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    pool_tvl: float = Field(..., ge=0, description="Total value locked in the pool, reference currency")
    unclaimed_rewards: float = Field(default=0.0, ge=0, description="Pending rewards, reference currency")
    impermanent_loss_pct: float = Field(default=0.0, le=0, description="Current impermanent loss in percent")


class NFTHolding(BaseModel):
    """Floor price of an NFT collection, quoted in a secondary unit."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    floor_price: float = Field(..., ge=0)
    floor_unit: str = "ETH"


class Asset(BaseModel):
    """A single line of the wealth snapshot. Values are in the reference currency."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    asset_id: str
    name: str = ""
    category: AssetCategory
    value: float = Field(..., ge=0)
    cost_basis: Optional[float] = Field(default=None, ge=0, description="PRU. None means no gain.")
    expense_ratio: float = Field(default=0.0, ge=0, description="Annual fee as a fraction, e.g. 0.002 for 0.20%")
    strategy: StrategyTag = StrategyTag.GROWTH
    is_primary_residence: bool = False
    defi: Optional[DeFiPosition] = None
    nft: Optional[NFTHolding] = None

    @field_validator("strategy")
    @classmethod
    def strategy_is_not_wildcard(cls, v):
        if v == StrategyTag.ALL:
            raise ValueError("an asset cannot be tagged with the 'all' strategy")
        return v

    @model_validator(mode="after")
    def check_sub_records(self) -> "Asset":
        if self.defi is not None and self.nft is not None:
            raise ValueError("an asset cannot carry both DeFi and NFT details")
        return self

    @property
    def invested(self) -> float:
        return self.cost_basis if self.cost_basis is not None else self.value


class PortfolioSnapshot(BaseModel):
    """The assets and the liability scalar (e.g. mortgage principal) evaluated in one call."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    assets: List[Asset] = Field(default_factory=list)
    liabilities: float = Field(default=0.0, ge=0)

    @field_validator("assets")
    @classmethod
    def asset_ids_are_unique(cls, v):
        ids = [a.asset_id for a in v]
        if len(ids) != len(set(ids)):
            raise ValueError("asset_id values must be unique within a snapshot")
        return v


class AggregationFilters(BaseModel):
    """Dashboard toggles applied before aggregation."""
    model_config = ConfigDict(frozen=True)

    strategy: Optional[StrategyTag] = None
    include_primary_residence: bool = True

    @property
    def active_strategy(self) -> Optional[StrategyTag]:
        if self.strategy is None or self.strategy == StrategyTag.ALL:
            return None
        return self.strategy
