# engine/schema.py
from enum import Enum


class AssetColumns(str, Enum):
    """
    Defines the internal snake_case column names of the asset frame used by the aggregation engine.
    """

    # --- Input Fields ---
    ASSET_ID = "asset_id"
    CATEGORY = "category"
    STRATEGY = "strategy"
    VALUE = "value"
    COST_BASIS = "cost_basis"
    EXPENSE_RATIO = "expense_ratio"
    IS_PRIMARY_RESIDENCE = "is_primary_residence"
    UNCLAIMED_REWARDS = "unclaimed_rewards"
    IMPERMANENT_LOSS_PCT = "impermanent_loss_pct"
    HAS_DEFI = "has_defi"

    # --- Calculated Fields ---
    INVESTED = "invested"
