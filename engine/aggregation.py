# engine/aggregation.py
import logging
from typing import Optional, Sequence

import pandas as pd

from app.models.metrics import AllocationSlice, AssetGain, DeFiSummary, PortfolioMetrics
from app.models.portfolio import AggregationFilters, Asset, PortfolioSnapshot
from common.enums import AssetCategory
from engine.config import ValuationConfig
from engine.exceptions import EngineCalculationError, InvalidEngineInputError
from engine.schema import AssetColumns

logger = logging.getLogger(__name__)

_FRAME_COLUMNS = [
    AssetColumns.ASSET_ID.value,
    AssetColumns.CATEGORY.value,
    AssetColumns.STRATEGY.value,
    AssetColumns.VALUE.value,
    AssetColumns.COST_BASIS.value,
    AssetColumns.EXPENSE_RATIO.value,
    AssetColumns.IS_PRIMARY_RESIDENCE.value,
    AssetColumns.HAS_DEFI.value,
    AssetColumns.UNCLAIMED_REWARDS.value,
    AssetColumns.IMPERMANENT_LOSS_PCT.value,
]


def create_asset_frame(assets: Sequence[Asset]) -> pd.DataFrame:
    """Flattens the asset records into the engine's column schema, enums as their plain values."""
    rows = [
        {
            AssetColumns.ASSET_ID.value: a.asset_id,
            AssetColumns.CATEGORY.value: a.category.value,
            AssetColumns.STRATEGY.value: a.strategy.value,
            AssetColumns.VALUE.value: a.value,
            AssetColumns.COST_BASIS.value: a.cost_basis,
            AssetColumns.EXPENSE_RATIO.value: a.expense_ratio,
            AssetColumns.IS_PRIMARY_RESIDENCE.value: a.is_primary_residence,
            AssetColumns.HAS_DEFI.value: a.defi is not None,
            AssetColumns.UNCLAIMED_REWARDS.value: a.defi.unclaimed_rewards if a.defi else 0.0,
            AssetColumns.IMPERMANENT_LOSS_PCT.value: a.defi.impermanent_loss_pct if a.defi else 0.0,
        }
        for a in assets
    ]
    df = pd.DataFrame(rows, columns=_FRAME_COLUMNS)
    df[AssetColumns.VALUE.value] = df[AssetColumns.VALUE.value].astype("float64")
    df[AssetColumns.COST_BASIS.value] = pd.to_numeric(df[AssetColumns.COST_BASIS.value], errors="coerce")
    df[AssetColumns.EXPENSE_RATIO.value] = df[AssetColumns.EXPENSE_RATIO.value].astype("float64")
    return df


def filter_assets(df: pd.DataFrame, filters: AggregationFilters) -> pd.DataFrame:
    """Keeps assets matching the strategy filter and, unless included, drops the primary residence."""
    mask = pd.Series(True, index=df.index)
    strategy = filters.active_strategy
    if strategy is not None:
        mask &= df[AssetColumns.STRATEGY.value] == strategy.value
    if not filters.include_primary_residence:
        mask &= ~df[AssetColumns.IS_PRIMARY_RESIDENCE.value].astype(bool)
    return df[mask].copy()


def projected_fees(assets: Sequence[Asset], years: float = 20, compounding_factor: float = 1.5) -> float:
    """
    Simplified fee drag: annual fees (value x expense ratio) times the horizon,
    times a flat multiplier standing in for the compounding the fees forgo.
    This is an approximation, not an actuarial compound-interest projection.
    """
    if years < 0:
        raise InvalidEngineInputError("Fee projection horizon cannot be negative.")
    if compounding_factor < 0:
        raise InvalidEngineInputError("Fee compounding factor cannot be negative.")
    annual_fees = sum(a.value * a.expense_ratio for a in assets)
    return float(annual_fees * years * compounding_factor)


def asset_gain(asset: Asset) -> AssetGain:
    """Gain of one asset. The percentage is None when the invested amount is zero."""
    invested = asset.invested
    gain = asset.value - invested
    gain_pct = gain / invested * 100 if invested != 0 else None
    return AssetGain(asset_id=asset.asset_id, value=asset.value, invested=invested, gain=gain, gain_pct=gain_pct)


def _calculate_invested(df: pd.DataFrame) -> None:
    # absent cost basis means the asset carries no gain
    invested = df[AssetColumns.COST_BASIS.value].fillna(df[AssetColumns.VALUE.value])
    df[AssetColumns.INVESTED.value] = invested


def _build_allocation(df: pd.DataFrame, total_assets: float):
    if df.empty:
        return []
    grouped = df.groupby(AssetColumns.CATEGORY.value, sort=False)[AssetColumns.VALUE.value].sum()
    grouped = grouped.sort_values(ascending=False)
    return [
        AllocationSlice(
            category=AssetCategory(category),
            value=float(value),
            percentage=float(value / total_assets * 100) if total_assets else 0.0,
        )
        for category, value in grouped.items()
    ]


def _build_defi_summary(df: pd.DataFrame) -> Optional[DeFiSummary]:
    defi = df[df[AssetColumns.HAS_DEFI.value].astype(bool)]
    if defi.empty:
        return None
    values = defi[AssetColumns.VALUE.value]
    losses = defi[AssetColumns.IMPERMANENT_LOSS_PCT.value]
    total_value = float(values.sum())
    if total_value:
        weighted_loss = float((values * losses).sum() / total_value)
    else:
        weighted_loss = float(losses.mean())
    return DeFiSummary(
        positions=int(len(defi)),
        total_unclaimed_rewards=float(defi[AssetColumns.UNCLAIMED_REWARDS.value].sum()),
        weighted_impermanent_loss_pct=weighted_loss,
    )


def aggregate_portfolio(
    snapshot: PortfolioSnapshot,
    filters: Optional[AggregationFilters] = None,
    config: Optional[ValuationConfig] = None,
) -> PortfolioMetrics:
    """
    Reduces a snapshot to net worth, gains and fee drag for the filtered asset set.

    Liabilities are an all-or-nothing toggle tied to `include_primary_residence`:
    they are not attributed to any asset and ignore the strategy filter.
    """
    filters = filters or AggregationFilters()
    config = config or ValuationConfig()

    try:
        df = filter_assets(create_asset_frame(snapshot.assets), filters)
        _calculate_invested(df)

        total_assets = float(df[AssetColumns.VALUE.value].sum())
        total_invested = float(df[AssetColumns.INVESTED.value].sum())
        liabilities_applied = float(snapshot.liabilities) if filters.include_primary_residence else 0.0
        unrealized_gain = total_assets - total_invested

        included_ids = set(df[AssetColumns.ASSET_ID.value])
        included_assets = [a for a in snapshot.assets if a.asset_id in included_ids]

        asset_gains = [asset_gain(a) for a in included_assets]

        metrics = PortfolioMetrics(
            total_assets=total_assets,
            liabilities_applied=liabilities_applied,
            net_worth=total_assets - liabilities_applied,
            total_invested=total_invested,
            unrealized_gain=unrealized_gain,
            unrealized_gain_pct=unrealized_gain / total_invested * 100 if total_invested != 0 else None,
            projected_fees=projected_fees(
                included_assets, config.fee_projection_years, config.fee_compounding_factor
            ),
            fee_projection_years=config.fee_projection_years,
            included_asset_ids=[a.asset_id for a in included_assets],
            asset_gains=asset_gains,
            allocation=_build_allocation(df, total_assets),
            defi_summary=_build_defi_summary(df),
        )
    except InvalidEngineInputError:
        raise
    except Exception as e:
        logger.exception("An unexpected error occurred during portfolio aggregation.")
        raise EngineCalculationError(f"Portfolio aggregation failed unexpectedly: {e}")

    logger.info(
        "Portfolio aggregation complete: %d of %d assets included.",
        len(metrics.included_asset_ids),
        len(snapshot.assets),
    )
    return metrics
