# adapters/api_adapter.py
import logging
from typing import Optional

from app.core.config import Settings
from app.models.metrics import PortfolioMetrics
from app.models.portfolio import PortfolioSnapshot
from app.models.valuation_requests import DisplayOptions, PortfolioValuationRequest
from app.models.valuation_responses import PortfolioDisplay
from engine.config import ValuationConfig
from engine.currency import convert_and_format

logger = logging.getLogger(__name__)


def create_valuation_config(
    settings: Settings, request: Optional[PortfolioValuationRequest] = None
) -> ValuationConfig:
    """Creates a ValuationConfig from the application settings and any per-request overrides."""
    fee_years = settings.FEE_PROJECTION_YEARS
    fee_factor = settings.FEE_COMPOUNDING_FACTOR
    if request is not None:
        if request.fee_projection_years is not None:
            fee_years = request.fee_projection_years
        if request.fee_compounding_factor is not None:
            fee_factor = request.fee_compounding_factor

    logger.debug("Valuation config: fee horizon %s years, compounding factor %s.", fee_years, fee_factor)
    return ValuationConfig(
        irr_max_iterations=settings.IRR_MAX_ITERATIONS,
        irr_tolerance=settings.IRR_TOLERANCE,
        fee_projection_years=fee_years,
        fee_compounding_factor=fee_factor,
    )


def format_metrics_for_display(
    metrics: PortfolioMetrics,
    snapshot: PortfolioSnapshot,
    display: DisplayOptions,
    config: ValuationConfig,
) -> PortfolioDisplay:
    """
    Takes the engine metrics and renders every amount in the requested currency.
    Raises UnsupportedCurrencyError before anything is rendered if the currency is unknown.
    """
    def money(value: float) -> str:
        return convert_and_format(value, display.currency, display.rates, display.privacy_mode, False, config)

    def percent(value: float) -> str:
        return convert_and_format(value, display.currency, display.rates, display.privacy_mode, True, config)

    included = set(metrics.included_asset_ids)
    return PortfolioDisplay(
        currency=display.currency,
        privacy_mode=display.privacy_mode,
        net_worth=money(metrics.net_worth),
        total_assets=money(metrics.total_assets),
        liabilities=money(metrics.liabilities_applied),
        unrealized_gain=money(metrics.unrealized_gain),
        unrealized_gain_pct=percent(metrics.unrealized_gain_pct) if metrics.unrealized_gain_pct is not None else None,
        projected_fees=money(metrics.projected_fees),
        asset_values={a.asset_id: money(a.value) for a in snapshot.assets if a.asset_id in included},
    )
