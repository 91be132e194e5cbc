import math

from fastapi import APIRouter

from adapters.api_adapter import create_valuation_config, format_metrics_for_display
from app.core.config import get_settings
from app.models.valuation_requests import (
    FormatRequest,
    ImpermanentLossRequest,
    IRRRequest,
    PortfolioValuationRequest,
)
from app.models.valuation_responses import (
    FormatResponse,
    ImpermanentLossResponse,
    IRRResponse,
    PortfolioValuationResponse,
)
from core.annualize import annualize_rate
from engine.aggregation import aggregate_portfolio
from engine.currency import convert_and_format
from engine.impermanent_loss import impermanent_loss, impermanent_loss_from_prices
from engine.irr import solve_irr_detailed

router = APIRouter(tags=["Valuation"])
settings = get_settings()


@router.post("/irr", response_model=IRRResponse, summary="Solve the Internal Rate of Return")
async def calculate_irr_endpoint(request: IRRRequest):
    """Solves the IRR of a period-indexed cash flow series. Non-convergence is reported, not raised."""
    config = create_valuation_config(settings)
    result = solve_irr_detailed(request.cash_flows, request.initial_guess, config)

    annualized = None
    if result.available and request.periods_per_year:
        annualized = annualize_rate(result.irr_pct, request.periods_per_year)
        if not math.isfinite(annualized):
            annualized = None

    return IRRResponse(
        calculation_id=request.calculation_id,
        irr_pct=result.irr_pct if result.available else None,
        irr_annualized_pct=annualized,
        available=result.available,
        converged=result.converged,
        iterations=result.iterations,
        notes=result.notes,
    )


@router.post(
    "/impermanent-loss", response_model=ImpermanentLossResponse, summary="Calculate constant-product impermanent loss"
)
async def calculate_impermanent_loss_endpoint(request: ImpermanentLossRequest):
    if request.price_ratio is not None:
        return ImpermanentLossResponse(
            price_ratio=request.price_ratio, impermanent_loss_pct=impermanent_loss(request.price_ratio)
        )

    loss = impermanent_loss_from_prices(request.entry_price, request.current_price)
    return ImpermanentLossResponse(
        price_ratio=request.current_price / request.entry_price, impermanent_loss_pct=loss
    )


@router.post("/portfolio", response_model=PortfolioValuationResponse, summary="Aggregate a wealth snapshot")
async def calculate_portfolio_endpoint(request: PortfolioValuationRequest):
    """Computes net worth, gains and fee drag, and renders them for the dashboard."""
    config = create_valuation_config(settings, request)
    metrics = aggregate_portfolio(request.snapshot, request.filters, config)
    display = format_metrics_for_display(metrics, request.snapshot, request.display, config)
    return PortfolioValuationResponse(calculation_id=request.calculation_id, metrics=metrics, display=display)


@router.post("/format", response_model=FormatResponse, summary="Convert and format an amount")
async def format_value_endpoint(request: FormatRequest):
    formatted = convert_and_format(
        request.value, request.currency, request.rates, request.privacy_mode, request.is_percent
    )
    return FormatResponse(formatted=formatted)
