# core/annualize.py
import numpy as np

from engine.exceptions import InvalidEngineInputError


def annualize_rate(periodic_rate_pct: float, periods_per_year: float) -> float:
    """
    Converts a per-period rate (e.g. a monthly IRR) into an annual rate by
    geometric compounding.

    Args:
        periodic_rate_pct: The rate for one period, in percent (e.g. 1.0 for 1%).
        periods_per_year: How many such periods make a year (12 for monthly flows).

    Returns:
        The annualized rate, in percent. Non-finite inputs propagate as NaN.
    """
    if periods_per_year <= 0:
        raise InvalidEngineInputError("Periods per year for annualization must be positive.")

    if not np.isfinite(periodic_rate_pct):
        return float("nan")

    with np.errstate(invalid="ignore", over="ignore"):
        growth = np.power(1.0 + periodic_rate_pct / 100.0, periods_per_year)
    return float((growth - 1.0) * 100.0)
