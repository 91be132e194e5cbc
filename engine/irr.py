# engine/irr.py
import logging
import warnings
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np
from scipy.optimize import newton

from engine.config import ValuationConfig
from engine.exceptions import EngineCalculationError, InvalidEngineInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IRRResult:
    """Outcome of an IRR solve. `irr_pct` may be NaN or inf when the solver diverged."""
    irr_pct: float
    converged: bool
    iterations: int
    notes: List[str] = field(default_factory=list)

    @property
    def available(self) -> bool:
        return bool(np.isfinite(self.irr_pct))


def _as_cashflow_array(cashflows: Sequence[float]) -> np.ndarray:
    values = np.asarray(list(cashflows), dtype=np.float64)
    if values.ndim != 1 or values.size < 2:
        raise InvalidEngineInputError("A cash flow series needs at least 2 entries.")
    if not np.all(np.isfinite(values)):
        raise InvalidEngineInputError("Cash flows must be finite numbers.")
    if not np.any(values):
        raise InvalidEngineInputError("Cash flows cannot all be zero.")
    return values


def _npv(rate: float, values: np.ndarray, periods: np.ndarray) -> float:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return np.sum(values / np.power(1.0 + rate, periods))


def _npv_derivative(rate: float, values: np.ndarray, periods: np.ndarray) -> float:
    # t = 0 contributes nothing to the derivative
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return np.sum(-periods[1:] * values[1:] / np.power(1.0 + rate, periods[1:] + 1))


def npv(cashflows: Sequence[float], rate: float) -> float:
    """Net present value of a period-indexed series at `rate` (a fraction, not a percent)."""
    values = _as_cashflow_array(cashflows)
    periods = np.arange(values.size, dtype=np.float64)
    return float(_npv(rate, values, periods))


def solve_irr_detailed(
    cashflows: Sequence[float],
    initial_guess: Optional[float] = None,
    config: Optional[ValuationConfig] = None,
) -> IRRResult:
    """
    Solves NPV(r) = 0 by Newton-Raphson and reports how the solve went.

    Non-convergence is a soft failure: the last iterate is returned with
    `converged=False`. A zero derivative stops the iteration early on the
    current iterate. Values of r at or below -1 make (1+r)^t singular and the
    result then propagates as NaN or inf rather than raising.
    """
    config = config or ValuationConfig()
    guess = config.irr_initial_guess if initial_guess is None else initial_guess

    values = _as_cashflow_array(cashflows)
    periods = np.arange(values.size, dtype=np.float64)

    notes = []
    if np.all(values >= 0) or np.all(values <= 0):
        notes.append("No sign change in cash flows.")

    try:
        with warnings.catch_warnings(record=True) as caught, np.errstate(all="ignore"):
            warnings.simplefilter("always", RuntimeWarning)
            rate, status = newton(
                _npv,
                float(guess),
                fprime=_npv_derivative,
                args=(values, periods),
                tol=config.irr_tolerance,
                maxiter=config.irr_max_iterations,
                full_output=True,
                disp=False,
            )
    except (ArithmeticError, ValueError) as e:
        logger.exception("IRR solver failed unexpectedly.")
        raise EngineCalculationError(f"IRR calculation failed unexpectedly: {e}")

    notes.extend(str(w.message) for w in caught if issubclass(w.category, RuntimeWarning))

    irr_pct = float(rate) * 100
    converged = bool(status.converged)
    iterations = int(status.iterations)
    if converged:
        logger.debug("IRR converged to %.6f%% in %d iterations.", irr_pct, iterations)
    else:
        notes.append(f"IRR did not converge after {iterations} iterations; returning last estimate.")
        logger.warning("IRR did not converge for %d cash flows (last estimate %s%%).", values.size, irr_pct)

    return IRRResult(irr_pct=irr_pct, converged=converged, iterations=iterations, notes=notes)


def solve_irr(
    cashflows: Sequence[float], initial_guess: float = 0.10, config: Optional[ValuationConfig] = None
) -> float:
    """Returns the IRR of a period-indexed cash flow series, in percent."""
    return solve_irr_detailed(cashflows, initial_guess, config).irr_pct
