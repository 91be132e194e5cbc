import math

import pytest

from engine.config import ValuationConfig
from engine.exceptions import InvalidEngineInputError
from engine.irr import npv, solve_irr, solve_irr_detailed


@pytest.mark.parametrize(
    "cash_flows, expected_irr",
    [
        ([-1000.0, 1100.0], 10.0),
        ([-100.0, 0.0, 121.0], 10.0),
        ([-1000.0, 0.0, 0.0, 1331.0], 10.0),
        ([-500.0, 250.0, 250.0], 0.0),
    ],
)
def test_solve_irr_known_values(cash_flows, expected_irr):
    """Tests the solver against series with closed-form answers."""
    assert solve_irr(cash_flows) == pytest.approx(expected_irr, abs=1e-2)


def test_solve_irr_zeroes_npv_for_irregular_series():
    """Tests that the returned rate actually makes the NPV vanish."""
    cash_flows = [-1000.0, 300.0, -150.0, 400.0, 700.0]
    result = solve_irr_detailed(cash_flows)

    assert result.converged
    assert result.available
    assert npv(cash_flows, result.irr_pct / 100) == pytest.approx(0.0, abs=1e-3)


def test_solve_irr_without_sign_change_terminates_softly():
    """
    Tests that a series with no sign change never raises and stops within the
    iteration cap, reporting the failure through the result instead.
    """
    result = solve_irr_detailed([100.0, 200.0, 300.0])

    assert isinstance(result.irr_pct, float)
    assert not result.converged
    assert result.iterations <= 100
    assert "No sign change in cash flows." in result.notes


def test_solve_irr_plain_call_returns_a_number_for_unsolvable_series():
    value = solve_irr([-100.0, -200.0, -300.0])
    assert isinstance(value, float)


def test_solve_irr_respects_iteration_cap():
    config = ValuationConfig(irr_max_iterations=3)
    result = solve_irr_detailed([100.0, 200.0, 300.0], config=config)
    assert not result.converged
    assert result.iterations <= 3


def test_solve_irr_singular_guess_propagates_non_finite():
    """At r = -1 the discount factor is singular; the result is unavailable, not an exception."""
    result = solve_irr_detailed([-100.0, 110.0], initial_guess=-1.0)

    assert not result.available
    assert not math.isfinite(result.irr_pct)


def test_solve_irr_uses_initial_guess():
    result = solve_irr_detailed([-1000.0, 1100.0], initial_guess=0.5)
    assert result.converged
    assert result.irr_pct == pytest.approx(10.0, abs=1e-2)


@pytest.mark.parametrize(
    "cash_flows, message",
    [
        ([-100.0], "at least 2 entries"),
        ([], "at least 2 entries"),
        ([0.0, 0.0, 0.0], "cannot all be zero"),
        ([-100.0, float("nan")], "finite"),
    ],
)
def test_solve_irr_rejects_invalid_series(cash_flows, message):
    with pytest.raises(InvalidEngineInputError, match=message):
        solve_irr(cash_flows)


def test_npv_at_zero_rate_is_plain_sum():
    assert npv([-100.0, 40.0, 70.0], 0.0) == pytest.approx(10.0)
