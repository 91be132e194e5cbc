import math

import pytest
from core.annualize import annualize_rate
from engine.exceptions import InvalidEngineInputError


@pytest.mark.parametrize(
    "periodic_rate_pct, periods_per_year, expected",
    [
        (10.0, 1, 10.0),  # already annual
        (1.0, 12, 12.682503),  # monthly to annual
        (2.0, 4, 8.243216),  # quarterly to annual
        (-1.0, 12, -11.361512),
        (0.0, 52, 0.0),
    ],
)
def test_annualize_rate_happy_path(periodic_rate_pct, periods_per_year, expected):
    assert annualize_rate(periodic_rate_pct, periods_per_year) == pytest.approx(expected, abs=1e-6)


def test_annualize_rate_invalid_periods():
    with pytest.raises(InvalidEngineInputError, match="Periods per year for annualization must be positive"):
        annualize_rate(1.0, 0)


def test_annualize_rate_propagates_non_finite():
    assert math.isnan(annualize_rate(float("nan"), 12))
