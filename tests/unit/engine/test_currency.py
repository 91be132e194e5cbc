import pytest

from engine.config import DEFAULT_EXCHANGE_RATES, ValuationConfig
from engine.currency import convert, convert_and_format
from engine.exceptions import InvalidEngineInputError, UnsupportedCurrencyError

NNBSP = "\u202f"
NBSP = "\u00a0"


def test_privacy_mode_masks_money():
    assert convert_and_format(100, "EUR", {"EUR": 1}, privacy_mode=True, is_percent=False) == "••••••"


def test_privacy_mode_masks_percent():
    assert convert_and_format(12.4, "EUR", {"EUR": 1}, privacy_mode=True, is_percent=True) == "••• %"


def test_privacy_mode_short_circuits_before_currency_lookup():
    """Masking happens before any lookup, so an unknown currency is never inspected."""
    assert convert_and_format(100, "XYZ", {}, privacy_mode=True) == "••••••"


def test_privacy_mask_is_configurable():
    config = ValuationConfig(privacy_mask="***")
    assert convert_and_format(100, "EUR", {"EUR": 1}, privacy_mode=True, config=config) == "***"


@pytest.mark.parametrize(
    "value, expected",
    [(12.4, "12.40%"), (-5.71909, "-5.72%"), (0, "0.00%"), (108.633333, "108.63%")],
)
def test_percent_formatting_ignores_currency(value, expected):
    assert convert_and_format(value, "NOT-A-CURRENCY", {}, is_percent=True) == expected


@pytest.mark.parametrize(
    "value, currency, expected",
    [
        (1245680.6, "EUR", f"1{NNBSP}245{NNBSP}681{NBSP}€"),
        (-1500.0, "EUR", f"-1{NNBSP}500{NBSP}€"),
        (999.0, "EUR", f"999{NBSP}€"),
        (1000.0, "USD", "$1,080"),
        (1234567.0, "CHF", f"CHF{NBSP}1'172'839"),
        (125180.0, "BTC", "₿2.0029"),
    ],
)
def test_money_formatting_per_currency(value, currency, expected):
    assert convert_and_format(value, currency, DEFAULT_EXCHANGE_RATES) == expected


def test_small_negative_rounds_to_unsigned_zero():
    assert convert_and_format(-0.4, "USD", {"USD": 1.0}) == "$0"


def test_unknown_currency_raises():
    with pytest.raises(UnsupportedCurrencyError) as exc_info:
        convert_and_format(100, "JPY", DEFAULT_EXCHANGE_RATES)
    assert exc_info.value.currency == "JPY"


def test_currency_missing_from_rate_table_raises():
    with pytest.raises(UnsupportedCurrencyError, match="USD"):
        convert_and_format(100, "USD", {"EUR": 1.0})


def test_currency_outside_supported_set_raises_even_with_rate():
    with pytest.raises(UnsupportedCurrencyError):
        convert_and_format(100, "GBP", {"GBP": 0.85})


@pytest.mark.parametrize("rate", [0.0, -1.0, float("nan")])
def test_invalid_rate_raises(rate):
    with pytest.raises(InvalidEngineInputError, match="Exchange rate"):
        convert_and_format(100, "USD", {"USD": rate})


def test_convert():
    assert convert(100.0, "CHF", {"CHF": 0.95}) == pytest.approx(95.0)
    with pytest.raises(UnsupportedCurrencyError):
        convert(100.0, "CHF", {})


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
@pytest.mark.parametrize("is_percent", [False, True])
def test_non_finite_amount_raises(value, is_percent):
    with pytest.raises(InvalidEngineInputError, match="non-finite"):
        convert_and_format(value, "EUR", DEFAULT_EXCHANGE_RATES, is_percent=is_percent)


def test_non_finite_amount_is_still_masked_in_privacy_mode():
    assert convert_and_format(float("nan"), "EUR", DEFAULT_EXCHANGE_RATES, privacy_mode=True) == "••••••"


@pytest.mark.parametrize("value", [-0.001, -0.0049, -0.0])
def test_small_negative_percent_rounds_to_unsigned_zero(value):
    assert convert_and_format(value, "EUR", {}, is_percent=True) == "0.00%"
