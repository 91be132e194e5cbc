# engine/config.py
from dataclasses import dataclass
from typing import Dict

from common.enums import CurrencyCode

PRIVACY_MASK = "••••••"
PRIVACY_MASK_PERCENT = "••• %"


@dataclass(frozen=True)
class CurrencyFormat:
    """Display convention for a single currency."""

    symbol: str
    group_separator: str
    decimal_separator: str
    fraction_digits: int
    symbol_first: bool
    symbol_spacing: str = ""
    is_crypto: bool = False


# Multiplicative factors out of EUR. Used when a caller supplies no rate table.
DEFAULT_EXCHANGE_RATES: Dict[str, float] = {
    CurrencyCode.EUR.value: 1.0,
    CurrencyCode.USD.value: 1.08,
    CurrencyCode.CHF.value: 0.95,
    CurrencyCode.BTC.value: 0.000016,
}

CURRENCY_FORMATS: Dict[str, CurrencyFormat] = {
    CurrencyCode.EUR.value: CurrencyFormat(
        symbol="€", group_separator="\u202f", decimal_separator=",", fraction_digits=0,
        symbol_first=False, symbol_spacing="\u00a0",
    ),
    CurrencyCode.USD.value: CurrencyFormat(
        symbol="$", group_separator=",", decimal_separator=".", fraction_digits=0, symbol_first=True,
    ),
    CurrencyCode.CHF.value: CurrencyFormat(
        symbol="CHF", group_separator="'", decimal_separator=".", fraction_digits=0,
        symbol_first=True, symbol_spacing="\u00a0",
    ),
    CurrencyCode.BTC.value: CurrencyFormat(
        symbol="₿", group_separator=",", decimal_separator=".", fraction_digits=4,
        symbol_first=True, is_crypto=True,
    ),
}


@dataclass(frozen=True)
class ValuationConfig:
    """
    An immutable configuration object for the valuation engine.
    Holds the solver limits and projection defaults the dashboard used to hard-code.
    """
    irr_max_iterations: int = 100
    irr_tolerance: float = 1e-5
    irr_initial_guess: float = 0.10
    fee_projection_years: float = 20
    fee_compounding_factor: float = 1.5
    reference_currency: CurrencyCode = CurrencyCode.EUR
    privacy_mask: str = PRIVACY_MASK
    privacy_mask_percent: str = PRIVACY_MASK_PERCENT
