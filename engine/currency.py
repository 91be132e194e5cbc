# engine/currency.py
import logging
import math
from typing import Mapping, Optional

from engine.config import CURRENCY_FORMATS, CurrencyFormat, ValuationConfig
from engine.exceptions import InvalidEngineInputError, UnsupportedCurrencyError

logger = logging.getLogger(__name__)


def _resolve(target_currency: str, rates: Mapping[str, float]) -> tuple[CurrencyFormat, float]:
    code = getattr(target_currency, "value", target_currency)
    fmt = CURRENCY_FORMATS.get(code)
    if fmt is None or code not in rates:
        raise UnsupportedCurrencyError(str(code))
    rate = rates[code]
    if rate is None or not math.isfinite(rate) or rate <= 0:
        raise InvalidEngineInputError(f"Exchange rate for {code} must be a positive finite number, got {rate}.")
    return fmt, float(rate)


def convert(value_in_reference: float, target_currency: str, rates: Mapping[str, float]) -> float:
    """Converts an amount out of the reference currency."""
    _, rate = _resolve(target_currency, rates)
    return value_in_reference * rate


def _group_digits(value: float, fmt: CurrencyFormat) -> str:
    text = f"{abs(value):,.{fmt.fraction_digits}f}"
    integer_part, _, fraction_part = text.partition(".")
    integer_part = integer_part.replace(",", fmt.group_separator)
    if fraction_part:
        return f"{integer_part}{fmt.decimal_separator}{fraction_part}"
    return integer_part


def format_money(amount: float, fmt: CurrencyFormat) -> str:
    """Formats an already converted amount with the currency's grouping, precision and symbol."""
    digits = _group_digits(amount, fmt)
    rounded = round(amount, fmt.fraction_digits)
    sign = "-" if rounded < 0 else ""
    if fmt.symbol_first:
        return f"{sign}{fmt.symbol}{fmt.symbol_spacing}{digits}"
    return f"{sign}{digits}{fmt.symbol_spacing}{fmt.symbol}"


def convert_and_format(
    value_in_reference: float,
    target_currency: str,
    rates: Mapping[str, float],
    privacy_mode: bool = False,
    is_percent: bool = False,
    config: Optional[ValuationConfig] = None,
) -> str:
    """
    Renders a reference-currency amount (or a percentage) for display.

    Privacy mode masks the output before any lookup, conversion or rounding.
    Percentages are never converted. Non-finite amounts raise
    InvalidEngineInputError and unknown currencies raise
    UnsupportedCurrencyError, without producing partial output.
    """
    config = config or ValuationConfig()
    if privacy_mode:
        return config.privacy_mask_percent if is_percent else config.privacy_mask
    if value_in_reference is None or not math.isfinite(value_in_reference):
        raise InvalidEngineInputError(f"Cannot format a non-finite amount: {value_in_reference}.")
    if is_percent:
        sign = "-" if round(value_in_reference, 2) < 0 else ""
        return f"{sign}{abs(value_in_reference):.2f}%"

    fmt, rate = _resolve(target_currency, rates)
    formatted = format_money(value_in_reference * rate, fmt)
    logger.debug("Formatted %s in %s as %r.", value_in_reference, target_currency, formatted)
    return formatted
