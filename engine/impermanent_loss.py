# engine/impermanent_loss.py
import numpy as np

from engine.exceptions import InvalidEngineInputError


def impermanent_loss(price_ratio: float) -> float:
    """
    Impermanent loss of a 50/50 constant-product pool position, in percent.

    `price_ratio` is new relative price / old relative price of the two pooled
    assets. The result is 0 at a ratio of 1 and negative everywhere else, and
    is symmetric under ratio -> 1/ratio. Non-positive ratios are rejected.
    """
    if price_ratio is None or not np.isfinite(price_ratio) or price_ratio <= 0:
        raise InvalidEngineInputError(f"Price ratio must be a positive finite number, got {price_ratio}.")

    return float((2.0 * np.sqrt(price_ratio) / (1.0 + price_ratio) - 1.0) * 100.0)


def impermanent_loss_from_prices(entry_price: float, current_price: float) -> float:
    """Impermanent loss from the relative price at deposit time and now."""
    for label, price in (("Entry price", entry_price), ("Current price", current_price)):
        if price is None or not np.isfinite(price) or price <= 0:
            raise InvalidEngineInputError(f"{label} must be a positive finite number, got {price}.")
    return impermanent_loss(current_price / entry_price)
