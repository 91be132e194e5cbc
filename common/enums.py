# common/enums.py
from enum import Enum


class AssetCategory(str, Enum):
    """Defines the supported asset categories of a wealth snapshot."""

    REAL_ESTATE = "real_estate"
    STOCK = "stock"
    CRYPTO = "crypto"
    DEFI = "defi"
    NFT = "nft"
    CASH = "cash"


class StrategyTag(str, Enum):
    """Defines the investment strategy labels used for filtering. ALL is the wildcard."""

    ALL = "all"
    GROWTH = "growth"
    INCOME = "income"
    PRESERVATION = "preservation"


class CurrencyCode(str, Enum):
    """Defines the supported display currencies. EUR is the reference currency."""

    EUR = "EUR"
    USD = "USD"
    CHF = "CHF"
    BTC = "BTC"
