import pytest

from app.models.portfolio import PortfolioSnapshot


@pytest.fixture(scope="module")
def snapshot_payload():
    """A snapshot shaped like the dashboard's mock data: home, ETF, BTC, an LP position and cash."""
    return {
        "liabilities": 210000.0,
        "assets": [
            {
                "asset_id": "home",
                "name": "Résidence principale",
                "category": "real_estate",
                "value": 750000.0,
                "cost_basis": 520000.0,
                "strategy": "preservation",
                "is_primary_residence": True,
            },
            {
                "asset_id": "etf-world",
                "name": "MSCI World ETF",
                "category": "stock",
                "value": 320500.0,
                "cost_basis": 280000.0,
                "expense_ratio": 0.002,
                "strategy": "growth",
            },
            {
                "asset_id": "btc",
                "name": "Bitcoin",
                "category": "crypto",
                "value": 125180.0,
                "cost_basis": 60000.0,
                "strategy": "growth",
            },
            {
                "asset_id": "lp-eth-usdc",
                "name": "ETH/USDC pool",
                "category": "defi",
                "value": 40000.0,
                "cost_basis": 42000.0,
                "strategy": "income",
                "defi": {"pool_tvl": 250000000.0, "unclaimed_rewards": 350.0, "impermanent_loss_pct": -2.0},
            },
            {
                "asset_id": "cash",
                "name": "Liquidités",
                "category": "cash",
                "value": 50000.5,
                "strategy": "preservation",
            },
        ],
    }


@pytest.fixture
def snapshot(snapshot_payload):
    return PortfolioSnapshot.model_validate(snapshot_payload)
