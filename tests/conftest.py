from pathlib import Path

import pytest

from cardmax.domain.models import Card, RewardRule

PROJECT_ROOT = Path(__file__).resolve().parents[1]
CATALOG_DIR = PROJECT_ROOT / "data" / "cards"


def make_card(
    key: str,
    rate: float = 1.0,
    reward_type: str = "Cashback",
    point_value: float = 0.0,
    rules: list[RewardRule] | None = None,
) -> Card:
    return Card(
        key=key,
        name=key.replace("_", " ").title(),
        issuer="Test Bank",
        default_reward_rate=rate,
        default_reward_type=reward_type,
        point_value=point_value,
        reward_rules=rules or [],
    )


def make_rule(match_type: str, match_value: str, rate: float, reward_type: str = "Cashback") -> RewardRule:
    return RewardRule(
        match_type=match_type,
        match_value=match_value,
        reward_rate=rate,
        reward_type=reward_type,
    )


@pytest.fixture
def catalog_dir() -> Path:
    return CATALOG_DIR


@pytest.fixture
def dining_card() -> Card:
    return make_card(
        "dining_points",
        rate=1.0,
        reward_type="Cashback",
        point_value=0.01,
        rules=[make_rule("Category", "Dining", 3.0, "Points")],
    )


@pytest.fixture
def flat_card() -> Card:
    return make_card("flat_cashback", rate=1.0)
