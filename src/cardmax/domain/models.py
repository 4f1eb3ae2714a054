from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class RewardType(str, Enum):
    CASHBACK = "Cashback"
    POINTS = "Points"
    MILES = "Miles"


class MatchType(str, Enum):
    MERCHANT = "Merchant"
    CATEGORY = "Category"


# Reward types whose value is expressed in units worth `point_value` each.
POINT_BASED_TYPES = (RewardType.POINTS.value, RewardType.MILES.value)


class RewardRule(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    match_type: str = Field(validation_alias=AliasChoices("match_type", "type"))
    match_value: str = Field(validation_alias=AliasChoices("match_value", "entity_name"))
    reward_rate: float = 0
    reward_type: str = RewardType.CASHBACK.value


class Card(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    key: str = Field(validation_alias=AliasChoices("key", "card_key"))
    name: str
    issuer: str = ""
    card_type: str = ""
    default_reward_rate: float = 0
    default_reward_type: str = Field(
        default=RewardType.CASHBACK.value,
        validation_alias=AliasChoices("default_reward_type", "reward_type"),
    )
    point_value: float = 0
    annual_fee: float = 0
    annual_fee_waiver: str | None = None
    reward_rules: list[RewardRule] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)


class PurchaseContext(BaseModel):
    merchant: str = ""
    category: str = ""
    amount: float = 0


class RewardResult(BaseModel):
    card: Card
    reward_rate: float
    reward_type: str
    reward_value: float
    cash_value: float
    rule: RewardRule | None = None


class Recommendation(BaseModel):
    best: RewardResult | None = None
    all: list[RewardResult] = Field(default_factory=list)
