from cardmax.domain.models import POINT_BASED_TYPES, Card, PurchaseContext, RewardResult
from cardmax.engine.matcher import find_best_rule


def cash_equivalent(reward_value: float, reward_type: str, point_value: float) -> float:
    if reward_type in POINT_BASED_TYPES:
        return reward_value * point_value
    return reward_value


def score_card(card: Card, purchase: PurchaseContext) -> RewardResult:
    rule = find_best_rule(purchase.merchant, purchase.category, card)

    rate = card.default_reward_rate
    reward_type = card.default_reward_type
    if rule is not None:
        rate = rule.reward_rate
        reward_type = rule.reward_type

    # Rates are percentages: 2.0 on 100 earns 2.0.
    reward_value = (purchase.amount * rate) / 100

    return RewardResult(
        card=card,
        reward_rate=rate,
        reward_type=reward_type,
        reward_value=reward_value,
        cash_value=cash_equivalent(reward_value, reward_type, card.point_value),
        rule=rule,
    )
