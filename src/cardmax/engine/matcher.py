from cardmax.domain.models import Card, MatchType, RewardRule


def _rule_applies(rule: RewardRule, merchant: str, category: str) -> bool:
    if rule.match_type == MatchType.MERCHANT.value:
        return rule.match_value == merchant
    if rule.match_type == MatchType.CATEGORY.value:
        return rule.match_value == category
    return False


def find_best_rule(merchant: str, category: str, card: Card) -> RewardRule | None:
    """Return the matching rule with the highest rate above the card default.

    Matching is exact and case-sensitive. A rule has to beat the default rate
    to be selected, and on equal rates the earliest rule in `card.reward_rules`
    is kept.
    """
    best_rule: RewardRule | None = None
    best_rate = card.default_reward_rate

    for rule in card.reward_rules:
        if not _rule_applies(rule, merchant, category):
            continue
        if rule.reward_rate > best_rate:
            best_rule = rule
            best_rate = rule.reward_rate

    return best_rule
