from cardmax.domain.models import POINT_BASED_TYPES, RewardResult


def explain_result(result: RewardResult) -> list[str]:
    card = result.card
    lines: list[str] = []

    if result.rule is not None:
        lines.append(
            f"{card.name}: {result.rule.match_type.lower()} '{result.rule.match_value}' "
            f"earns {result.reward_rate:g}% {result.reward_type}"
        )
    else:
        lines.append(f"{card.name}: default rate {result.reward_rate:g}% {result.reward_type}")

    if result.reward_type in POINT_BASED_TYPES:
        lines.append(
            f"{result.reward_value:.2f} {result.reward_type.lower()} at "
            f"{card.point_value:g} each = {result.cash_value:.2f} cash value"
        )

    if card.annual_fee > 0:
        line = f"Annual fee {card.annual_fee:.0f}"
        if card.annual_fee_waiver:
            line += f" (waiver: {card.annual_fee_waiver})"
        lines.append(line)

    lines.extend(f"Benefit: {benefit}" for benefit in card.benefits[:2])
    return lines
