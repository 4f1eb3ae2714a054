from collections.abc import Iterable

from cardmax.domain.models import Card, PurchaseContext, Recommendation
from cardmax.engine.evaluator import score_card


def rank_cards(cards: Iterable[Card], purchase: PurchaseContext) -> Recommendation:
    results = [score_card(card, purchase) for card in cards]
    # Stable sort: equal cash values keep catalog order.
    results.sort(key=lambda item: item.cash_value, reverse=True)
    return Recommendation(best=results[0] if results else None, all=results)
