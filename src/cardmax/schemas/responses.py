from pydantic import BaseModel

from cardmax.domain.models import PurchaseContext, RewardResult


class RecommendResponse(BaseModel):
    best_card: RewardResult | None
    all_cards: list[RewardResult]
    purchase: PurchaseContext
    evidence: list[str]


class HealthResponse(BaseModel):
    status: str
    cards: int
