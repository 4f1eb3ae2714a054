from pydantic import BaseModel


class RecommendRequest(BaseModel):
    message: str | None = None
    merchant: str | None = None
    category: str | None = None
    amount: float | None = None
    card_keys: list[str] | None = None
