import logging

from cardmax.domain.models import Card, PurchaseContext
from cardmax.engine.evidence import explain_result
from cardmax.engine.selectors import rank_cards
from cardmax.errors import RecommendationError
from cardmax.nlp.parser import parse_purchase
from cardmax.repository.catalog import CardCatalog, get_card_by_key
from cardmax.schemas.requests import RecommendRequest
from cardmax.schemas.responses import RecommendResponse

logger = logging.getLogger(__name__)


class RecommendationOrchestrator:
    def __init__(self, catalog: CardCatalog):
        self.catalog = catalog

    def _build_purchase(self, request: RecommendRequest) -> PurchaseContext:
        merchant = (request.merchant or "").strip()
        category = (request.category or "").strip()

        if request.message:
            return parse_purchase(
                message=request.message,
                merchant=merchant or None,
                category=category or None,
                amount=request.amount,
            )

        if not merchant and not category:
            raise RecommendationError("Please provide either merchant or category.")

        return PurchaseContext(
            merchant=merchant,
            category=category,
            amount=request.amount or 0,
        )

    def _candidate_cards(self, request: RecommendRequest) -> list[Card]:
        if request.card_keys is None:
            return self.catalog.load_cards()
        return [get_card_by_key(self.catalog, key) for key in request.card_keys]

    def recommend(self, request: RecommendRequest) -> RecommendResponse:
        purchase = self._build_purchase(request)
        cards = self._candidate_cards(request)
        ranking = rank_cards(cards, purchase)

        evidence: list[str] = []
        if ranking.best is not None:
            evidence = explain_result(ranking.best)
            logger.debug(
                "recommended %s for %s (cash value %.2f of %d card(s))",
                ranking.best.card.key,
                purchase.model_dump(),
                ranking.best.cash_value,
                len(ranking.all),
            )
        else:
            logger.debug("no cards to rank for %s", purchase.model_dump())

        return RecommendResponse(
            best_card=ranking.best,
            all_cards=ranking.all,
            purchase=purchase,
            evidence=evidence,
        )
