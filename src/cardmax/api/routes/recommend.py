import logging

from fastapi import APIRouter, Depends, HTTPException

from cardmax.agents.orchestrator import RecommendationOrchestrator
from cardmax.api.dependencies import get_orchestrator
from cardmax.errors import CardNotFoundError, CatalogError
from cardmax.schemas.requests import RecommendRequest
from cardmax.schemas.responses import RecommendResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["recommend"])


@router.post("/recommend", response_model=RecommendResponse)
def recommend(
    request: RecommendRequest,
    orchestrator: RecommendationOrchestrator = Depends(get_orchestrator),
) -> RecommendResponse:
    try:
        return orchestrator.recommend(request)
    except CatalogError as exc:
        logger.error("card catalog unavailable: %s", exc)
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except CardNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValueError as exc:
        logger.info("rejected recommendation request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
