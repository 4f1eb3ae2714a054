from fastapi import Request

from cardmax.agents.orchestrator import RecommendationOrchestrator
from cardmax.repository.catalog import CardCatalog


def get_catalog(request: Request) -> CardCatalog:
    return request.app.state.catalog


def get_orchestrator(request: Request) -> RecommendationOrchestrator:
    return request.app.state.orchestrator
