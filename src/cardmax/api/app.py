import uvicorn
from fastapi import FastAPI

from cardmax.agents.orchestrator import RecommendationOrchestrator
from cardmax.api.routes.cards import router as cards_router
from cardmax.api.routes.health import router as health_router
from cardmax.api.routes.recommend import router as recommend_router
from cardmax.config import settings
from cardmax.logging_utils import configure_logging
from cardmax.repository.catalog import CardCatalog, FileCardCatalog


def create_app(catalog: CardCatalog | None = None) -> FastAPI:
    if catalog is None:
        catalog = FileCardCatalog(settings.card_catalog_path)

    app = FastAPI(title="CardMax API", version="0.1.0")
    app.state.catalog = catalog
    app.state.orchestrator = RecommendationOrchestrator(catalog)

    app.include_router(health_router)
    app.include_router(cards_router)
    app.include_router(recommend_router)
    return app


def run() -> None:
    configure_logging(settings)
    uvicorn.run(
        "cardmax.api.app:create_app",
        factory=True,
        host=settings.app_host,
        port=settings.app_port,
        reload=False,
    )
