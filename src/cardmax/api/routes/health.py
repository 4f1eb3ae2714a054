from fastapi import APIRouter, Depends, HTTPException

from cardmax.api.dependencies import get_catalog
from cardmax.errors import CatalogError
from cardmax.repository.catalog import CardCatalog
from cardmax.schemas.responses import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health(catalog: CardCatalog = Depends(get_catalog)) -> HealthResponse:
    try:
        cards = catalog.load_cards()
    except CatalogError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return HealthResponse(status="ok", cards=len(cards))
