from fastapi import APIRouter, Depends, HTTPException

from cardmax.api.dependencies import get_catalog
from cardmax.domain.models import Card
from cardmax.errors import CardNotFoundError, CatalogError
from cardmax.repository.catalog import CardCatalog, get_card_by_key

router = APIRouter(prefix="/cards", tags=["cards"])


@router.get("", response_model=list[Card])
def list_cards(catalog: CardCatalog = Depends(get_catalog)) -> list[Card]:
    try:
        return catalog.load_cards()
    except CatalogError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc


@router.get("/{card_key}", response_model=Card)
def get_card(card_key: str, catalog: CardCatalog = Depends(get_catalog)) -> Card:
    try:
        return get_card_by_key(catalog, card_key)
    except CatalogError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except CardNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
