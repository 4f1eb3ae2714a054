import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from cardmax.domain.models import Card
from cardmax.errors import CardNotFoundError, CatalogError

logger = logging.getLogger(__name__)


class CardCatalog(Protocol):
    def load_cards(self) -> list[Card]: ...


class InMemoryCardCatalog:
    def __init__(self, cards: Iterable[Card]):
        self._cards = list(cards)

    def load_cards(self) -> list[Card]:
        return list(self._cards)


class FileCardCatalog:
    """Card catalog backed by bundled JSON files.

    `path` is either a directory with one card per `*.json` file, or a single
    JSON file holding a list of cards. Files are read on the first call to
    `load_cards` and kept for the lifetime of the catalog.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._cards: list[Card] | None = None

    def load_cards(self) -> list[Card]:
        if self._cards is None:
            self._cards = self._read()
            logger.info("loaded %d card(s) from %s", len(self._cards), self.path)
        return list(self._cards)

    def _read(self) -> list[Card]:
        if not self.path.exists():
            raise CatalogError(f"Card catalog not found: {self.path}")

        if self.path.is_dir():
            return [self._read_card(file) for file in sorted(self.path.glob("*.json"))]

        data = self._read_json(self.path)
        if not isinstance(data, list):
            raise CatalogError(f"Expected a list of cards in {self.path}")
        return [self._validate(item, self.path) for item in data]

    def _read_card(self, file: Path) -> Card:
        return self._validate(self._read_json(file), file)

    @staticmethod
    def _read_json(file: Path):
        try:
            with file.open("r", encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogError(f"Error reading card file {file}: {exc}") from exc

    @staticmethod
    def _validate(item, file: Path) -> Card:
        try:
            return Card.model_validate(item)
        except ValidationError as exc:
            raise CatalogError(f"Invalid card data in {file}: {exc}") from exc


def get_card_by_key(catalog: CardCatalog, key: str) -> Card:
    for card in catalog.load_cards():
        if card.key == key:
            return card
    raise CardNotFoundError(f"Card not found: {key}")


def get_card_by_name(catalog: CardCatalog, name: str) -> Card:
    for card in catalog.load_cards():
        if card.name.lower() == name.lower():
            return card
    raise CardNotFoundError(f"Card not found: {name}")
