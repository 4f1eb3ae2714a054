import json

import pytest

from cardmax.domain.models import PurchaseContext
from cardmax.engine.selectors import rank_cards
from cardmax.errors import CardNotFoundError, CatalogError
from cardmax.repository.catalog import (
    FileCardCatalog,
    InMemoryCardCatalog,
    get_card_by_key,
    get_card_by_name,
)

from conftest import make_card


def test_bundled_catalog_loads_in_file_order(catalog_dir) -> None:
    cards = FileCardCatalog(catalog_dir).load_cards()

    assert [card.key for card in cards] == [
        "amazon_pay_icici",
        "axis_atlas",
        "hdfc_regalia",
        "swiggy_hdfc",
    ]
    regalia = cards[2]
    assert regalia.default_reward_type == "Points"
    assert regalia.point_value == 0.5
    assert regalia.reward_rules[0].match_type == "Category"
    assert regalia.reward_rules[0].match_value == "Travel"


def test_bundled_catalog_ranks_travel_purchase(catalog_dir) -> None:
    cards = FileCardCatalog(catalog_dir).load_cards()
    ranking = rank_cards(cards, PurchaseContext(category="Travel", amount=1000))

    assert [item.card.key for item in ranking.all] == [
        "axis_atlas",
        "hdfc_regalia",
        "amazon_pay_icici",
        "swiggy_hdfc",
    ]
    assert ranking.best.cash_value == pytest.approx(50.0)
    assert ranking.all[1].cash_value == pytest.approx(25.0)


def test_catalog_is_read_once(tmp_path) -> None:
    card_file = tmp_path / "one.json"
    card_file.write_text(json.dumps({"card_key": "one", "name": "One"}), encoding="utf-8")
    catalog = FileCardCatalog(tmp_path)

    assert [card.key for card in catalog.load_cards()] == ["one"]

    card_file.unlink()
    assert [card.key for card in catalog.load_cards()] == ["one"]


def test_catalog_accepts_list_file_and_field_names(tmp_path) -> None:
    cards_file = tmp_path / "cards.json"
    cards_file.write_text(
        json.dumps(
            [
                {
                    "key": "plain",
                    "name": "Plain",
                    "default_reward_rate": 1.5,
                    "default_reward_type": "Miles",
                    "reward_rules": [
                        {"match_type": "Merchant", "match_value": "Uber", "reward_rate": 4}
                    ],
                }
            ]
        ),
        encoding="utf-8",
    )

    cards = FileCardCatalog(cards_file).load_cards()

    assert cards[0].key == "plain"
    assert cards[0].default_reward_type == "Miles"
    assert cards[0].point_value == 0
    assert cards[0].reward_rules[0].reward_type == "Cashback"


def test_missing_catalog_raises(tmp_path) -> None:
    with pytest.raises(CatalogError, match="not found"):
        FileCardCatalog(tmp_path / "missing").load_cards()


def test_invalid_json_names_the_file(tmp_path) -> None:
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(CatalogError, match="broken.json"):
        FileCardCatalog(tmp_path).load_cards()


def test_invalid_card_names_the_file(tmp_path) -> None:
    (tmp_path / "nameless.json").write_text(json.dumps({"card_key": "x"}), encoding="utf-8")

    with pytest.raises(CatalogError, match="nameless.json"):
        FileCardCatalog(tmp_path).load_cards()


def test_list_file_must_hold_a_list(tmp_path) -> None:
    cards_file = tmp_path / "cards.json"
    cards_file.write_text(json.dumps({"card_key": "x", "name": "X"}), encoding="utf-8")

    with pytest.raises(CatalogError, match="list of cards"):
        FileCardCatalog(cards_file).load_cards()


def test_lookup_by_key_and_name() -> None:
    catalog = InMemoryCardCatalog([make_card("gold_card"), make_card("silver_card")])

    assert get_card_by_key(catalog, "silver_card").key == "silver_card"
    assert get_card_by_name(catalog, "GOLD CARD").key == "gold_card"

    with pytest.raises(CardNotFoundError):
        get_card_by_key(catalog, "Gold_Card")
    with pytest.raises(CardNotFoundError):
        get_card_by_name(catalog, "platinum")


def test_in_memory_catalog_returns_copies() -> None:
    catalog = InMemoryCardCatalog([make_card("a")])

    catalog.load_cards().clear()

    assert len(catalog.load_cards()) == 1
