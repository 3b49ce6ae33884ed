"""Tests for cards.loader."""
from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from cards.loader import (
    WELCOME_CARD_ID,
    fallback_catalog,
    load_catalog,
    parse_catalog,
    welcome_card,
)
from cards.models import Effects
from game.config import DEFAULT_DECK_PATH


FALLBACK_IDS = [card.id for card in fallback_catalog()]


def _write(tmp_path: Path, payload) -> Path:
    path = tmp_path / "deck.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


class TestFallback:
    def test_missing_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="cards.loader"):
            cards = load_catalog(tmp_path / "nope.json")
        assert [c.id for c in cards] == FALLBACK_IDS
        assert "Failed to read" in caplog.text

    def test_invalid_json(self, tmp_path: Path) -> None:
        cards = load_catalog(_write(tmp_path, "[{not json"))
        assert [c.id for c in cards] == FALLBACK_IDS

    def test_empty_array(self, tmp_path: Path) -> None:
        assert [c.id for c in load_catalog(_write(tmp_path, []))] == FALLBACK_IDS

    def test_non_array_document(self, tmp_path: Path) -> None:
        assert [c.id for c in load_catalog(_write(tmp_path, {"id": "A"}))] == FALLBACK_IDS

    def test_no_valid_entries(self, tmp_path: Path) -> None:
        payload = ["just a string", {"id": "BAD", "maxUses": "lots"}]
        assert [c.id for c in load_catalog(_write(tmp_path, payload))] == FALLBACK_IDS

    def test_fallback_has_no_welcome_card(self) -> None:
        assert WELCOME_CARD_ID not in FALLBACK_IDS
        assert all(not card.is_info_only for card in fallback_catalog())


class TestParseCatalog:
    def test_camel_case_keys(self) -> None:
        [card] = parse_catalog(
            [
                {
                    "id": "OVERTIME",
                    "text": "Stay late?",
                    "yesText": "Sure",
                    "noText": "Nope",
                    "yesEffects": {"performance": 10, "boss": 5},
                    "noEffects": {"boss": -10},
                    "maxUses": 3,
                }
            ]
        )
        assert card.yes_text == "Sure"
        assert card.no_text == "Nope"
        assert card.yes_effects.performance == 10
        assert card.no_effects.boss == -10
        assert card.max_uses == 3

    def test_missing_id_uses_index(self) -> None:
        cards = parse_catalog([{"id": "A"}, {"text": "anonymous"}, {"id": "", "text": "blank"}])
        assert [c.id for c in cards] == ["A", "card_1", "card_2"]

    def test_invalid_entries_skipped(self) -> None:
        cards = parse_catalog([{"id": "A"}, 7, {"id": "B", "yesEffects": {"boss": "a lot"}}, {"id": "C"}])
        assert [c.id for c in cards] == ["A", "C"]

    def test_duplicate_ids_keep_first(self) -> None:
        cards = parse_catalog([{"id": "A", "text": "first"}, {"id": "A", "text": "second"}])
        assert len(cards) == 1
        assert cards[0].text == "first"

    def test_defaults(self) -> None:
        [card] = parse_catalog([{"id": "A"}])
        assert card.max_uses == 1
        assert card.yes_text == "Yes"
        assert card.no_text == "No"
        assert card.requirements is None
        assert card.yes_effects == Effects()


class TestShippedDeck:
    def test_loads_without_fallback(self) -> None:
        cards = load_catalog(DEFAULT_DECK_PATH)
        ids = [c.id for c in cards]
        assert len(ids) == 18
        assert "COMPETITOR_JOB_OFFER" in ids
        assert ids != FALLBACK_IDS

    def test_followups_are_attached(self) -> None:
        cards = {c.id: c for c in load_catalog(DEFAULT_DECK_PATH)}
        thanks = cards["INTERN_HELP"].yes_followup.options
        assert [c.id for c in thanks] == ["INTERN_THANKS"]
        assert thanks[0].delay == 3
        assert thanks[0].parent_card_id == "INTERN_HELP"

        options = cards["DEADLINE_CRUNCH"].no_followup.options
        assert [c.id for c in options] == ["CLIENT_UNDERSTANDS", "CLIENT_ESCALATES"]
        assert [c.probability for c in options] == [0.6, 0.4]


def test_welcome_card() -> None:
    card = welcome_card()
    assert card.id == WELCOME_CARD_ID
    assert card.is_info_only
    assert card.max_uses == 1
