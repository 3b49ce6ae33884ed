"""Deck loader — reads the card catalog and sanitizes it for the pool.

The catalog is a JSON array of card objects.  Loading never fails the game:

- unreadable file, invalid JSON, a non-array document or an array with no
  usable card falls back to ``fallback_catalog()``
- individual entries that do not validate are skipped
- cards without an id get ``card_<index>``; duplicate ids keep the first card

Every recovery is logged at WARNING.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from cards.models import Card, Effects

WELCOME_CARD_ID = "WELCOME"

logger = logging.getLogger(__name__)


def welcome_card() -> Card:
    """Synthesized info card every session starts on."""
    return Card(
        id=WELCOME_CARD_ID,
        text="Ready when you are. Let's get to work.",
        is_info_only=True,
        max_uses=1,
    )


def fallback_catalog() -> list[Card]:
    """Small built-in deck used when the catalog file cannot be used."""
    return [
        Card(
            id="OVERTIME_REQUEST",
            text="Your boss wants you to work overtime today. Will you accept?",
            yes_effects=Effects(performance=10, motivation=-5, boss=10),
            no_effects=Effects(performance=-5, motivation=5, boss=-10),
            max_uses=3,
        ),
        Card(
            id="COFFEE_BREAK",
            text="A colleague asks you to join them for a coffee break. Will you go?",
            yes_effects=Effects(colleagues=10, motivation=5, performance=-5),
            no_effects=Effects(colleagues=-5, motivation=-5, performance=5),
            max_uses=3,
        ),
        Card(
            id="TEAM_LUNCH",
            text="The team is ordering lunch together. Do you chip in?",
            yes_effects=Effects(colleagues=10, motivation=5),
            no_effects=Effects(colleagues=-10, performance=5),
            max_uses=3,
        ),
        Card(
            id="STATUS_REPORT",
            text="The weekly status report is due. Write it properly?",
            yes_effects=Effects(boss=10, motivation=-5),
            no_effects=Effects(boss=-10, motivation=5),
            max_uses=3,
        ),
    ]


def parse_catalog(entries: Any) -> list[Card]:
    """Validate raw catalog entries, skipping the ones that cannot be used."""
    if not isinstance(entries, list):
        logger.warning("Card catalog must be a JSON array, got %s", type(entries).__name__)
        return []

    cards: list[Card] = []
    seen: set[str] = set()
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            logger.warning("Skipping catalog entry %d: not an object", index)
            continue
        if not entry.get("id"):
            entry = {**entry, "id": f"card_{index}"}
            logger.warning("Catalog entry %d has no id, using %r", index, entry["id"])
        try:
            card = Card.model_validate(entry)
        except ValidationError as exc:
            logger.warning("Skipping catalog entry %r: %s", entry.get("id"), exc)
            continue
        if card.id in seen:
            logger.warning("Skipping duplicate card id %r", card.id)
            continue
        seen.add(card.id)
        cards.append(card)
    return cards


def load_catalog(path: str | Path) -> list[Card]:
    """Load the card catalog from ``path``, falling back to the built-in deck."""
    path = Path(path)
    try:
        entries = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Failed to read cards file %s: %s", path, exc)
        return fallback_catalog()
    except json.JSONDecodeError as exc:
        logger.warning("Failed to parse cards JSON %s: %s", path, exc)
        return fallback_catalog()

    cards = parse_catalog(entries)
    if not cards:
        logger.warning("Card file %s contained no valid cards, using sample cards", path)
        return fallback_catalog()

    logger.info("Loaded %d cards from %s", len(cards), path)
    return cards
