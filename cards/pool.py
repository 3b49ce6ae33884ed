"""Card pool used by the game engine to pick the next card.

``CardPool`` owns the catalog and every piece of per-cycle draw state:

- the *available pool* — ids of catalog cards not yet drawn this cycle
- use counters keyed by card id (the only place ``uses`` lives)
- pending followups, scanned in insertion order
- the one-time "win card shown" flag

Selection order in ``next_card``:
  1. reshuffle if the available pool is empty
  2. the win card, once per cycle, when day and all stats reach the threshold
  3. the first due pending followup
  4. a uniform random draw among eligible available cards
  5. one reshuffle and a second attempt, else ``None``

A reshuffle is always a full reset: every card is back in the pool, every use
counter is zero and the win card may show again.  Pending followups survive it.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import TYPE_CHECKING

from cards.models import Card, Followup, FollowupCardItem
from cards.requirements import evaluate

if TYPE_CHECKING:
    from game.state import ResourceState

WIN_CARD_ID = "COMPETITOR_JOB_OFFER"
WIN_MIN_DAY = 70
WIN_MIN_STAT = 70
DEFAULT_FOLLOWUP_DELAY = 1

logger = logging.getLogger(__name__)


class CardPool:
    """Eligible-card bookkeeping for one game session."""

    def __init__(
        self,
        catalog: Sequence[Card],
        rng: random.Random | None = None,
        win_card_id: str = WIN_CARD_ID,
    ) -> None:
        if not catalog:
            raise ValueError("CardPool needs at least one card")
        self._by_id: dict[str, Card] = {}
        for card in catalog:
            if card.id in self._by_id:
                logger.warning("Duplicate card id %r ignored", card.id)
                continue
            self._by_id[card.id] = card
        self.rng = rng or random.Random()
        self.win_card_id = win_card_id
        self._available: list[str] = []
        self._uses: dict[str, int] = {}
        self._pending: list[FollowupCardItem] = []
        self.win_card_shown = False
        self.reshuffles = 0
        self.reset()

    # ── Pool state ──────────────────────────────────────────────────────

    def reset(self) -> None:
        """Restock the pool with the whole catalog and zero every use counter."""
        self._available = list(self._by_id)
        self._uses.clear()
        self.win_card_shown = False

    def _reshuffle(self) -> None:
        self.reset()
        self.reshuffles += 1
        logger.debug("Card pool reshuffled (%d cards)", len(self._available))

    def uses_of(self, card: Card) -> int:
        return self._uses.get(card.id, 0)

    def has_uses_left(self, card: Card) -> bool:
        return self.uses_of(card) < card.max_uses

    def _mark_used(self, card: Card) -> Card:
        self._uses[card.id] = self.uses_of(card) + 1
        return card

    def _take(self, card: Card) -> Card:
        self._available.remove(card.id)
        return self._mark_used(card)

    # ── Selection ───────────────────────────────────────────────────────

    def next_card(self, resources: ResourceState) -> Card | None:
        """Pick, remove and use-count the next card, or ``None`` if nothing fits."""
        if not self._available:
            self._reshuffle()

        win_card = self._win_card(resources)
        if win_card is not None:
            self.win_card_shown = True
            return self._take(win_card)

        for index, item in enumerate(self._pending):
            if item.show_on_day > resources.day:
                continue
            if evaluate(item.card.requirements, resources) and self.has_uses_left(item.card):
                del self._pending[index]
                return self._mark_used(item.card)

        eligible = self._eligible(resources)
        if not eligible:
            self._reshuffle()
            eligible = self._eligible(resources)
            if not eligible:
                logger.info("No eligible card even after a reshuffle (day %d)", resources.day)
                return None

        return self._take(self.rng.choice(eligible))

    def _eligible(self, resources: ResourceState) -> list[Card]:
        cards = (self._by_id[card_id] for card_id in self._available)
        return [
            card for card in cards
            if self.has_uses_left(card) and evaluate(card.requirements, resources)
        ]

    def _win_card(self, resources: ResourceState) -> Card | None:
        if self.win_card_shown or resources.day < WIN_MIN_DAY:
            return None
        if any(value < WIN_MIN_STAT for value in resources.stats().values()):
            return None
        if self.win_card_id not in self._available:
            return None
        card = self._by_id[self.win_card_id]
        return card if self.has_uses_left(card) else None

    # ── Followups ───────────────────────────────────────────────────────

    def schedule_followup(
        self,
        card: Card,
        current_day: int,
        delay_days: int,
        parent_id: str = "",
    ) -> FollowupCardItem:
        """Defer ``card`` until ``current_day + delay_days``."""
        item = FollowupCardItem(
            card=card,
            show_on_day=current_day + delay_days,
            parent_card_id=parent_id or card.parent_card_id,
        )
        self._pending.append(item)
        return item

    def queue_followup(
        self,
        followup: Followup | None,
        current_day: int,
        parent_id: str = "",
    ) -> FollowupCardItem | None:
        """Choose one of ``followup``'s options and schedule it.

        Options with a positive ``probability`` are picked by weight; when no
        option carries one the pick is uniform.  An option's absolute
        ``show_on_day`` wins over its relative ``delay``.
        """
        if followup is None or not followup.options:
            return None
        card = self._choose_option(followup.options)
        if card.show_on_day is not None:
            delay = card.show_on_day - current_day
        elif card.delay is not None:
            delay = card.delay
        else:
            delay = DEFAULT_FOLLOWUP_DELAY
        return self.schedule_followup(card, current_day, delay, parent_id)

    def _choose_option(self, options: Sequence[Card]) -> Card:
        weights = [max(0.0, option.probability) for option in options]
        if sum(weights) > 0:
            return self.rng.choices(options, weights=weights, k=1)[0]
        return self.rng.choice(options)

    # ── Introspection ───────────────────────────────────────────────────

    @property
    def pending(self) -> list[FollowupCardItem]:
        return list(self._pending)

    @property
    def count(self) -> int:
        return len(self._available)

    @property
    def status(self) -> str:
        return f"{self.count}/{len(self._by_id)}"
