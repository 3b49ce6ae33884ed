"""Core game engine — the state machine the front-end talks to.

``GameEngine`` owns:
- ``session``  — the ``GameSession`` (resources, card pool, history, status)
- ``phase``    — ``PLAYING``, ``GAME_OVER`` or ``INFO_OVERLAY``
- the decision lock used while a swipe animation is running

A decision is applied in two steps so the UI can finish its dismissal
animation first: ``submit()`` records the decision and locks the engine,
``resolve_pending()`` applies it, draws the next card and unlocks.  Anything
submitted while locked, while the overlay is open or after the game ended is
dropped.  ``decide()`` runs both steps at once.

The engine is free of I/O and UI concerns so it can be tested directly.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from enum import Enum

from cards.loader import welcome_card
from cards.models import Card
from cards.pool import CardPool
from game.outcome import COMPETITOR_OFFER_STATUS, NO_CARDS_STATUS, TerminalStatus
from game.session import GameSession
from game.state import ResourceState

logger = logging.getLogger(__name__)


class Decision(str, Enum):
    YES = "yes"
    NO = "no"
    ACKNOWLEDGE = "acknowledge"


class GamePhase(str, Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"
    INFO_OVERLAY = "info_overlay"


class GameEngine:
    """Central coordinator for one player's games.

    Instantiated once per run with the loaded catalog.  The UI layer should only
    call the public methods of this class; it must not mutate ``session``
    directly.
    """

    def __init__(self, catalog: Sequence[Card], seed: int | None = None) -> None:
        self.catalog = list(catalog)
        self.rng = random.Random(seed)
        self.phase = GamePhase.PLAYING
        self._phase_before_overlay = GamePhase.PLAYING
        self._pending: Decision | None = None
        self.session = self._new_session(ResourceState.initial())

    def _new_session(self, resources: ResourceState) -> GameSession:
        session = GameSession(self.catalog, resources=resources, rng=self.rng)
        session.current_card = welcome_card()
        logger.info("New session started with %d cards", len(self.catalog))
        return session

    # ── Read-only view ──────────────────────────────────────────────────

    @property
    def current_card(self) -> Card | None:
        return self.session.current_card

    @property
    def resources(self) -> ResourceState:
        return self.session.resources.model_copy()

    @property
    def status(self) -> TerminalStatus:
        return self.session.status

    @property
    def pool(self) -> CardPool:
        return self.session.pool

    @property
    def played_card_ids(self) -> list[str]:
        return list(self.session.played_card_ids)

    @property
    def is_locked(self) -> bool:
        return self._pending is not None

    def snapshot(self) -> dict:
        """Everything the presentation layer needs after a transition."""
        card = self.session.current_card
        return {
            "phase": self.phase.value,
            "card": card.model_dump() if card else None,
            "resources": self.session.resources.snapshot(),
            "changes": dict(self.session.last_changes),
            "is_over": self.status.is_over,
            "reason": self.status.reason,
            "is_victory": self.status.is_victory,
        }

    # ── Decisions ───────────────────────────────────────────────────────

    def submit(self, decision: Decision) -> bool:
        """Record ``decision`` and lock until ``resolve_pending()`` runs.

        Returns ``False`` when the decision is discarded.
        """
        if self._pending is not None:
            logger.debug("Discarding %s: a decision is still pending", decision.value)
            return False
        if self.phase is not GamePhase.PLAYING or self.session.current_card is None:
            logger.debug("Discarding %s in phase %s", decision.value, self.phase.value)
            return False
        card = self.session.current_card
        if decision is Decision.ACKNOWLEDGE and not card.is_info_only:
            logger.debug("Discarding acknowledge on choice card %r", card.id)
            return False
        self._pending = decision
        return True

    def resolve_pending(self) -> None:
        """Apply the pending decision, resolve the next card and unlock."""
        decision = self._pending
        if decision is None:
            return
        try:
            self._apply(decision)
        finally:
            self._pending = None

    def decide(self, decision: Decision) -> bool:
        if not self.submit(decision):
            return False
        self.resolve_pending()
        return True

    def _apply(self, decision: Decision) -> None:
        session = self.session
        card = session.current_card
        accepted = decision is Decision.YES
        session.record_played(card)

        if card.id == session.pool.win_card_id and accepted and not card.is_info_only:
            self._finish(COMPETITOR_OFFER_STATUS)
            return

        status = session.apply_effect(card.effects_for(accepted))
        if status.is_over:
            self._finish(status)
            return

        session.pool.queue_followup(
            card.followup_for(accepted),
            current_day=session.resources.day,
            parent_id=card.id,
        )

        next_card = session.pool.next_card(session.resources)
        if next_card is None:
            self._finish(NO_CARDS_STATUS)
            return
        session.current_card = next_card

    def _finish(self, status: TerminalStatus) -> None:
        self.session.end(status)
        self.phase = GamePhase.GAME_OVER
        logger.info(
            "Game over on day %d: %s", self.session.resources.day, self.session.status.cause
        )

    # ── Overlay ─────────────────────────────────────────────────────────

    def open_overlay(self) -> bool:
        """Enter the info overlay; refused while a decision is pending."""
        if self.phase is GamePhase.INFO_OVERLAY or self.is_locked:
            return False
        self._phase_before_overlay = self.phase
        self.phase = GamePhase.INFO_OVERLAY
        return True

    def close_overlay(self) -> bool:
        if self.phase is not GamePhase.INFO_OVERLAY:
            return False
        self.phase = self._phase_before_overlay
        return True

    # ── Restart ─────────────────────────────────────────────────────────

    def restart(self) -> bool:
        """Start a fresh session from the restart baseline.

        Only allowed once the game is over.
        """
        if self.phase is not GamePhase.GAME_OVER:
            logger.debug("Ignoring restart in phase %s", self.phase.value)
            return False
        self._pending = None
        self.session = self._new_session(ResourceState.restart_baseline())
        self.phase = GamePhase.PLAYING
        return True
