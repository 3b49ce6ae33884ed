"""One playthrough's worth of mutable state.

A ``GameSession`` is created at game start and replaced wholesale on restart;
nothing in it outlives a playthrough.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from cards.models import Card, Effects
from cards.pool import CardPool
from game.outcome import TerminalStatus, check_terminal
from game.state import ResourceState


class GameSession:
    def __init__(
        self,
        catalog: Sequence[Card],
        resources: ResourceState | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.resources = resources or ResourceState.initial()
        self.pool = CardPool(catalog, rng=rng)
        self.current_card: Card | None = None
        self.played_card_ids: list[str] = []
        self.status = TerminalStatus()
        self.last_changes: dict[str, int] = {}

    @property
    def is_over(self) -> bool:
        return self.status.is_over

    def apply_effect(self, effects: Effects) -> TerminalStatus:
        """Apply ``effects`` to the resources and re-check the boundaries.

        A finished session is frozen: the call is a no-op returning the
        status that ended it.
        """
        if self.status.is_over:
            return self.status
        self.last_changes = self.resources.apply_effect(effects)
        self.status = check_terminal(self.resources)
        return self.status

    def end(self, status: TerminalStatus) -> None:
        """Finish the session with ``status`` unless it is already over."""
        if not self.status.is_over:
            self.status = status

    def record_played(self, card: Card) -> None:
        if card.id:
            self.played_card_ids.append(card.id)
