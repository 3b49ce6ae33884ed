"""Game-over detection.

Each stat ends the game at its floor (0) or its ceiling (100).  When several
boundaries are hit by the same effect the first entry of ``TERMINAL_CONDITIONS``
wins, so the order below is part of the game rules.

``check_terminal`` is stateless; the session decides whether a result sticks.
"""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel

from game.state import MAX_VALUE, MIN_VALUE, ResourceState


class TerminalStatus(BaseModel):
    """Whether the session is over, and why."""

    is_over: bool = False
    reason: str = ""
    cause: str | None = None   # e.g. "motivation_low", "competitor_offer"
    is_victory: bool = False


class _Condition(NamedTuple):
    cause: str
    stat: str
    at_ceiling: bool
    reason: str
    is_victory: bool = False


TERMINAL_CONDITIONS: tuple[_Condition, ...] = (
    _Condition(
        "motivation_low", "motivation", False,
        "Your motivation ran dry. You quit the job.",
    ),
    _Condition(
        "motivation_high", "motivation", True,
        "Too much motivation wore you out. You burned out.",
    ),
    _Condition(
        "performance_low", "performance", False,
        "Your performance was far too low. You got fired.",
    ),
    _Condition(
        "performance_high", "performance", True,
        "You worked far too hard and suffered burnout syndrome.",
    ),
    _Condition(
        "colleagues_low", "colleagues", False,
        "Your colleagues can't stand you. Left on your own, you resigned.",
    ),
    _Condition(
        "colleagues_high", "colleagues", True,
        "You grew so close to your colleagues that the office turned into a "
        "social club. You got fired.",
    ),
    _Condition(
        "boss_low", "boss", False,
        "Your boss doesn't like you. You got fired.",
    ),
    _Condition(
        "boss_high", "boss", True,
        "Your boss adores you. You got promoted and won the game!",
        is_victory=True,
    ),
)

COMPETITOR_OFFER_STATUS = TerminalStatus(
    is_over=True,
    reason="You accepted the competitor's offer and made a fresh start. You won the game!",
    cause="competitor_offer",
    is_victory=True,
)

NO_CARDS_STATUS = TerminalStatus(
    is_over=True,
    reason="There are no more decisions to make. Your time at the office is over.",
    cause="no_cards",
)


def check_terminal(resources: ResourceState) -> TerminalStatus:
    """Return the first boundary hit by ``resources``, or a running status."""
    for condition in TERMINAL_CONDITIONS:
        value = getattr(resources, condition.stat)
        hit = value >= MAX_VALUE if condition.at_ceiling else value <= MIN_VALUE
        if hit:
            return TerminalStatus(
                is_over=True,
                reason=condition.reason,
                cause=condition.cause,
                is_victory=condition.is_victory,
            )
    return TerminalStatus()
