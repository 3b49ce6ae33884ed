"""Player resources — the four office gauges and the day counter.

``ResourceState`` is the only place stat arithmetic happens.  Card effects are
scaled before they land (colleagues move more slowly than the other stats),
truncated toward zero, added, and clamped to [0, 100].  Every application
advances the day by one, including info cards with no deltas.
"""

from __future__ import annotations

from pydantic import BaseModel

from cards.models import Effects


# ── Constants ───────────────────────────────────────────────────────────────

MIN_VALUE = 0
MAX_VALUE = 100

STAT_IDS: tuple[str, ...] = ("motivation", "performance", "colleagues", "boss")

# Percent of the raw catalog delta that reaches each stat
EFFECT_SCALE_PERCENT: dict[str, int] = {
    "motivation": 50,
    "performance": 50,
    "colleagues": 35,
    "boss": 50,
}

INITIAL_STAT_VALUE = 40
RESTART_STAT_VALUE = 50
FIRST_DAY = 1


def clamp(value: int, low: int = MIN_VALUE, high: int = MAX_VALUE) -> int:
    return max(low, min(high, value))


def scale_delta(stat_id: str, delta: int) -> int:
    """Scale a raw delta for ``stat_id`` and truncate toward zero."""
    return int(delta * EFFECT_SCALE_PERCENT[stat_id] / 100)


# ── Resource State ──────────────────────────────────────────────────────────


class ResourceState(BaseModel):
    motivation: int = INITIAL_STAT_VALUE
    performance: int = INITIAL_STAT_VALUE
    colleagues: int = INITIAL_STAT_VALUE
    boss: int = INITIAL_STAT_VALUE
    day: int = FIRST_DAY

    @classmethod
    def initial(cls) -> ResourceState:
        return cls()

    @classmethod
    def restart_baseline(cls) -> ResourceState:
        return cls(**{stat_id: RESTART_STAT_VALUE for stat_id in STAT_IDS})

    def value_of(self, name: str) -> int | None:
        """Current value of a stat or ``"day"``; ``None`` for unknown names."""
        if name == "day" or name in STAT_IDS:
            return getattr(self, name)
        return None

    def apply_effect(self, effects: Effects) -> dict[str, int]:
        """Apply scaled ``effects`` and advance one day.

        Returns the actual change per stat after clamping (zero entries
        omitted).
        """
        changes: dict[str, int] = {}
        for stat_id in STAT_IDS:
            old = getattr(self, stat_id)
            new = clamp(old + scale_delta(stat_id, getattr(effects, stat_id)))
            setattr(self, stat_id, new)
            if new != old:
                changes[stat_id] = new - old
        self.day += 1
        return changes

    def stats(self) -> dict[str, int]:
        return {stat_id: getattr(self, stat_id) for stat_id in STAT_IDS}

    def snapshot(self) -> dict[str, int]:
        return {**self.stats(), "day": self.day}
