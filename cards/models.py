"""Card data models — the core unit of interaction in the game.

Cards come from the deck catalog (``assets/deck.json``) and use the catalog's
camelCase keys (``yesText``, ``maxUses``, ``yesFollowup`` ...) through a pydantic
alias generator, so both ``Card(yes_text=...)`` and ``Card.model_validate({...})``
work.

There are two card shapes, distinguished by ``is_info_only``:

``choice`` — presented with a yes and a no option, each carrying its own
``Effects`` and optional ``Followup``.

``info`` — read-only card.  Any dismissal applies ``effects`` and schedules
``followup``.

All models are frozen.  Runtime use counts are tracked by ``cards.pool.CardPool``
keyed by card id, never on the card itself.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


# ── Requirement ─────────────────────────────────────────────────────────────


class Requirement(BaseModel):
    """A node of a requirement tree.

    Leaf:     ``{"resource": "boss", "comparison": "gte", "value": 60}``
    Compound: ``{"type": "and", "conditions": [...]}``
    """

    model_config = _MODEL_CONFIG

    type: str | None = None
    conditions: tuple[Requirement, ...] = ()
    resource: str | None = None
    comparison: str | None = None
    value: int | None = None

    @property
    def is_compound(self) -> bool:
        return bool(self.type) and bool(self.conditions) and not self.resource

    @property
    def is_leaf(self) -> bool:
        return (
            bool(self.resource)
            and bool(self.comparison)
            and self.value is not None
            and not self.type
            and not self.conditions
        )


# ── Effects ─────────────────────────────────────────────────────────────────


class Effects(BaseModel):
    """Raw stat deltas as written in the catalog (scaling happens on apply)."""

    model_config = _MODEL_CONFIG

    motivation: int = 0
    performance: int = 0
    colleagues: int = 0
    boss: int = 0


# ── Card ────────────────────────────────────────────────────────────────────

# catalog key -> plural spelling accepted for the same branch
_FOLLOWUP_KEYS = {
    "yesFollowup": "yesFollowups",
    "noFollowup": "noFollowups",
    "followup": "followups",
}


class Card(BaseModel):
    model_config = _MODEL_CONFIG

    id: str = ""
    text: str = ""
    yes_text: str = "Yes"
    no_text: str = "No"
    yes_effects: Effects = Field(default_factory=Effects)
    no_effects: Effects = Field(default_factory=Effects)
    is_info_only: bool = False
    effects: Effects = Field(default_factory=Effects)
    requirements: Requirement | None = None
    max_uses: int = 1
    parent_card_id: str = ""

    yes_followup: Followup | None = None
    no_followup: Followup | None = None
    followup: Followup | None = None

    # Only meaningful when this card is itself a followup
    delay: int | None = None
    show_on_day: int | None = None
    probability: float = 0.0

    @model_validator(mode="before")
    @classmethod
    def _normalize_followups(cls, data: Any) -> Any:
        """Fold plural followup keys into the singular ones and name inline cards.

        Inline followup cards without an id get ``<parent>:<branch>:<index>`` so
        the pool can track their use count.
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        parent_id = data.get("id") or ""
        for key, plural in _FOLLOWUP_KEYS.items():
            snake = _snake(key)
            if key not in data and snake not in data and plural in data:
                data[key] = data.pop(plural)
            raw_key = key if key in data else snake
            raw = data.get(raw_key)
            if raw is None or isinstance(raw, Followup):
                continue
            if isinstance(raw, dict):
                options = raw["options"] if "options" in raw else [raw]
            else:
                options = raw
            if not isinstance(options, (list, tuple)):
                continue
            named = []
            for index, option in enumerate(options):
                if isinstance(option, dict):
                    option = dict(option)
                    if not option.get("id"):
                        option["id"] = f"{parent_id}:{snake}:{index}"
                    if not option.get("parentCardId") and not option.get("parent_card_id"):
                        option["parentCardId"] = parent_id
                named.append(option)
            data[raw_key] = {"options": named}
        return data

    @field_validator("max_uses")
    @classmethod
    def _non_negative(cls, v: int) -> int:
        return max(0, v)

    def effects_for(self, accepted: bool) -> Effects:
        """Effect set applied when the card is resolved."""
        if self.is_info_only:
            return self.effects
        return self.yes_effects if accepted else self.no_effects

    def followup_for(self, accepted: bool) -> Followup | None:
        if self.is_info_only:
            return self.followup
        return self.yes_followup if accepted else self.no_followup


# ── Followups ───────────────────────────────────────────────────────────────


class Followup(BaseModel):
    """Candidate cards for one branch; exactly one is scheduled when taken."""

    model_config = _MODEL_CONFIG

    options: tuple[Card, ...] = ()


class FollowupCardItem(BaseModel):
    """A card deferred until ``show_on_day``."""

    model_config = ConfigDict(frozen=True)

    card: Card
    show_on_day: int
    parent_card_id: str = ""


def _snake(camel: str) -> str:
    return "".join(f"_{c.lower()}" if c.isupper() else c for c in camel)


# Rebuild for forward references
Requirement.model_rebuild()
Card.model_rebuild()
Followup.model_rebuild()
FollowupCardItem.model_rebuild()
