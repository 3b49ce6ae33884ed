"""Requirement evaluation — decides whether a card may be drawn.

Fails closed: a malformed node, an unknown resource or an unknown comparison
evaluates to ``False`` so a broken catalog entry just never shows up.
"""

from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING, Callable

from cards.models import Requirement

if TYPE_CHECKING:
    from game.state import ResourceState

logger = logging.getLogger(__name__)

COMPARATORS: dict[str, Callable[[int, int], bool]] = {
    "gt": operator.gt,
    "lt": operator.lt,
    "gte": operator.ge,
    "lte": operator.le,
    "eq": operator.eq,
    ">": operator.gt,
    "<": operator.lt,
    ">=": operator.ge,
    "<=": operator.le,
    "=": operator.eq,
    "==": operator.eq,
}


def evaluate(requirement: Requirement | None, resources: ResourceState) -> bool:
    """Evaluate ``requirement`` against the current resources.

    ``None`` means the card is unconditional.
    """
    if requirement is None:
        return True

    if requirement.is_compound:
        kind = requirement.type.lower()
        if kind == "and":
            return all(evaluate(c, resources) for c in requirement.conditions)
        if kind == "or":
            return any(evaluate(c, resources) for c in requirement.conditions)
        logger.debug("Unknown requirement type %r", requirement.type)
        return False

    if requirement.is_leaf:
        current = resources.value_of(requirement.resource)
        if current is None:
            logger.debug("Requirement on unknown resource %r", requirement.resource)
            return False
        compare = COMPARATORS.get(requirement.comparison.lower())
        if compare is None:
            logger.debug("Unknown comparison %r", requirement.comparison)
            return False
        return compare(current, requirement.value)

    logger.debug("Malformed requirement node: %s", requirement)
    return False
