"""Approximations for values the HoYoLAB payload does not report directly."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from leysync.models.internal import Constellation

logger = logging.getLogger(__name__)

# (max level, ascension) pairs; anything above the last bound is ascension 6.
ASCENSION_BREAKPOINTS: tuple[tuple[int, int], ...] = (
    (20, 0),
    (40, 1),
    (50, 2),
    (60, 3),
    (70, 4),
    (80, 5),
)
MAX_ASCENSION = 6

# Constellations that can add talent levels sit at these tree positions.
BOOSTING_POSITIONS = frozenset({3, 5})
TALENT_LEVEL_BONUS = 3

ALTERNATE_SPRINT_MARKER = "Alternate Sprint"


def calculate_ascension(level: int) -> int:
    """Approximate the ascension phase from a level.

    A level sitting on a breakpoint (e.g. 80) maps to the lower phase even
    if the character has already ascended; the payload has no way to tell
    the two apart.
    """
    for max_level, ascension in ASCENSION_BREAKPOINTS:
        if level <= max_level:
            return ascension
    return MAX_ASCENSION


def is_level_boosted(
    talent_name: str,
    constellations: Iterable[Constellation],
) -> bool:
    """Return True if an active C3/C5 constellation mentions *talent_name*."""
    if not talent_name:
        return False
    return any(
        c.is_active and c.position in BOOSTING_POSITIONS and talent_name in c.effect
        for c in constellations
    )


def is_boosted_by_table(
    talent_id: int | None,
    constellations: Iterable[Constellation],
    boosts: Mapping[int, int],
) -> bool:
    """Return True if an active constellation boosts *talent_id* per *boosts*.

    *boosts* maps a constellation position to the skill id it raises.
    """
    if talent_id is None:
        return False
    return any(
        c.is_active and boosts.get(c.position) == talent_id
        for c in constellations
    )


def talent_base_level(
    talent_name: str,
    level: int,
    constellations: Iterable[Constellation],
    *,
    talent_id: int | None = None,
    boosts: Mapping[int, int] | None = None,
) -> int:
    """Remove the constellation bonus from a displayed talent level.

    When *boosts* is given the lookup is by skill id; otherwise the talent
    name is searched for in the effect text of active C3/C5 constellations.
    """
    if boosts is not None:
        boosted = is_boosted_by_table(talent_id, constellations, boosts)
    else:
        boosted = is_level_boosted(talent_name, constellations)
    if not boosted:
        return level
    logger.debug("Talent '%s' boosted by constellation, level %d -> %d",
                 talent_name, level, level - TALENT_LEVEL_BONUS)
    return level - TALENT_LEVEL_BONUS


def is_alternate_sprint(raw_skill: Mapping[str, Any]) -> bool:
    """Return True if a raw skill record is an alternate sprint.

    An explicit ``is_alternate_sprint`` flag wins. Without one, fall back to
    looking for the marker text in the skill description.
    """
    flag = raw_skill.get("is_alternate_sprint")
    if flag is not None:
        return bool(flag)
    desc = raw_skill.get("desc") or ""
    return ALTERNATE_SPRINT_MARKER in desc
