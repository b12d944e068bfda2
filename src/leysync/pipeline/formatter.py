"""Project the internal model into a GOOD v3 document."""

from __future__ import annotations

import logging
import math

from leysync.errors import MalformedNumericString, MissingFieldError
from leysync.models.export import ExportOptions
from leysync.models.good import (
    GoodArtifact,
    GoodCharacter,
    GoodDocument,
    GoodSubstat,
    GoodTalent,
    GoodWeapon,
)
from leysync.models.internal import Artifact, Character, GenshinData, Substat, Weapon
from leysync.pipeline.keys import to_good_key
from leysync.pipeline.stats import map_slot_key, map_stat_key, parse_stat_value

logger = logging.getLogger(__name__)

# Placeholder avatars listed among the account characters.
MANEKIN_KEYS = frozenset({"Manekin", "Manekina"})
TRAVELER_KEY = "Traveler"


def format_good(data: GenshinData, options: ExportOptions | None = None) -> GoodDocument:
    """Build a GOOD document from parsed account data.

    Filters from *options* are applied first; a filtered-out character
    contributes no character, weapon or artifact record.
    """
    if options is None:
        options = ExportOptions()

    characters: list[GoodCharacter] = []
    weapons: list[GoodWeapon] = []
    artifacts: list[GoodArtifact] = []

    for char in data.characters:
        if not is_exported(char, options):
            continue
        location = to_good_key(char.name)
        characters.append(
            convert_character(
                char, add_traveler_element_to_key=options.add_traveler_element_to_key,
            )
        )
        weapon = convert_weapon(char.weapon, location)
        if weapon is not None:
            weapons.append(weapon)
        artifacts.extend(convert_artifact(art, location) for art in char.artifacts)

    logger.info(
        "Formatted GOOD document: %d characters, %d weapons, %d artifacts",
        len(characters), len(weapons), len(artifacts),
    )
    return GoodDocument(characters=characters, artifacts=artifacts, weapons=weapons)


def is_exported(char: Character, options: ExportOptions) -> bool:
    """Return False if *options* filter *char* out of the export."""
    if options.remove_manekin and to_good_key(char.name) in MANEKIN_KEYS:
        logger.debug("Skipping placeholder character '%s'", char.name)
        return False
    if options.min_character_level > 0 and char.level < options.min_character_level:
        logger.debug(
            "Skipping '%s': level %d below %d",
            char.name, char.level, options.min_character_level,
        )
        return False
    return True


def convert_character(
    char: Character,
    *,
    add_traveler_element_to_key: bool = False,
) -> GoodCharacter:
    """Convert a character; talents are read positionally as auto/skill/burst."""
    key = to_good_key(char.name)
    if add_traveler_element_to_key and key == TRAVELER_KEY:
        key += char.element

    talents = [t for t in char.talents if not t.is_alternate_sprint]
    if len(talents) < 3:
        msg = f"character '{char.name}' (expected 3 combat talents, got {len(talents)})"
        raise MissingFieldError("talents", msg)
    auto, skill, burst = talents[:3]

    return GoodCharacter(
        key=key,
        level=char.level,
        constellation=char.active_constellations,
        ascension=char.ascension,
        talent=GoodTalent(
            auto=auto.base_level,
            skill=skill.base_level,
            burst=burst.base_level,
        ),
    )


def convert_weapon(weapon: Weapon | None, location: str) -> GoodWeapon | None:
    if weapon is None:
        return None
    return GoodWeapon(
        key=to_good_key(weapon.name),
        level=weapon.level,
        ascension=weapon.ascension,
        refinement=weapon.refinement,
        location=location,
        # HoYoLAB does not expose lock state
        lock=False,
    )


def convert_artifact(artifact: Artifact, location: str) -> GoodArtifact:
    """Convert an artifact.

    Raises
    ------
    InvalidSlotPosition, UnmappedStatCode, MalformedNumericString
        If the artifact cannot be represented in GOOD.
    """
    return GoodArtifact(
        setKey=to_good_key(artifact.set_name),
        slotKey=map_slot_key(artifact.position),
        level=artifact.level,
        rarity=artifact.rarity,
        mainStatKey=map_stat_key(artifact.main_stat_type),
        location=location,
        lock=False,
        substats=[convert_substat(sub) for sub in artifact.sub_stats],
    )


def convert_substat(sub: Substat) -> GoodSubstat:
    value = parse_stat_value(sub.value)
    if math.isnan(value):
        raise MalformedNumericString(sub.value)
    return GoodSubstat(key=map_stat_key(sub.type), value=value)
