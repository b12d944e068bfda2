"""Parse the HoYoLAB character detail response into the internal model."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from leysync.errors import MissingFieldError
from leysync.models.internal import (
    Artifact,
    Character,
    Constellation,
    GenshinData,
    GenshinUser,
    Outfit,
    Substat,
    Talent,
    Weapon,
)
from leysync.pipeline.heuristics import (
    is_alternate_sprint,
    talent_base_level,
)

logger = logging.getLogger(__name__)

RawRecord = Mapping[str, Any]
TalentBoosts = Mapping[int, Mapping[int, int]]


def is_valid_genshin_data(raw: Any) -> bool:
    """Return True if *raw* looks like a successful character detail response."""
    return (
        isinstance(raw, Mapping)
        and raw.get("retcode") == 0
        and raw.get("message") == "OK"
        and isinstance(raw.get("data"), Mapping)
    )


def parse_genshin_data(
    raw: RawRecord,
    *,
    talent_boosts: TalentBoosts | None = None,
) -> GenshinData:
    """Convert a raw character detail response into :class:`GenshinData`.

    Parameters
    ----------
    raw:
        The decoded JSON response; characters are read from ``data.list``.
    talent_boosts:
        Optional ``{character id: {constellation position: skill id}}``
        table. Characters listed here get ID-based talent correction
        instead of the effect-text search.

    Raises
    ------
    MissingFieldError
        If the envelope or any character lacks a required field.
    """
    characters = [
        parse_character(entry, talent_boosts=talent_boosts)
        for entry in character_entries(raw)
    ]
    logger.info("Parsed %d characters", len(characters))
    return GenshinData(user=parse_user(raw), characters=characters)


def character_entries(raw: RawRecord) -> list[RawRecord]:
    """Return the raw ``data.list`` entries of a response."""
    data = _require(raw, "data", "response")
    return list(_require(data, "list", "data"))


def parse_user(raw: RawRecord) -> GenshinUser:
    data = _require(raw, "data", "response")
    return GenshinUser(
        uid=str(data.get("uid") or ""),
        server=str(data.get("server") or ""),
    )


def parse_character(
    raw: RawRecord,
    *,
    talent_boosts: TalentBoosts | None = None,
) -> Character:
    """Convert a single ``data.list`` entry into a :class:`Character`."""
    base = _require(raw, "base", "character")
    character_id = _require(base, "id", "character base")
    name = _require(base, "name", "character base")
    level = _require(base, "level", f"character '{name}'")
    context = f"character '{name}'"

    constellations = [parse_constellation(c, context) for c in raw.get("constellations") or []]
    boosts = talent_boosts.get(character_id) if talent_boosts else None
    weapon = raw.get("weapon")

    return Character(
        id=character_id,
        name=name,
        icon_url=base.get("icon") or "",
        side_icon_url=base.get("side_icon") or "",
        image_url=base.get("image") or "",
        element=base.get("element") or "",
        friendship=base.get("fetter") or 0,
        level=level,
        active_constellations=base.get("actived_constellation_num") or 0,
        weapon=parse_weapon(weapon, context) if weapon else None,
        artifacts=[parse_artifact(r, context) for r in raw.get("relics") or []],
        constellations=constellations,
        outfits=[parse_outfit(o) for o in raw.get("costumes") or []],
        talents=[
            parse_talent(s, constellations, context, boosts=boosts)
            for s in raw.get("skills") or []
        ],
    )


def parse_weapon(raw: RawRecord, context: str = "") -> Weapon:
    context = f"weapon of {context}" if context else "weapon"
    return Weapon(
        id=_require(raw, "id", context),
        name=_require(raw, "name", context),
        icon_url=raw.get("icon") or "",
        level=_require(raw, "level", context),
        ascension=raw.get("promote_level") or 0,
        refinement=raw.get("affix_level") or 0,
    )


def parse_artifact(raw: RawRecord, context: str = "") -> Artifact:
    context = f"relic of {context}" if context else "relic"
    artifact_set = _require(raw, "set", context)
    main_property = _require(raw, "main_property", context)
    return Artifact(
        id=_require(raw, "id", context),
        set_id=artifact_set.get("id"),
        set_name=artifact_set.get("name") or "",
        icon_url=raw.get("icon") or "",
        position=_require(raw, "pos", context),
        rarity=_require(raw, "rarity", context),
        level=_require(raw, "level", context),
        main_stat_type=_require(main_property, "property_type", f"main_property of {context}"),
        sub_stats=[
            Substat(
                type=_require(sub, "property_type", f"sub_property_list of {context}"),
                value=None if sub.get("value") is None else str(sub["value"]),
                times=sub.get("times") or 0,
            )
            for sub in raw.get("sub_property_list") or []
        ],
    )


def parse_constellation(raw: RawRecord, context: str = "") -> Constellation:
    context = f"constellation of {context}" if context else "constellation"
    return Constellation(
        id=_require(raw, "id", context),
        icon_url=raw.get("icon") or "",
        position=_require(raw, "pos", context),
        is_active=bool(raw.get("is_actived")),
        is_enhanced=bool(raw.get("is_enhanced")),
        effect=raw.get("effect") or "",
    )


def parse_outfit(raw: RawRecord) -> Outfit:
    return Outfit(
        id=_require(raw, "id", "costume"),
        name=raw.get("name") or "",
        icon_url=raw.get("icon") or "",
    )


def parse_talent(
    raw: RawRecord,
    constellations: list[Constellation],
    context: str = "",
    *,
    boosts: Mapping[int, int] | None = None,
) -> Talent:
    """Convert a raw skill, removing any constellation level bonus."""
    context = f"skill of {context}" if context else "skill"
    name = raw.get("name") or ""
    skill_id = raw.get("skill_id")
    level = _require(raw, "level", context)
    return Talent(
        id=skill_id,
        name=name,
        icon_url=raw.get("icon") or "",
        is_unlocked=bool(raw.get("is_unlock")),
        is_enhanced=bool(raw.get("is_enhanced")),
        is_alternate_sprint=is_alternate_sprint(raw),
        level=level,
        base_level=talent_base_level(
            name, level, constellations, talent_id=skill_id, boosts=boosts,
        ),
    )


def _require(record: RawRecord, field: str, context: str) -> Any:
    """Return ``record[field]`` or raise :class:`MissingFieldError`."""
    if not isinstance(record, Mapping):
        raise MissingFieldError(field, f"{context} (got {type(record).__name__})")
    value = record.get(field)
    if value is None:
        raise MissingFieldError(field, context)
    return value
