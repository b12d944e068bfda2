"""Translation tables from HoYoLAB numeric codes to GOOD keys."""

from __future__ import annotations

import math
from types import MappingProxyType

from leysync.errors import InvalidSlotPosition, UnmappedStatCode
from leysync.models.enums import SlotKey, StatKey

# Several codes share a key: base and flat values are both the flat stat.
STAT_CODES: MappingProxyType[int, StatKey] = MappingProxyType({
    # Flat stats (character panel codes)
    2000: StatKey.HP,
    2001: StatKey.ATK,
    2002: StatKey.DEF,
    # Artifact property ids
    1: StatKey.HP,
    2: StatKey.HP,
    3: StatKey.HP_PERCENT,
    4: StatKey.ATK,
    5: StatKey.ATK,
    6: StatKey.ATK_PERCENT,
    7: StatKey.DEF,
    8: StatKey.DEF,
    9: StatKey.DEF_PERCENT,
    20: StatKey.CRIT_RATE,
    22: StatKey.CRIT_DMG,
    23: StatKey.ENERGY_RECHARGE,
    26: StatKey.HEALING_BONUS,
    28: StatKey.ELEMENTAL_MASTERY,
    # DMG bonuses
    30: StatKey.PHYSICAL_DMG,
    40: StatKey.PYRO_DMG,
    41: StatKey.ELECTRO_DMG,
    42: StatKey.HYDRO_DMG,
    43: StatKey.DENDRO_DMG,
    44: StatKey.ANEMO_DMG,
    45: StatKey.GEO_DMG,
    46: StatKey.CRYO_DMG,
})

SLOT_POSITIONS: MappingProxyType[int, SlotKey] = MappingProxyType({
    1: SlotKey.FLOWER,
    2: SlotKey.PLUME,
    3: SlotKey.SANDS,
    4: SlotKey.GOBLET,
    5: SlotKey.CIRCLET,
})


def map_stat_key(code: int) -> StatKey:
    """Return the GOOD stat key for a HoYoLAB property code.

    Raises
    ------
    UnmappedStatCode
        If the code is not part of the table.
    """
    try:
        return STAT_CODES[code]
    except (KeyError, TypeError):
        raise UnmappedStatCode(code) from None


def map_slot_key(position: int) -> SlotKey:
    """Return the GOOD slot key for an artifact position (1-5)."""
    # bool is an int subclass; True must not pass as position 1.
    if isinstance(position, bool):
        raise InvalidSlotPosition(position)
    try:
        return SLOT_POSITIONS[position]
    except (KeyError, TypeError):
        raise InvalidSlotPosition(position) from None


def parse_stat_value(value: str | float | None) -> float:
    """Parse a substat wire value such as ``"12.8%"`` or ``"4780"``.

    Percentages keep their percent-scale magnitude. Missing or empty
    values give ``0.0``; anything unparseable gives ``nan``.
    """
    if value is None or value == "":
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    text = value.strip()
    if text.endswith("%"):
        text = text[:-1]
    try:
        number = float(text)
    except ValueError:
        return math.nan
    return number if math.isfinite(number) else math.nan
