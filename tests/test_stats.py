"""Tests for stat code, slot key and substat value translation."""

import math

import pytest

from leysync.errors import InvalidSlotPosition, LeysyncError, UnmappedStatCode
from leysync.models.enums import SlotKey, StatKey
from leysync.pipeline.stats import (
    SLOT_POSITIONS,
    STAT_CODES,
    map_slot_key,
    map_stat_key,
    parse_stat_value,
)


@pytest.mark.parametrize(
    ("code", "key"),
    [
        (2000, StatKey.HP),
        (2001, StatKey.ATK),
        (2002, StatKey.DEF),
        (2, StatKey.HP),
        (3, StatKey.HP_PERCENT),
        (5, StatKey.ATK),
        (6, StatKey.ATK_PERCENT),
        (8, StatKey.DEF),
        (9, StatKey.DEF_PERCENT),
        (20, StatKey.CRIT_RATE),
        (22, StatKey.CRIT_DMG),
        (23, StatKey.ENERGY_RECHARGE),
        (26, StatKey.HEALING_BONUS),
        (28, StatKey.ELEMENTAL_MASTERY),
        (30, StatKey.PHYSICAL_DMG),
        (40, StatKey.PYRO_DMG),
        (41, StatKey.ELECTRO_DMG),
        (42, StatKey.HYDRO_DMG),
        (43, StatKey.DENDRO_DMG),
        (44, StatKey.ANEMO_DMG),
        (45, StatKey.GEO_DMG),
        (46, StatKey.CRYO_DMG),
    ],
)
def test_map_stat_key(code: int, key: StatKey) -> None:
    assert map_stat_key(code) is key


def test_base_and_flat_codes_share_a_key() -> None:
    assert map_stat_key(1) == map_stat_key(2) == map_stat_key(2000) == "hp"
    assert map_stat_key(4) == map_stat_key(5) == map_stat_key(2001) == "atk"
    assert map_stat_key(7) == map_stat_key(8) == map_stat_key(2002) == "def"


def test_every_stat_key_is_reachable() -> None:
    assert set(STAT_CODES.values()) == set(StatKey)


@pytest.mark.parametrize("code", [0, 10, 21, 47, 2003, -1, None, "20"])
def test_unmapped_stat_code(code: object) -> None:
    with pytest.raises(UnmappedStatCode) as excinfo:
        map_stat_key(code)  # type: ignore[arg-type]
    assert excinfo.value.code == code
    assert isinstance(excinfo.value, LeysyncError)


def test_stat_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        STAT_CODES[99] = StatKey.HP  # type: ignore[index]


class TestSlotKey:
    def test_bijection(self) -> None:
        keys = [map_slot_key(pos) for pos in range(1, 6)]
        assert keys == ["flower", "plume", "sands", "goblet", "circlet"]
        assert set(keys) == set(SlotKey)
        assert len(set(SLOT_POSITIONS.values())) == len(SLOT_POSITIONS)

    @pytest.mark.parametrize("pos", [0, 6, -1, 3.5, None, "1", True])
    def test_invalid_position(self, pos: object) -> None:
        with pytest.raises(InvalidSlotPosition):
            map_slot_key(pos)  # type: ignore[arg-type]


class TestParseStatValue:
    def test_percentage_keeps_percent_scale(self) -> None:
        assert parse_stat_value("12.8%") == 12.8

    def test_flat_value(self) -> None:
        assert parse_stat_value("4780") == 4780

    @pytest.mark.parametrize("empty", [None, ""])
    def test_missing_is_zero(self, empty: str | None) -> None:
        assert parse_stat_value(empty) == 0

    def test_numeric_input_passes_through(self) -> None:
        assert parse_stat_value(23) == 23.0

    @pytest.mark.parametrize("bad", ["abc", "%", "12.8%%", "inf", "1.2.3"])
    def test_malformed_is_nan(self, bad: str) -> None:
        assert math.isnan(parse_stat_value(bad))
