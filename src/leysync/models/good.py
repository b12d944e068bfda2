"""GOOD v3 interchange document models.

The field names follow the published GOOD schema (camelCase) so that
``model_dump`` produces the document consumed by build-planning tools.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from leysync.models.enums import SlotKey, StatKey

GOOD_FORMAT = "GOOD"
GOOD_VERSION = 3
GOOD_SOURCE = "HoYoLAB Extension"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class GoodTalent(_Frozen):
    auto: int
    skill: int
    burst: int


class GoodCharacter(_Frozen):
    key: str
    level: int
    constellation: int
    ascension: int
    talent: GoodTalent


class GoodWeapon(_Frozen):
    key: str
    level: int
    ascension: int
    refinement: int
    location: str = ""
    lock: bool = False


class GoodSubstat(_Frozen):
    key: StatKey
    value: float

    @field_serializer("value")
    def _serialize_value(self, value: float) -> int | float:
        # "4780" stays 4780 in JSON, "12.8%" stays 12.8
        return int(value) if float(value).is_integer() else value


class GoodArtifact(_Frozen):
    setKey: str
    slotKey: SlotKey
    level: int
    rarity: int
    mainStatKey: StatKey
    location: str = ""
    lock: bool = False
    substats: tuple[GoodSubstat, ...] = ()


class GoodDocument(_Frozen):
    """A complete GOOD export."""

    format: Literal["GOOD"] = GOOD_FORMAT
    version: Literal[3] = GOOD_VERSION
    source: str = GOOD_SOURCE
    characters: tuple[GoodCharacter, ...] = Field(default_factory=tuple)
    artifacts: tuple[GoodArtifact, ...] = Field(default_factory=tuple)
    weapons: tuple[GoodWeapon, ...] = Field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Return the plain JSON value of the document."""
        return self.model_dump(mode="json")
