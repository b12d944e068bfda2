"""leysync data models - pure Pydantic, no I/O."""

from leysync.models.enums import SlotKey, StatKey
from leysync.models.export import ExportOptions
from leysync.models.good import (
    GOOD_FORMAT,
    GOOD_SOURCE,
    GOOD_VERSION,
    GoodArtifact,
    GoodCharacter,
    GoodDocument,
    GoodSubstat,
    GoodTalent,
    GoodWeapon,
)
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

__all__ = [
    "GOOD_FORMAT",
    "GOOD_SOURCE",
    "GOOD_VERSION",
    "Artifact",
    "Character",
    "Constellation",
    "ExportOptions",
    "GenshinData",
    "GenshinUser",
    "GoodArtifact",
    "GoodCharacter",
    "GoodDocument",
    "GoodSubstat",
    "GoodTalent",
    "GoodWeapon",
    "Outfit",
    "SlotKey",
    "StatKey",
    "Substat",
    "Talent",
    "Weapon",
]
