"""Internal account model - the normalized form of a HoYoLAB payload."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

INTERNAL_DATA_VERSION = 1


class Substat(BaseModel):
    """An artifact substat as reported by the source."""

    type: int
    value: str | None = None  # Wire string, e.g. "12.8%" or "299"
    times: int = Field(default=0, ge=0)


class Artifact(BaseModel):
    """An equipped artifact (relic)."""

    id: int
    set_id: int | None = None
    set_name: str = ""
    icon_url: str = ""
    position: int
    rarity: int = Field(ge=1, le=5)
    level: int = Field(ge=0, le=20)
    main_stat_type: int
    sub_stats: list[Substat] = Field(default_factory=list)


class Weapon(BaseModel):
    """The weapon equipped by a character."""

    id: int
    name: str
    icon_url: str = ""
    level: int
    ascension: int = Field(default=0, ge=0, le=6)
    refinement: int = Field(default=1, ge=0, le=5)


class Constellation(BaseModel):
    """A node of a character's constellation tree."""

    id: int
    icon_url: str = ""
    position: int = Field(ge=1, le=6)
    is_active: bool = False
    is_enhanced: bool = False
    effect: str = ""


class Outfit(BaseModel):
    """A character costume."""

    id: int
    name: str = ""
    icon_url: str = ""


class Talent(BaseModel):
    """A character skill with its displayed and constellation-free levels."""

    id: int | None = None
    name: str = ""
    icon_url: str = ""
    is_unlocked: bool = False
    is_enhanced: bool = False
    is_alternate_sprint: bool = False
    level: int  # Includes constellation boost
    base_level: int

    @model_validator(mode="after")
    def _base_level_not_above_level(self) -> Talent:
        if self.base_level > self.level:
            msg = f"base_level {self.base_level} exceeds level {self.level}"
            raise ValueError(msg)
        return self


class Character(BaseModel):
    """A character together with everything equipped on it."""

    id: int
    name: str
    icon_url: str = ""
    side_icon_url: str = ""
    image_url: str = ""
    element: str = ""
    friendship: int = Field(default=0, ge=0, le=10)
    level: int = Field(ge=1, le=90)
    ascension: int | None = Field(default=None, ge=0, le=6)  # Derived from level
    active_constellations: int = Field(default=0, ge=0, le=6)
    weapon: Weapon | None = None
    artifacts: list[Artifact] = Field(default_factory=list)
    constellations: list[Constellation] = Field(default_factory=list)
    outfits: list[Outfit] = Field(default_factory=list)
    talents: list[Talent] = Field(default_factory=list)

    @model_validator(mode="after")
    def _ascension_matches_level(self) -> Character:
        from leysync.pipeline.heuristics import calculate_ascension

        expected = calculate_ascension(self.level)
        if self.ascension is None:
            self.ascension = expected
        elif self.ascension != expected:
            msg = f"ascension {self.ascension} does not match level {self.level}"
            raise ValueError(msg)
        return self


class GenshinUser(BaseModel):
    """Account identity carried by the payload envelope, when present."""

    uid: str = ""
    server: str = ""


class GenshinData(BaseModel):
    """A parsed account: the output of the parser, the input of the formatter."""

    version: Literal[1] = INTERNAL_DATA_VERSION
    game: Literal["genshin"] = "genshin"
    user: GenshinUser = Field(default_factory=GenshinUser)
    characters: list[Character] = Field(default_factory=list)
