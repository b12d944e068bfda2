"""Export options model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExportOptions(BaseModel):
    """Filters and key tweaks applied when formatting a GOOD document.

    Accepts both the Python field names and the camelCase names used by
    the browser extension (``removeManekin`` etc.).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    remove_manekin: bool = Field(default=False, alias="removeManekin")
    add_traveler_element_to_key: bool = Field(default=False, alias="addTravelerElementToKey")
    min_character_level: int = Field(default=0, ge=0, alias="minCharacterLevel")
