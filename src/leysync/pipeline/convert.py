"""One-call conversion from a raw HoYoLAB response to a GOOD document."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from leysync.errors import LeysyncError
from leysync.models.export import ExportOptions
from leysync.models.good import GoodDocument
from leysync.models.internal import Artifact, Character, GenshinData
from leysync.pipeline.formatter import convert_artifact, convert_character, format_good
from leysync.pipeline.parser import (
    RawRecord,
    TalentBoosts,
    character_entries,
    parse_character,
    parse_genshin_data,
    parse_user,
)

logger = logging.getLogger(__name__)


def convert_to_good(
    raw: RawRecord,
    options: ExportOptions | None = None,
    *,
    skip_invalid: bool = False,
    talent_boosts: TalentBoosts | None = None,
) -> GoodDocument:
    """Parse *raw* and format it as GOOD.

    By default any error aborts the whole conversion. With *skip_invalid*
    a character that cannot be parsed or converted, or an artifact that
    cannot be converted, is dropped with a warning and the rest of the
    account is still exported.
    """
    if not skip_invalid:
        return format_good(parse_genshin_data(raw, talent_boosts=talent_boosts), options)

    characters: list[Character] = []
    for index, entry in enumerate(character_entries(raw)):
        try:
            char = parse_character(entry, talent_boosts=talent_boosts)
            convert_character(char)
        except (LeysyncError, ValidationError) as exc:
            logger.warning("Skipping character #%d: %s", index, exc)
            continue
        artifacts = [art for art in char.artifacts if _is_convertible(char, art)]
        characters.append(char.model_copy(update={"artifacts": artifacts}))

    data = GenshinData(user=parse_user(raw), characters=characters)
    return format_good(data, options)


def _is_convertible(char: Character, artifact: Artifact) -> bool:
    try:
        convert_artifact(artifact, "")
    except LeysyncError as exc:
        logger.warning("Skipping artifact %d of '%s': %s", artifact.id, char.name, exc)
        return False
    return True
