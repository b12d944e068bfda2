"""leysync conversion pipeline - raw payload -> internal model -> GOOD."""

from leysync.pipeline.convert import convert_to_good
from leysync.pipeline.formatter import (
    convert_artifact,
    convert_character,
    convert_weapon,
    format_good,
)
from leysync.pipeline.heuristics import (
    calculate_ascension,
    is_alternate_sprint,
    talent_base_level,
)
from leysync.pipeline.keys import to_good_key
from leysync.pipeline.parser import (
    is_valid_genshin_data,
    parse_character,
    parse_genshin_data,
)
from leysync.pipeline.stats import map_slot_key, map_stat_key, parse_stat_value

__all__ = [
    "calculate_ascension",
    "convert_artifact",
    "convert_character",
    "convert_to_good",
    "convert_weapon",
    "format_good",
    "is_alternate_sprint",
    "is_valid_genshin_data",
    "map_slot_key",
    "map_stat_key",
    "parse_character",
    "parse_genshin_data",
    "parse_stat_value",
    "talent_base_level",
    "to_good_key",
]
