"""Validation of exported GOOD documents against the bundled JSON schema."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema

_SCHEMA_PATH = Path(__file__).parent / "schemas" / "good.schema.json"


@lru_cache(maxsize=1)
def _load_schema() -> dict[str, Any]:
    return json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))


def validate_good_json(data: dict[str, object]) -> None:
    """Validate a GOOD document dict against good.schema.json.

    Parameters
    ----------
    data:
        The dumped document, e.g. ``GoodDocument.to_dict()``.

    Raises
    ------
    jsonschema.ValidationError
        If the data does not conform to the schema.
    """
    jsonschema.validate(data, _load_schema())
