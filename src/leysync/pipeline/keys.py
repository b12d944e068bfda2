"""Display name to GOOD key canonicalization."""

from __future__ import annotations

import re

_NON_KEY_CHARS = re.compile(r"[^a-zA-Z0-9 ]")


def to_good_key(name: str | None) -> str:
    """Convert a display name into a GOOD key.

    Symbols and non-Latin letters are dropped and the first character of
    every word is upper-cased. The rest of each word is left untouched, so
    this is not ``str.title``: ``"Kamisato Ayaka"`` gives ``"KamisatoAyaka"``
    and ``"aThousand floating dreams"`` gives ``"AThousandFloatingDreams"``.
    """
    if not name:
        return ""
    cleaned = _NON_KEY_CHARS.sub("", name)
    return "".join(word[:1].upper() + word[1:] for word in cleaned.split(" "))
