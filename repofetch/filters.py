"""Value filters used when generating language data from templates."""

from __future__ import annotations

import re

_COLOR_INDEX = re.compile(r"\{\d+\}")
_HEX_DIGITS = re.compile(r"\+?[0-9A-Fa-f]+")


def strip_color_tokens(value: str) -> str:
    """Remove every ``{n}`` colour marker from a string."""
    if not isinstance(value, str):
        raise TypeError("expected string")
    return _COLOR_INDEX.sub("", value)


def hex_to_rgb(value: str) -> dict[str, int]:
    """Convert ``#rrggbb`` into a mapping with the keys ``r``, ``g`` and ``b``."""
    if not isinstance(value, str):
        raise TypeError("expected string")
    if not value.startswith("#"):
        raise ValueError("expected hex string starting with `#`")
    digits = value[1:]
    if len(digits.encode("utf-8")) != 6:
        raise ValueError("expected a 6 digit hex string")
    if not _HEX_DIGITS.fullmatch(digits):
        raise ValueError("expected a valid hex string")
    channels = int(digits, 16)
    return {
        "r": (channels >> 16) & 0xFF,
        "g": (channels >> 8) & 0xFF,
        "b": channels & 0xFF,
    }