"""Thousands separators for displayed numbers."""

from __future__ import annotations

from enum import Enum

_SEPARATORS = {
    "plain": "",
    "comma": ",",
    "space": "\u202f",
    "underscore": "_",
}


class NumberSeparator(Enum):
    """The character placed between groups of three digits."""

    PLAIN = "plain"
    COMMA = "comma"
    SPACE = "space"
    UNDERSCORE = "underscore"

    def separator(self) -> str:
        """The text inserted between digit groups."""
        return _SEPARATORS[self.value]


def format_number(number: int, separator: NumberSeparator) -> str:
    """Format an integer with standard three-digit grouping."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {number!r}")
    return f"{number:,}".replace(",", NumberSeparator(separator).separator())