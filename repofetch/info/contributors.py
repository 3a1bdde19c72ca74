"""The "Contributors" info line."""

from __future__ import annotations

from dataclasses import dataclass

from repofetch.numbers import NumberSeparator, format_number


@dataclass
class ContributorsInfo:
    total_number_of_authors: int
    number_of_authors_to_display: int
    number_separator: NumberSeparator = NumberSeparator.PLAIN

    def value(self) -> str:
        """The author count, shown only when not every author is listed."""
        if self.total_number_of_authors > self.number_of_authors_to_display:
            return format_number(self.total_number_of_authors, self.number_separator)
        return ""

    def title(self) -> str:
        return "Contributors"