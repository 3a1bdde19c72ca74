"""The "Commits" info line."""

from __future__ import annotations

from dataclasses import dataclass

from repofetch.gitstats import GitMetrics
from repofetch.numbers import NumberSeparator, format_number


@dataclass
class CommitsInfo:
    number_of_commits: int
    is_shallow: bool
    number_separator: NumberSeparator = NumberSeparator.PLAIN

    @classmethod
    def from_metrics(
        cls, git_metrics: GitMetrics, is_shallow: bool, number_separator: NumberSeparator
    ) -> CommitsInfo:
        return cls(git_metrics.total_number_of_commits, is_shallow, number_separator)

    def value(self) -> str:
        suffix = " (shallow)" if self.is_shallow else ""
        return format_number(self.number_of_commits, self.number_separator) + suffix

    def title(self) -> str:
        return "Commits"