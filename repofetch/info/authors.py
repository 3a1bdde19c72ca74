"""The "Authors" info line."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field

from repofetch.gitstats import Sig
from repofetch.numbers import NumberSeparator, format_number


def _contribution(nbr_of_commits: int, total_nbr_of_commits: int) -> int:
    """Share of the commits in percent, rounded half away from zero."""
    if total_nbr_of_commits == 0:
        return 0
    return math.floor(nbr_of_commits * 100 / total_nbr_of_commits + 0.5)


@dataclass
class Author:
    name: str
    email: str | None
    nbr_of_commits: int
    contribution: int
    number_separator: NumberSeparator = NumberSeparator.PLAIN

    @classmethod
    def create(
        cls,
        name: str,
        email: str | None,
        nbr_of_commits: int,
        total_nbr_of_commits: int,
        number_separator: NumberSeparator,
    ) -> Author:
        """An author whose contribution is derived from the commit totals."""
        return cls(
            name=name,
            email=email,
            nbr_of_commits=nbr_of_commits,
            contribution=_contribution(nbr_of_commits, total_nbr_of_commits),
            number_separator=number_separator,
        )

    def __str__(self) -> str:
        commits = format_number(self.nbr_of_commits, self.number_separator)
        if self.email is not None:
            return f"{self.contribution}% {self.name} <{self.email}> {commits}"
        return f"{self.contribution}% {self.name} {commits}"


def compute_authors(
    number_of_commits_by_signature: Mapping[Sig, int],
    total_number_of_commits: int,
    number_of_authors_to_display: int,
    show_email: bool,
    number_separator: NumberSeparator,
) -> list[Author]:
    """The top authors by commit count, ties broken by name."""
    ranked = sorted(
        number_of_commits_by_signature.items(),
        key=lambda item: (-item[1], item[0].name),
    )
    return [
        Author.create(
            sig.name,
            sig.email if show_email else None,
            count,
            total_number_of_commits,
            number_separator,
        )
        for sig, count in ranked[:number_of_authors_to_display]
    ]


def _count_digits(number: int) -> int:
    return len(str(number)) if number > 0 else 1


def digit_difference(num1: int, num2: int) -> int:
    """Absolute difference in the number of decimal digits of two numbers."""
    return abs(_count_digits(num1) - _count_digits(num2))


@dataclass
class AuthorsInfo:
    authors: list[Author] = field(default_factory=list)

    @classmethod
    def from_counts(
        cls,
        number_of_commits_by_signature: Mapping[Sig, int],
        total_number_of_commits: int,
        number_of_authors_to_display: int,
        show_email: bool,
        number_separator: NumberSeparator,
    ) -> AuthorsInfo:
        return cls(
            compute_authors(
                number_of_commits_by_signature,
                total_number_of_commits,
                number_of_authors_to_display,
                show_email,
                number_separator,
            )
        )

    def top_contribution(self) -> int:
        """Contribution of the first listed author, 0 when there is none."""
        return self.authors[0].contribution if self.authors else 0

    def value(self) -> str:
        """One author per line, percentages aligned under the first."""
        pad = len(self.title()) + 2
        top = self.top_contribution()
        lines = [str(author) for author in self.authors[:1]]
        lines.extend(
            " " * (pad + digit_difference(top, author.contribution)) + str(author)
            for author in self.authors[1:]
        )
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.value()

    def title(self) -> str:
        return "Authors" if len(self.authors) > 1 else "Author"