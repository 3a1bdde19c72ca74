"""Commit statistics gathered while walking the history of a repository."""

from __future__ import annotations

import re
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field

DEFAULT_BOT_PATTERN = r"(?:-|\s)[Bb]ot$|\[[Bb]ot\]"


@dataclass(frozen=True, order=True)
class Sig:
    """An author identity: name and e-mail address."""

    name: str
    email: str


@dataclass
class GitMetrics:
    """Aggregated numbers about the commits of a repository.

    Times are seconds since the Unix epoch; 0 when no commit was traversed.
    """

    number_of_commits_by_signature: dict[Sig, int] = field(default_factory=dict)
    number_of_commits_by_file_path: dict[str, int] = field(default_factory=dict)
    total_number_of_authors: int = 0
    total_number_of_commits: int = 0
    churn_pool_size: int = 0
    time_of_most_recent_commit: int = 0
    time_of_first_commit: int = 0

    @classmethod
    def from_counts(
        cls,
        number_of_commits_by_signature: Mapping[Sig, int],
        number_of_commits_by_file_path: Mapping[str, int],
        churn_pool_size: int,
        time_of_first_commit: int | None,
        time_of_most_recent_commit: int | None,
    ) -> GitMetrics:
        """Derive totals from per-author counts; both times fall back to 0 if either is missing."""
        by_signature = dict(number_of_commits_by_signature)
        if time_of_first_commit is None or time_of_most_recent_commit is None:
            time_of_first_commit = time_of_most_recent_commit = 0
        return cls(
            number_of_commits_by_signature=by_signature,
            number_of_commits_by_file_path=dict(number_of_commits_by_file_path),
            total_number_of_authors=len(by_signature),
            total_number_of_commits=sum(by_signature.values()),
            churn_pool_size=churn_pool_size,
            time_of_most_recent_commit=time_of_most_recent_commit,
            time_of_first_commit=time_of_first_commit,
        )


def get_no_bots_regex(no_bots: bool | str | re.Pattern[str] | None) -> re.Pattern[str] | None:
    """The pattern that marks bot authors.

    ``None`` or ``False`` disables bot filtering, ``True`` selects the default
    pattern, and a string or compiled pattern is used as given.
    """
    if no_bots is None or no_bots is False:
        return None
    if no_bots is True:
        return re.compile(DEFAULT_BOT_PATTERN)
    if isinstance(no_bots, re.Pattern):
        return no_bots
    if isinstance(no_bots, str):
        return re.compile(no_bots)
    raise TypeError(f"invalid bot pattern: {no_bots!r}")


def is_bot(author_name: str | bytes, bot_regex: re.Pattern[str] | None) -> bool:
    """True when a pattern is given and it matches somewhere in the name."""
    if bot_regex is None:
        return False
    if isinstance(author_name, bytes):
        author_name = author_name.decode("utf-8", errors="replace")
    return bot_regex.search(author_name) is not None


def should_break(
    has_commit_graph_traversal_ended: bool,
    total_number_of_commits: int,
    max_churn_pool_size: int | None,
    number_of_diffs_computed: int,
) -> bool:
    """Whether enough diffs were computed for the churn summary."""
    if not has_commit_graph_traversal_ended:
        return False
    if max_churn_pool_size is None:
        return True
    return number_of_diffs_computed >= min(max_churn_pool_size, total_number_of_commits)


def update_signature_counts(
    sig: Sig,
    bot_regex: re.Pattern[str] | None,
    counts: MutableMapping[Sig, int],
) -> None:
    """Count one commit for ``sig`` unless its author is a bot."""
    if not is_bot(sig.name, bot_regex):
        counts[sig] = counts.get(sig, 0) + 1