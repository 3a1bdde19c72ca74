"""The "Churn" info line: the most frequently changed files."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from repofetch.numbers import NumberSeparator, format_number

_GLOB_SYNTAX = re.compile(
    r"(?P<stars>\*+)|(?P<any>\?)|(?P<cls>\[[!^]?\]?[^\]]*\])|(?P<bad>\[)"
    r"|(?P<open>\{)|(?P<close>\})|(?P<comma>,)|(?P<escape>\\.?)|(?P<literal>.)",
    re.DOTALL,
)


def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a glob into a pattern to be used with ``fullmatch``.

    ``*`` and ``?`` also match ``/``; ``**`` as a whole path component matches
    any number of directories; ``[...]`` classes and ``{a,b}`` alternations are
    supported. Malformed globs raise ``ValueError``.
    """
    parts: list[str] = []
    in_alternation = False
    swallow_slash = False
    for match in _GLOB_SYNTAX.finditer(pattern):
        kind = match.lastgroup
        text = match.group()
        if swallow_slash:
            swallow_slash = False
            if text == "/":
                continue
        if kind == "stars":
            start, end = match.span()
            whole_component = (
                len(text) == 2
                and (start == 0 or pattern[start - 1] == "/")
                and (end == len(pattern) or pattern[end] == "/")
            )
            if whole_component and end < len(pattern):
                parts.append("(?:.*/)?")
                swallow_slash = True
            else:
                parts.append(".*")
        elif kind == "any":
            parts.append(".")
        elif kind == "cls":
            body = text[1:-1]
            negate = body.startswith(("!", "^"))
            if negate:
                body = body[1:]
            escaped = "".join("-" if ch == "-" else re.escape(ch) for ch in body)
            parts.append(f"[{'^' if negate else ''}{escaped}]")
        elif kind == "bad":
            raise ValueError(f"unclosed character class in glob {pattern!r}")
        elif kind == "open":
            if in_alternation:
                raise ValueError(f"nested alternation in glob {pattern!r}")
            in_alternation = True
            parts.append("(?:")
        elif kind == "close":
            if not in_alternation:
                raise ValueError(f"unopened alternation in glob {pattern!r}")
            in_alternation = False
            parts.append(")")
        elif kind == "comma":
            parts.append("|" if in_alternation else ",")
        elif kind == "escape":
            if len(text) == 1:
                raise ValueError(f"dangling escape in glob {pattern!r}")
            parts.append(re.escape(text[1]))
        else:
            parts.append(re.escape(text))
    if in_alternation:
        raise ValueError(f"unclosed alternation in glob {pattern!r}")
    return re.compile("".join(parts), re.DOTALL)


def shorten_file_path(file_path: str, depth: int) -> str:
    """Keep only the last ``depth`` components, prefixed with an ellipsis."""
    components = file_path.split("/")
    if depth == 0 or len(components) <= depth:
        return file_path
    return "\u2026/" + "/".join(components[-depth:])


@dataclass
class FileChurn:
    file_path: str
    nbr_of_commits: int
    number_separator: NumberSeparator = NumberSeparator.PLAIN

    def __str__(self) -> str:
        return (
            f"{shorten_file_path(self.file_path, 2)} "
            f"{format_number(self.nbr_of_commits, self.number_separator)}"
        )


def _as_text(path: str | bytes) -> str:
    if isinstance(path, bytes):
        return path.decode("utf-8", errors="replace")
    return path


def compute_file_churns(
    number_of_commits_by_file_path: Mapping[str | bytes, int],
    number_of_file_churns_to_display: int,
    globs_to_exclude: Iterable[str],
    number_separator: NumberSeparator,
) -> list[FileChurn]:
    """The most changed files not matched by any excluded glob."""
    excluded = [glob_to_regex(glob) for glob in globs_to_exclude]
    ranked = sorted(number_of_commits_by_file_path.items(), key=lambda item: -item[1])
    churns = (
        FileChurn(path, count, number_separator)
        for path, count in ((_as_text(p), c) for p, c in ranked)
        if not any(regex.fullmatch(path) for regex in excluded)
    )
    return [churn for _, churn in zip(range(number_of_file_churns_to_display), churns)]


@dataclass
class ChurnInfo:
    file_churns: list[FileChurn] = field(default_factory=list)
    churn_pool_size: int = 0

    @classmethod
    def from_counts(
        cls,
        number_of_commits_by_file_path: Mapping[str | bytes, int],
        churn_pool_size: int,
        number_of_file_churns_to_display: int,
        globs_to_exclude: Iterable[str],
        number_separator: NumberSeparator,
    ) -> ChurnInfo:
        return cls(
            compute_file_churns(
                number_of_commits_by_file_path,
                number_of_file_churns_to_display,
                globs_to_exclude,
                number_separator,
            ),
            churn_pool_size,
        )

    def value(self) -> str:
        """One file per line, continuation lines indented past the title."""
        indent = " " * (len(self.title()) + 2)
        lines = [str(churn) for churn in self.file_churns[:1]]
        lines.extend(indent + str(churn) for churn in self.file_churns[1:])
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.value()

    def title(self) -> str:
        return f"Churn ({self.churn_pool_size})"