"""Rendering of ``{n}``-coloured ASCII art templates."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

Color = int | tuple[int, int, int] | None
"""A colour: ``None`` for the terminal default, 0-15 for an ANSI colour, or an RGB triple."""

_RESET = "\x1b[0m"
_DIGITS = "0123456789"


class TokenKind(Enum):
    COLOR = "color"
    CHAR = "char"
    SPACE = "space"


@dataclass(frozen=True)
class Token:
    """A single token of the ASCII art format."""

    kind: TokenKind
    value: int | str | None = None

    @property
    def is_solid(self) -> bool:
        return self.kind is TokenKind.CHAR

    @property
    def is_space(self) -> bool:
        return self.kind is TokenKind.SPACE

    @property
    def has_zero_width(self) -> bool:
        return self.kind is TokenKind.COLOR

    def __str__(self) -> str:
        if self.kind is TokenKind.COLOR:
            return f"{{{self.value}}}"
        if self.kind is TokenKind.CHAR:
            return str(self.value)
        return " "


def color_token(s: str) -> tuple[str, Token] | None:
    """Parse a colour marker ``{n}`` where ``n`` is one decimal digit."""
    if len(s) >= 3 and s[0] == "{" and s[1] in _DIGITS and s[2] == "}":
        return s[3:], Token(TokenKind.COLOR, int(s[1]))
    return None


def space_token(s: str) -> tuple[str, Token] | None:
    """Parse a single space."""
    if s.startswith(" "):
        return s[1:], Token(TokenKind.SPACE)
    return None


def char_token(s: str) -> tuple[str, Token] | None:
    """Parse any single character; fails only on empty input."""
    if not s:
        return None
    return s[1:], Token(TokenKind.CHAR, s[0])


def tokenize(line: str) -> Iterator[Token]:
    """Yield the tokens of a line."""
    rest = line
    while True:
        parsed = color_token(rest) or space_token(rest) or char_token(rest)
        if parsed is None:
            return
        rest, token = parsed
        yield token


def is_blank(line: str) -> bool:
    """True when the line holds no visible character."""
    return not any(token.is_solid for token in tokenize(line))


def true_length(line: str) -> int:
    """Visible width of the line, ignoring trailing spaces."""
    last_non_space = 0
    position = 0
    for token in tokenize(line):
        if token.has_zero_width:
            continue
        position += 1
        if not token.is_space:
            last_non_space = position
    return last_non_space


def leading_spaces(line: str) -> int:
    """Number of spaces before the first visible character."""
    count = 0
    for token in tokenize(line):
        if token.is_solid:
            break
        if token.is_space:
            count += 1
    return count


def truncate(line: str, start: int, end: int) -> Iterator[Token]:
    """Yield the tokens of the visible columns ``start`` to ``end``."""
    if start > end:
        raise ValueError(f"start ({start}) is greater than end ({end})")
    to_skip = start
    width = end - start
    for token in tokenize(line):
        if to_skip > 0 and not token.has_zero_width:
            to_skip -= 1
            continue
        if width == 0:
            return
        if not token.has_zero_width:
            width -= 1
        yield token


def _foreground_code(color: Color) -> str:
    if color is None:
        return "39"
    if isinstance(color, bool):
        raise ValueError(f"invalid color: {color!r}")
    if isinstance(color, int):
        if 0 <= color < 8:
            return str(30 + color)
        if 8 <= color < 16:
            return str(90 + color - 8)
        raise ValueError(f"ANSI color index out of range: {color}")
    if isinstance(color, tuple) and len(color) == 3 and all(0 <= c <= 255 for c in color):
        r, g, b = color
        return f"38;2;{r};{g};{b}"
    raise ValueError(f"invalid color: {color!r}")


def style_segment(segment: str, color: Color, bold: bool) -> str:
    """Wrap a segment in the escape sequences of its colour and weight."""
    code = _foreground_code(color)
    if bold:
        code += ";1"
    return f"\x1b[{code}m{segment}{_RESET}"


def render(line: str, colors: Sequence[Color], start: int, end: int, bold: bool) -> str:
    """Render the columns ``start`` to ``end`` of a line, padded to that width."""
    if start > end:
        raise ValueError(f"start ({start}) is greater than end ({end})")
    width = end - start
    parts: list[str] = []
    segment: list[str] = []
    color: Color = None

    for token in truncate(line, start, end):
        if token.kind is TokenKind.COLOR:
            parts.append(style_segment("".join(segment), color, bold))
            segment = []
            index = token.value
            color = colors[index] if index < len(colors) else None
        else:
            width = max(width - 1, 0)
            segment.append(str(token))

    parts.append(style_segment("".join(segment), color, bold))
    parts.append(" " * width)
    return "".join(parts)


def get_min_start_max_end(lines: Iterable[str]) -> tuple[int, int]:
    """Smallest leading indentation and largest visible length over the lines."""
    bounds = [(leading_spaces(line), true_length(line)) for line in lines]
    if not bounds:
        return 0, 0
    return min(s for s, _ in bounds), max(e for _, e in bounds)


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class AsciiArt:
    """An ASCII art template rendered line by line, cropped to its content."""

    def __init__(self, text: str, colors: Sequence[Color], bold: bool) -> None:
        lines = _split_lines(text)
        first = next((i for i, line in enumerate(lines) if line), len(lines))
        lines = lines[first:]
        while lines and is_blank(lines[-1]):
            lines.pop()

        self._lines = lines
        self._colors = list(colors)
        self._bold = bold
        self._start, self._end = get_min_start_max_end(lines)

    def width(self) -> int:
        """Visible width of every rendered line."""
        return self._end - self._start

    def __iter__(self) -> Iterator[str]:
        for line in self._lines:
            yield render(line, self._colors, self._start, self._end, self._bold)