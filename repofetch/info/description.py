"""The "Description" info line."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice

from repofetch.manifest import Manifest

NUMBER_OF_WORDS_PER_LINE = 5


def _chunks(words: list[str], size: int) -> Iterator[list[str]]:
    iterator = iter(words)
    while chunk := list(islice(iterator, size)):
        yield chunk


def break_sentence_into_lines(sentence: str, left_pad: int) -> str:
    """Wrap a sentence every five words, indenting continuation lines by ``left_pad``."""
    lines = [" ".join(chunk) for chunk in _chunks(sentence.split(), NUMBER_OF_WORDS_PER_LINE)]
    indent = " " * left_pad
    return "\n".join(lines[:1] + [indent + line for line in lines[1:]])


@dataclass
class DescriptionInfo:
    description: str | None

    @classmethod
    def from_manifest(cls, manifest: Manifest | None) -> DescriptionInfo:
        return cls(None if manifest is None else manifest.description)

    def value(self) -> str:
        if self.description is None:
            return ""
        return break_sentence_into_lines(self.description, len(self.title()) + 2)

    def title(self) -> str:
        return "Description"