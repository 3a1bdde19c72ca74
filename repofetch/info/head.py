"""The "HEAD" info line."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class HeadRefs:
    short_commit_id: str
    refs: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        if self.refs:
            return f"{self.short_commit_id} ({', '.join(self.refs)})"
        return self.short_commit_id


@dataclass
class HeadInfo:
    head_refs: HeadRefs

    def value(self) -> str:
        return str(self.head_refs)

    def title(self) -> str:
        return "HEAD"