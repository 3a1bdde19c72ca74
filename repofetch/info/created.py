"""The "Created" info line."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CreatedInfo:
    creation_date: str

    def value(self) -> str:
        return self.creation_date

    def title(self) -> str:
        return "Created"