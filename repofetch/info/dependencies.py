"""The "Dependencies" info line."""

from __future__ import annotations

from dataclasses import dataclass

from repofetch.manifest import Manifest
from repofetch.numbers import NumberSeparator, format_number


@dataclass
class DependenciesInfo:
    dependencies: str

    @classmethod
    def from_manifest(
        cls, manifest: Manifest | None, number_separator: NumberSeparator
    ) -> DependenciesInfo:
        """Count and kind of dependencies; empty when there are none."""
        if manifest is None or manifest.number_of_dependencies == 0:
            return cls("")
        count = format_number(manifest.number_of_dependencies, number_separator)
        return cls(f"{count} ({manifest.manifest_type})")

    def value(self) -> str:
        return self.dependencies

    def title(self) -> str:
        return "Dependencies"