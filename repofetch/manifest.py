"""Detection and parsing of package manifests (Cargo.toml, package.json)."""

from __future__ import annotations

import json
import os
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ManifestError(Exception):
    """A manifest file could not be understood."""


class ManifestType(Enum):
    NPM = "Npm"
    CARGO = "Cargo"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Manifest:
    manifest_type: ManifestType
    number_of_dependencies: int
    name: str
    description: str | None
    version: str
    license: str | None


_MANIFEST_FILE_NAMES = {
    "Cargo.toml": ManifestType.CARGO,
    "package.json": ManifestType.NPM,
}


def file_name_to_manifest_type(file_name: str) -> ManifestType | None:
    """The manifest type a file name stands for, if any."""
    return _MANIFEST_FILE_NAMES.get(file_name)


def get_manifests(path: str | os.PathLike[str]) -> list[Manifest]:
    """Parse every recognised manifest directly inside ``path``; unreadable ones are skipped."""
    manifests = []
    with os.scandir(path) as entries:
        candidates = sorted(
            (entry for entry in entries if entry.is_file()), key=lambda entry: entry.name
        )
    for entry in candidates:
        manifest_type = file_name_to_manifest_type(entry.name)
        if manifest_type is None:
            continue
        parser = parse_cargo_manifest if manifest_type is ManifestType.CARGO else parse_npm_manifest
        try:
            manifests.append(parser(Path(entry.path)))
        except (ManifestError, OSError, UnicodeDecodeError):
            continue
    return manifests


def _optional_string(table: dict, key: str) -> str | None:
    value = table.get(key)
    if value is None or isinstance(value, dict):
        return None
    if not isinstance(value, str):
        raise ManifestError(f"`{key}` must be a string")
    return value


def parse_cargo_manifest(path: str | os.PathLike[str]) -> Manifest:
    """Read a Cargo.toml that describes a package."""
    try:
        data = tomllib.loads(Path(path).read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ManifestError(f"invalid TOML in {path}: {exc}") from exc

    package = data.get("package")
    if not isinstance(package, dict):
        raise ManifestError("Not a package (only a workspace)")

    name = package.get("name")
    if not isinstance(name, str):
        raise ManifestError("package has no name")

    version = package.get("version", "0.0.0")
    if not isinstance(version, str):
        raise ManifestError("package version is inherited or invalid")

    dependencies = data.get("dependencies", {})
    if not isinstance(dependencies, dict):
        raise ManifestError("`dependencies` must be a table")

    return Manifest(
        manifest_type=ManifestType.CARGO,
        number_of_dependencies=len(dependencies),
        name=name,
        description=_optional_string(package, "description"),
        version=version,
        license=_optional_string(package, "license"),
    )


def parse_npm_manifest(path: str | os.PathLike[str]) -> Manifest:
    """Read an npm package.json."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(f"invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError("package.json must hold an object")

    name = data.get("name", "")
    version = data.get("version", "")
    dependencies = data.get("dependencies", {})
    if not isinstance(name, str) or not isinstance(version, str):
        raise ManifestError("`name` and `version` must be strings")
    if not isinstance(dependencies, dict):
        raise ManifestError("`dependencies` must be an object")

    description = data.get("description")
    license_ = data.get("license")
    for key, value in (("description", description), ("license", license_)):
        if value is not None and not isinstance(value, str):
            raise ManifestError(f"`{key}` must be a string")

    return Manifest(
        manifest_type=ManifestType.NPM,
        number_of_dependencies=len(dependencies),
        name=name,
        description=description,
        version=version,
        license=license_,
    )