"""Command line options."""

from __future__ import annotations

import argparse
import os
import re
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from repofetch.imaging.backend import ImageProtocol
from repofetch.manifest import ManifestType
from repofetch.numbers import NumberSeparator

COLOR_RESOLUTIONS = ("16", "32", "64", "128", "256")
DEFAULT_LANGUAGE_TYPES = ("programming", "markup")
MAX_TEXT_COLORS = 6


class CliError(Exception):
    """The command line could not be parsed."""


class When(Enum):
    AUTO = "auto"
    NEVER = "never"
    ALWAYS = "always"


@dataclass
class InfoCliOptions:
    disabled_fields: list[str] = field(default_factory=list)
    no_title: bool = False
    number_of_authors: int = 3
    number_of_languages: int = 6
    number_of_file_churns: int = 3
    churn_pool_size: int | None = None
    exclude: list[str] = field(default_factory=list)
    no_bots: bool | re.Pattern[str] | None = None
    """None: keep bots; True: default bot pattern; a pattern: that pattern."""
    no_merges: bool = False
    email: bool = False
    include_hidden: bool = False
    language_types: list[str] = field(default_factory=lambda: list(DEFAULT_LANGUAGE_TYPES))


@dataclass
class AsciiCliOptions:
    ascii_input: str | None = None
    ascii_colors: list[int] = field(default_factory=list)
    ascii_language: str | None = None
    true_color: When = When.AUTO


@dataclass
class ImageCliOptions:
    image: Path | None = None
    image_protocol: ImageProtocol | None = None
    color_resolution: int = 16


@dataclass
class TextFormattingCliOptions:
    text_colors: list[int] = field(default_factory=list)
    iso_time: bool = False
    number_separator: NumberSeparator = NumberSeparator.PLAIN
    no_bold: bool = False


@dataclass
class VisualsCliOptions:
    no_color_palette: bool = False
    no_art: bool = False


@dataclass
class OtherCliOptions:
    languages: bool = False
    package_managers: bool = False


@dataclass
class CliOptions:
    input: Path = field(default_factory=lambda: Path("."))
    info: InfoCliOptions = field(default_factory=InfoCliOptions)
    text_formatting: TextFormattingCliOptions = field(default_factory=TextFormattingCliOptions)
    ascii: AsciiCliOptions = field(default_factory=AsciiCliOptions)
    image: ImageCliOptions = field(default_factory=ImageCliOptions)
    visuals: VisualsCliOptions = field(default_factory=VisualsCliOptions)
    other: OtherCliOptions = field(default_factory=OtherCliOptions)


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise CliError(message)


def _count(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"number must not be negative: {text!r}")
    return value


def _color_index(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid color index: {text!r}") from None
    if not 0 <= value < 16:
        raise argparse.ArgumentTypeError(f"color index {value} is not in 0..16")
    return value


def _regex(text: str) -> re.Pattern[str]:
    try:
        return re.compile(text)
    except re.error as exc:
        raise argparse.ArgumentTypeError(f"invalid regex {text!r}: {exc}") from None


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for the command line."""
    parser = _Parser(
        prog="repofetch",
        description="Display information about a Git repository in the terminal.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=".",
        help="run as if started in INPUT instead of the current working directory",
    )

    info = parser.add_argument_group("INFO")
    info.add_argument("-d", "--disabled-fields", nargs="+", metavar="FIELD",
                      help="disable FIELD(s) from appearing in the output")
    info.add_argument("--no-title", action="store_true", help="hide the title")
    info.add_argument("--number-of-authors", type=_count, default=3, metavar="NUM",
                      help="maximum NUM of authors to be shown")
    info.add_argument("--number-of-languages", type=_count, default=6, metavar="NUM",
                      help="maximum NUM of languages to be shown")
    info.add_argument("--number-of-file-churns", type=_count, default=3, metavar="NUM",
                      help="maximum NUM of file churns to be shown")
    info.add_argument("--churn-pool-size", type=_count, metavar="NUM",
                      help="minimum NUM of commits from HEAD used to compute the churn summary")
    info.add_argument("-e", "--exclude", nargs="+",
                      help="ignore all files & directories matching EXCLUDE")
    info.add_argument("--no-bots", nargs="?", const=True, type=_regex, metavar="REGEX",
                      help="exclude [bot] commits; REGEX overrides the default pattern")
    info.add_argument("--no-merges", action="store_true", help="ignore merge commits")
    info.add_argument("-E", "--email", action="store_true",
                      help="show the email address of each author")
    info.add_argument("--include-hidden", action="store_true",
                      help="count hidden files and directories")
    info.add_argument("-T", "--type", dest="language_types", nargs="+",
                      help="filter output by language type (default: programming markup)")

    text = parser.add_argument_group("TEXT FORMATTING")
    text.add_argument("-t", "--text-colors", nargs="+", type=_color_index, metavar="X",
                      help="text colors: title, ~, underline, subtitle, colon, info")
    text.add_argument("-z", "--iso-time", action="store_true",
                      help="use ISO 8601 formatted timestamps")
    text.add_argument("--number-separator", default=NumberSeparator.PLAIN.value,
                      choices=[s.value for s in NumberSeparator], metavar="SEPARATOR",
                      help="which thousands SEPARATOR to use")
    text.add_argument("--no-bold", action="store_true", help="turn off bold formatting")

    ascii_group = parser.add_argument_group("ASCII")
    ascii_group.add_argument("--ascii-input", metavar="STRING",
                             help="STRING to replace the ASCII logo")
    ascii_group.add_argument("-c", "--ascii-colors", nargs="+", type=_color_index,
                             metavar="X", help="colors to print the ascii art")
    ascii_group.add_argument("-a", "--ascii-language", metavar="LANGUAGE",
                             help="which LANGUAGE's ascii art to print")
    ascii_group.add_argument("--true-color", default=When.AUTO.value,
                             choices=[w.value for w in When], metavar="WHEN",
                             help="when to use true color")

    image = parser.add_argument_group("IMAGE")
    image.add_argument("-i", "--image", help="path to the IMAGE file")
    image.add_argument("--image-protocol", choices=[p.value for p in ImageProtocol],
                       metavar="PROTOCOL", help="which image PROTOCOL to use")
    image.add_argument("--color-resolution", choices=COLOR_RESOLUTIONS, metavar="VALUE",
                       help="color resolution to use with the sixel backend (default: 16)")

    visuals = parser.add_argument_group("VISUALS")
    visuals.add_argument("--no-color-palette", action="store_true",
                         help="hide the color palette")
    visuals.add_argument("--no-art", action="store_true",
                         help="hide the ascii art or image if provided")

    other = parser.add_argument_group("OTHER")
    other.add_argument("-l", "--languages", action="store_true",
                       help="print out supported languages")
    other.add_argument("-p", "--package-managers", action="store_true",
                       help="print out supported package managers")
    return parser


def parse_cli_options(argv: Sequence[str] | None = None) -> CliOptions:
    """Parse the arguments (without the program name) into options."""
    ns = build_parser().parse_args(None if argv is None else list(argv))

    if ns.image is None:
        if ns.image_protocol is not None:
            raise CliError("--image-protocol requires --image")
        if ns.color_resolution is not None:
            raise CliError("--color-resolution requires --image")
    if ns.text_colors is not None and len(ns.text_colors) > MAX_TEXT_COLORS:
        raise CliError(f"--text-colors takes at most {MAX_TEXT_COLORS} values")

    return CliOptions(
        input=Path(ns.input),
        info=InfoCliOptions(
            disabled_fields=list(ns.disabled_fields or []),
            no_title=ns.no_title,
            number_of_authors=ns.number_of_authors,
            number_of_languages=ns.number_of_languages,
            number_of_file_churns=ns.number_of_file_churns,
            churn_pool_size=ns.churn_pool_size,
            exclude=list(ns.exclude or []),
            no_bots=ns.no_bots,
            no_merges=ns.no_merges,
            email=ns.email,
            include_hidden=ns.include_hidden,
            language_types=list(ns.language_types or DEFAULT_LANGUAGE_TYPES),
        ),
        text_formatting=TextFormattingCliOptions(
            text_colors=list(ns.text_colors or []),
            iso_time=ns.iso_time,
            number_separator=NumberSeparator(ns.number_separator),
            no_bold=ns.no_bold,
        ),
        ascii=AsciiCliOptions(
            ascii_input=ns.ascii_input,
            ascii_colors=list(ns.ascii_colors or []),
            ascii_language=ns.ascii_language,
            true_color=When(ns.true_color),
        ),
        image=ImageCliOptions(
            image=None if ns.image is None else Path(ns.image),
            image_protocol=None if ns.image_protocol is None else ImageProtocol(ns.image_protocol),
            color_resolution=16 if ns.color_resolution is None else int(ns.color_resolution),
        ),
        visuals=VisualsCliOptions(no_color_palette=ns.no_color_palette, no_art=ns.no_art),
        other=OtherCliOptions(languages=ns.languages, package_managers=ns.package_managers),
    )


def print_supported_package_managers() -> None:
    """Print every supported package manager, one per line."""
    for manifest_type in ManifestType:
        print(manifest_type)


def is_truecolor_terminal() -> bool:
    """True when COLORTERM announces 24-bit colour support."""
    return os.environ.get("COLORTERM") in ("truecolor", "24bit")


def get_git_version() -> str:
    """The output of ``git --version`` without newlines; empty if git cannot run."""
    try:
        result = subprocess.run(["git", "--version"], capture_output=True, check=False)
    except OSError:
        return ""
    return result.stdout.decode("utf-8", errors="replace").replace("\n", "")