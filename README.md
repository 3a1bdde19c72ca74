# repofetch

`repofetch` is a library of building blocks for a terminal summary of a Git
repository. It turns commit counts into ranked author and file-churn lines,
reads project manifests (`Cargo.toml`, `package.json`), formats the summary's
info fields, renders coloured ASCII art templates, and draws images through
the Kitty, iTerm and Sixel terminal protocols. It also parses the options of
a command line for such a summary.

It needs Python 3.11 or later and depends only on Pillow.

## What it does not do

- It installs no command. `repofetch.cli.parse_cli_options` turns arguments
  into a `CliOptions` value, but nothing in the package acts on them.
- It does not read a Git repository. Commit counts per author and per file,
  the times of the first and latest commits, and the refs pointing at `HEAD`
  are supplied by the caller; the package aggregates and formats them.
- It does not detect languages and ships no logo templates: an `AsciiArt`
  template is whatever text you pass in.

## ASCII art

Templates are plain text in which `{0}` to `{9}` switch to the colour with
that index. `repofetch.ascii.AsciiArt` drops leading empty lines and trailing
blank lines, crops the common indentation and yields every line padded to the
same width:

```python
from repofetch.ascii import AsciiArt

template = """
{0}  ___
{0} /   \\
{1} \\___/
"""

art = AsciiArt(template, [4, (255, 128, 0)], True)
print(art.width())
for line in art:
    print(line)
```

A colour is `None` (the terminal's default foreground), an ANSI index from 0
to 15, or an `(r, g, b)` triple. Indices with no matching entry fall back to
the default colour. The lower-level functions `tokenize`, `truncate`,
`render`, `leading_spaces`, `true_length`, `is_blank` and
`get_min_start_max_end` are available from the same module.

`repofetch.filters` has two helpers for template data: `strip_color_tokens`
removes every `{n}` marker from a string, and `hex_to_rgb("#rrggbb")` returns
`{"r": ..., "g": ..., "b": ...}`, raising `ValueError` for malformed input.

## Manifests

`repofetch.manifest.get_manifests(path)` looks at the files directly inside a
directory and returns a `Manifest` for each `Cargo.toml` or `package.json`
that parses:

```python
from repofetch.manifest import get_manifests

for manifest in get_manifests("."):
    print(manifest.manifest_type, manifest.name, manifest.version)
    print(manifest.number_of_dependencies, manifest.description, manifest.license)
```

Files that cannot be read or parsed, and a `Cargo.toml` that describes only a
workspace, are skipped. `parse_cargo_manifest` and `parse_npm_manifest` read
one file and raise `ManifestError` instead.

## Commit statistics

`repofetch.gitstats` holds the pieces used while counting commits:

- `Sig(name, email)` identifies an author.
- `update_signature_counts(sig, bot_regex, counts)` adds one commit for
  `sig` unless the author is a bot.
- `get_no_bots_regex(no_bots)` returns `None` for `None`/`False`, the default
  pattern `(?:-|\s)[Bb]ot$|\[[Bb]ot\]` for `True`, and the given pattern
  otherwise; `is_bot(name, regex)` applies it.
- `should_break(...)` tells whether enough diffs were computed for the churn
  summary.
- `GitMetrics.from_counts(...)` derives the total number of commits and
  authors from the per-author counts.

## Info fields

Each module in `repofetch.info` provides one line of the summary with a
`title()` and a `value()`:

- `authors.AuthorsInfo.from_counts(...)` – top authors with their share of
  commits, optionally with e-mail addresses
- `churn.ChurnInfo.from_counts(...)` – the most changed files, minus those
  matched by exclusion globs (see `churn.glob_to_regex`)
- `commits.CommitsInfo.from_metrics(...)` – the commit count, marked
  "(shallow)" when asked
- `contributors.ContributorsInfo` – the author count, shown only when more
  authors exist than are listed
- `created.CreatedInfo` – a creation date string you supply
- `head.HeadInfo` – a short commit id and the refs pointing at it
- `dependencies.DependenciesInfo.from_manifest(...)` – e.g. `21 (Cargo)`
- `description.DescriptionInfo.from_manifest(...)` – the description wrapped
  every five words

Numbers are grouped in threes with `repofetch.numbers.format_number` and a
`NumberSeparator`: `PLAIN`, `COMMA`, `SPACE` (narrow no-break space) or
`UNDERSCORE`.

```python
from repofetch.gitstats import Sig
from repofetch.info.authors import AuthorsInfo
from repofetch.numbers import NumberSeparator

counts = {Sig("Jane Doe", "jane@example.com"): 1500, Sig("John Doe", "john@example.com"): 500}
info = AuthorsInfo.from_counts(counts, 2000, 3, False, NumberSeparator.COMMA)
print(f"{info.title()}: {info.value()}")
```

## Options

`repofetch.cli.parse_cli_options(argv)` accepts an input directory and
options grouped as INFO (`--number-of-authors`, `--no-merges`, `--no-bots`,
`--exclude`, `--disabled-fields`, ...), TEXT FORMATTING (`--text-colors`,
`--iso-time`, `--number-separator`, `--no-bold`), ASCII (`--ascii-input`,
`--ascii-colors`, `--ascii-language`, `--true-color`), IMAGE (`--image`,
`--image-protocol`, `--color-resolution`), VISUALS (`--no-color-palette`,
`--no-art`) and OTHER (`--languages`, `--package-managers`):

```python
from repofetch.cli import parse_cli_options

options = parse_cli_options(["/path/to/repo", "--number-of-authors", "4"])
print(options.info.number_of_authors)
```

Invalid input raises `CliError`: unknown options, a colour index above 15,
more than six text colours, or `--image-protocol` or `--color-resolution`
without `--image`. `build_parser()` returns the underlying `argparse` parser.
The module also offers `print_supported_package_managers()`,
`is_truecolor_terminal()` (from `COLORTERM`) and `get_git_version()` (runs
`git --version`).

## Images

`repofetch.imaging.select.get_best_backend()` probes the terminal and returns
a `KittyBackend`, `ITermBackend` or `SixelBackend`, or `None` when none is
supported (always `None` on Windows). `get_image_backend(protocol)` picks one
from an `ImageProtocol` or its name (`"kitty"`, `"sixel"`, `"iterm"`).

`backend.add_image(lines, image, colors)` returns the escape sequences that
draw a Pillow image scaled to the height of the text, with the lines printed
beside it. `colors` is the palette size used by the Sixel backend (1 to 256).
Each backend takes an optional `TerminalSize`; without one it queries the
terminal attached to stdout. `repofetch.imaging.sixel.encode_sixel` encodes
an image as sixel data on its own.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.