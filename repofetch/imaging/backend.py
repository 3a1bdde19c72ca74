"""Common pieces of the terminal image backends."""

from __future__ import annotations

import os
import select
import struct
import sys
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from PIL import Image

try:
    import fcntl
    import termios
except ImportError:
    fcntl = None
    termios = None

_U32_MAX = 2**32 - 1
_REPLY_TIMEOUT = 0.05


class ImageProtocol(Enum):
    KITTY = "kitty"
    SIXEL = "sixel"
    ITERM = "iterm"


@dataclass(frozen=True)
class TerminalSize:
    """Size of the terminal in character cells and in pixels."""

    columns: int
    rows: int
    x_pixels: int
    y_pixels: int


def get_terminal_size() -> TerminalSize:
    """Query the size of the terminal attached to stdout; zeros when unknown."""
    unknown = TerminalSize(0, 0, 0, 0)
    if fcntl is None or termios is None:
        return unknown
    try:
        packed = fcntl.ioctl(sys.stdout.fileno(), termios.TIOCGWINSZ, b"\0" * 8)
    except (OSError, ValueError, AttributeError):
        return unknown
    rows, columns, x_pixels, y_pixels = struct.unpack("HHHH", packed)
    return TerminalSize(columns=columns, rows=rows, x_pixels=x_pixels, y_pixels=y_pixels)


def place_lines_beside_image(lines: Sequence[str], image_rows: float) -> str:
    """Print each line on its own row next to the image, then move below both."""
    parts = [f"\x1b[s{line}\x1b[u\x1b[1B" for line in lines]
    parts.append(f"\n\x1b[{max(len(lines), int(image_rows)) - len(lines)}B")
    return "".join(parts)


class ImageBackend(ABC):
    """A way of drawing an image in the terminal next to lines of text."""

    def __init__(self, terminal_size: TerminalSize | None = None) -> None:
        self._fixed_size = terminal_size

    def _terminal_size(self) -> TerminalSize:
        return self._fixed_size if self._fixed_size is not None else get_terminal_size()

    @abstractmethod
    def add_image(self, lines: Sequence[str], image: Image.Image, colors: int) -> str:
        """Return the escape sequences that draw ``image`` with ``lines`` beside it."""


def _fit_height(image: Image.Image, height: int) -> Image.Image:
    """Resize keeping the aspect ratio so that the image is ``height`` pixels tall."""
    width, old_height = image.size
    if width == 0 or old_height == 0:
        raise ValueError("cannot resize an empty image")
    ratio = min(_U32_MAX / width, height / old_height)
    new_width = max(round(width * ratio), 1)
    new_height = max(round(old_height * ratio), 1)
    return image.resize((new_width, new_height), Image.Resampling.LANCZOS)


def _query_terminal(
    query: str,
    is_complete: Callable[[bytes], bool],
    keep: Callable[[int], bool] = lambda byte: True,
    timeout: float = _REPLY_TIMEOUT,
) -> bool:
    """Send ``query`` and wait briefly for a reply that ``is_complete`` accepts."""
    if termios is None:
        return False
    try:
        fd = sys.stdin.fileno()
    except (AttributeError, OSError, ValueError):
        return False
    if not os.isatty(fd):
        return False

    old_attributes = termios.tcgetattr(fd)
    new_attributes = list(old_attributes)
    new_attributes[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new_attributes)
    try:
        sys.stdout.write(query)
        sys.stdout.flush()
        deadline = time.monotonic() + timeout
        buffer = bytearray()
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            ready, _, _ = select.select([fd], [], [], remaining)
            if not ready:
                return False
            byte = os.read(fd, 1)
            if not byte:
                return False
            if keep(byte[0]):
                buffer += byte
            if is_complete(bytes(buffer)):
                return True
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old_attributes)