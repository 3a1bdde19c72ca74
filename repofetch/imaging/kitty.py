"""Images through the kitty terminal graphics protocol."""

from __future__ import annotations

import base64
from collections.abc import Sequence

from PIL import Image

from repofetch.imaging.backend import (
    ImageBackend,
    TerminalSize,
    _fit_height,
    _query_terminal,
    place_lines_beside_image,
)

_CHUNK_SIZE = 4096
_QUERY_IMAGE = bytes((255, 0, 0, 255)) * (32 * 32)
_REPLY_BYTES = frozenset(b"\x1b_G\\")


def is_kitty_reply(buffer: bytes) -> bool:
    """True when the filtered reply is a complete graphics protocol response."""
    return buffer.startswith(b"\x1b_G") and buffer.endswith(b"\x1b\\")


class KittyBackend(ImageBackend):
    """Sends raw RGBA data in base64 chunks of 4096 bytes."""

    def __init__(self, terminal_size: TerminalSize | None = None) -> None:
        super().__init__(terminal_size)

    @staticmethod
    def supported() -> bool:
        """Ask the terminal whether it answers a graphics query."""
        encoded = base64.b64encode(_QUERY_IMAGE).decode("ascii")
        query = f"\x1b_Gi=1,f=32,s=32,v=32,a=q;{encoded}\x1b\\"
        return _query_terminal(query, is_kitty_reply, keep=_REPLY_BYTES.__contains__)

    def add_image(self, lines: Sequence[str], image: Image.Image, colors: int) -> str:
        lines = list(lines)
        size = self._terminal_size()
        if size.rows == 0 or size.y_pixels == 0:
            raise ValueError("terminal pixel size is unknown")
        height_ratio = size.rows / size.y_pixels

        resized = _fit_height(image, int(len(lines) / height_ratio))
        image_rows = height_ratio * resized.height

        raw = resized.convert("RGBA").tobytes()
        if len(raw) != resized.width * resized.height * 4:
            raise ValueError("conversion from image to rgba samples failed")
        encoded = base64.b64encode(raw).decode("ascii")

        header = f"\x1b_Gf=32,s={resized.width},v={resized.height},m=1,a=T;"
        parts = [
            f"{header}{encoded[offset : offset + _CHUNK_SIZE]}\x1b\\"
            for offset in range(0, len(encoded), _CHUNK_SIZE)
        ]
        parts.append("\x1b_Gm=0;\x1b\\")
        parts.append(f"\x1b[{max(int(image_rows) - 1, 0)}A")
        parts.append(place_lines_beside_image(lines, image_rows))
        return "".join(parts)