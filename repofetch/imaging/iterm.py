"""Inline images through the iTerm2 file protocol."""

from __future__ import annotations

import base64
import io
import os
from collections.abc import Sequence

from PIL import Image

from repofetch.imaging.backend import (
    ImageBackend,
    TerminalSize,
    _fit_height,
    place_lines_beside_image,
)


class ITermBackend(ImageBackend):
    """Draws a PNG with the iTerm2 ``1337;File`` escape sequence."""

    def __init__(self, terminal_size: TerminalSize | None = None) -> None:
        super().__init__(terminal_size)

    @staticmethod
    def supported() -> bool:
        """True when running inside iTerm2."""
        return os.environ.get("TERM_PROGRAM", "") == "iTerm.app"

    def add_image(self, lines: Sequence[str], image: Image.Image, colors: int) -> str:
        lines = list(lines)
        size = self._terminal_size()
        if size.rows == 0 or size.y_pixels == 0:
            raise ValueError("terminal pixel size is unknown")
        height_ratio = size.rows / size.y_pixels

        resized = _fit_height(image, int(len(lines) / height_ratio))
        image_rows = height_ratio * resized.height

        png = io.BytesIO()
        resized.save(png, format="PNG")
        encoded = base64.b64encode(png.getvalue()).decode("ascii")

        return (
            f"\x1b]1337;File=inline=1:{encoded}\x07"
            f"\x1b[{max(int(image_rows) - 1, 0)}A"
            + place_lines_beside_image(lines, image_rows)
        )