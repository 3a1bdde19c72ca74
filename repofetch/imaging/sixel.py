"""Images through the DEC sixel graphics format."""

from __future__ import annotations

from collections.abc import Sequence

from PIL import Image

from repofetch.imaging.backend import (
    ImageBackend,
    TerminalSize,
    _fit_height,
    _query_terminal,
    place_lines_beside_image,
)


def reply_supports_sixel(buffer: bytes) -> bool:
    """True when a device attribute reply is complete and lists attribute 4."""
    if not (buffer.startswith(b"\x1b[?") and buffer.endswith(b"c")):
        return False
    return b"4" in buffer[3:-1].split(b";")


def encode_sixel(image: Image.Image) -> str:
    """Encode an RGB image as a sixel sequence."""
    rgb = image.convert("RGB")
    width, height = rgb.size
    if width == 0 or height == 0:
        raise ValueError("cannot encode an empty image")
    pixels = list(rgb.getdata())

    parts = ["\x1bPq", f'"1;1;{width};{height}']
    registry: dict[tuple[int, int, int], int] = {}
    empty = [0] * width
    for top in range(0, height, 6):
        band_height = min(6, height - top)
        masks: dict[tuple[int, int, int], list[int]] = {}
        for dy in range(band_height):
            row = pixels[(top + dy) * width : (top + dy + 1) * width]
            for x, pixel in enumerate(row):
                if pixel not in registry:
                    index = len(registry)
                    r, g, b = (channel * 100 // 255 for channel in pixel)
                    parts.append(f"#{index};2;{r};{g};{b}")
                    registry[pixel] = index
                masks.setdefault(pixel, [0] * width)[x] |= 1 << dy
        for pixel, index in registry.items():
            samples = masks.get(pixel, empty)
            parts.append(f"#{index}" + "".join(chr(s + 0x3F) for s in samples) + "$")
        parts.append("-")
    parts.append("\x1b\\")
    return "".join(parts)


def _premultiplied_rgb(image: Image.Image) -> Image.Image:
    rgb = Image.new("RGB", image.size)
    rgb.putdata(
        [
            (int(r / 255 * a), int(g / 255 * a), int(b / 255 * a))
            for r, g, b, a in image.convert("RGBA").getdata()
        ]
    )
    return rgb


class SixelBackend(ImageBackend):
    """Reduces the palette of the image and draws it as sixels."""

    def __init__(self, terminal_size: TerminalSize | None = None) -> None:
        super().__init__(terminal_size)

    @staticmethod
    def supported() -> bool:
        """Ask the terminal for its primary device attributes."""
        return _query_terminal("\x1b[c", reply_supports_sixel)

    def add_image(self, lines: Sequence[str], image: Image.Image, colors: int) -> str:
        if not 1 <= colors <= 256:
            raise ValueError(f"color count must be between 1 and 256, got {colors}")
        lines = list(lines)
        size = self._terminal_size()
        if size.columns == 0 or size.rows == 0:
            raise ValueError("terminal size is unknown")
        cell_width = size.x_pixels // size.columns
        line_height = size.y_pixels // size.rows
        if cell_width == 0 or line_height == 0:
            raise ValueError("terminal pixel size is unknown")
        width_ratio = 1.0 / cell_width
        height_ratio = 1.0 / line_height

        resized = _fit_height(image, int(len(lines) / height_ratio))
        image_columns = width_ratio * resized.width
        image_rows = height_ratio * resized.height

        reduced = (
            resized.convert("RGBA")
            .quantize(colors=colors, method=Image.Quantize.FASTOCTREE)
            .convert("RGBA")
        )

        return (
            encode_sixel(_premultiplied_rgb(reduced))
            + f"\x1b[{int(image_rows)}A"
            + f"\x1b[{int(image_columns) + 1}C"
            + place_lines_beside_image(lines, image_rows)
        )