"""Choice of the image backend to draw with."""

from __future__ import annotations

import os

from repofetch.imaging.backend import ImageBackend, ImageProtocol
from repofetch.imaging.iterm import ITermBackend
from repofetch.imaging.kitty import KittyBackend
from repofetch.imaging.sixel import SixelBackend

_HAS_IMAGE_SUPPORT = os.name != "nt"

_BACKENDS: dict[ImageProtocol, type[ImageBackend]] = {
    ImageProtocol.KITTY: KittyBackend,
    ImageProtocol.ITERM: ITermBackend,
    ImageProtocol.SIXEL: SixelBackend,
}


def get_best_backend() -> ImageBackend | None:
    """The first backend the terminal supports: kitty, then iTerm, then sixel."""
    if not _HAS_IMAGE_SUPPORT:
        return None
    for backend in (KittyBackend, ITermBackend, SixelBackend):
        if backend.supported():
            return backend()
    return None


def get_image_backend(image_protocol: ImageProtocol | str) -> ImageBackend | None:
    """The backend for a given protocol, or None where images are not supported."""
    protocol = ImageProtocol(image_protocol)
    if not _HAS_IMAGE_SUPPORT:
        return None
    return _BACKENDS[protocol]()