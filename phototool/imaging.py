"""Raster decoding for previews and the decode-safe pending thumbnail."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Union

from PIL import Image

# The formats the preview path decodes directly; anything else is left to the caller.
_DECODABLE_FORMATS = ("JPEG", "PNG", "GIF")

PENDING_THUMB_WIDTH = 56
PENDING_THUMB_HEIGHT = 42
_PENDING_THUMB_BLUE = 105


def decode_image_file(path: Union[str, os.PathLike]) -> Image.Image:
    """Fully decode a JPEG, PNG or GIF file.

    Raises OSError (FileNotFoundError, PIL.UnidentifiedImageError, ...) when the
    file cannot be opened or is not one of those formats.
    """
    with open(path, "rb") as fh:
        img = Image.open(fh, formats=_DECODABLE_FORMATS)
        img.load()
    return img


@lru_cache(maxsize=1)
def pending_thumbnail_raster() -> Image.Image:
    """Return the shared gradient raster shown while a thumbnail is pending.

    The image is built once and reused; treat it as read-only.
    """
    w, h = PENDING_THUMB_WIDTH, PENDING_THUMB_HEIGHT
    x_span = max(w - 1, 1)
    y_span = max(h - 1, 1)
    img = Image.new("RGBA", (w, h))
    img.putdata(
        [
            (x * 255 // x_span, y * 255 // y_span, _PENDING_THUMB_BLUE, 255)
            for y in range(h)
            for x in range(w)
        ]
    )
    return img