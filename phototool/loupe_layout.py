"""Geometry for the letterboxed image band in the review loupe."""

from __future__ import annotations

from dataclasses import dataclass

# The image takes 24/25 (96%) of the loupe body in each dimension.
_BAND_NUMERATOR = 24
_BAND_DENOMINATOR = 25


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle: top-left position and size."""

    x: float
    y: float
    width: float
    height: float


def loupe_image_rect(width: float, height: float) -> Rect:
    """Place the loupe image centred in a body of the given size.

    The image gets 24/25 of each dimension, never less than one unit.
    """
    band_w = width * _BAND_NUMERATOR / _BAND_DENOMINATOR
    band_h = height * _BAND_NUMERATOR / _BAND_DENOMINATOR
    band_w = max(band_w, 1.0)
    band_h = max(band_h, 1.0)
    return Rect((width - band_w) / 2, (height - band_h) / 2, band_w, band_h)