"""Navigation and key guards for the single-photo review loupe."""

from __future__ import annotations

from typing import Tuple


def loupe_rating_key_allowed(asset_id: int) -> bool:
    """True when a rating key should persist (a real asset is loaded)."""
    return asset_id > 0


def loupe_step_index(idx: int, delta: int, total: int) -> Tuple[int, bool]:
    """Step ``idx`` by ``delta`` within ``total`` items, clamped without wrapping.

    An out-of-range start is first clamped into range. Returns the new index
    and whether it moved from the (clamped) start.
    """
    if total <= 0:
        return idx, False
    idx = min(max(idx, 0), total - 1)
    new_idx = idx + delta
    if new_idx < 0:
        return 0, False
    if new_idx >= total:
        return total - 1, False
    return new_idx, new_idx != idx