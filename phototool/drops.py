"""Classification and messaging for files dropped onto the upload surface."""

from __future__ import annotations

import os
import stat as stat_mod
from dataclasses import dataclass, field
from typing import Callable, Iterable, MutableSequence, Optional, Sequence, Tuple, Union
from urllib.parse import urlparse
from urllib.request import url2pathname

_SKIP_SUMMARY_CAP = 8

_NON_LOCAL_DROP = (
    "That drop is not a file on this computer (for example a browser or app link). "
    "Save or export the image, then drop the saved file or use Add images…"
)


@dataclass
class DroppedPaths:
    """Supported file paths and human-facing skip lines from one drop."""

    supported: list[str] = field(default_factory=list)
    unsupported: list[str] = field(default_factory=list)


def drop_blocked_dialog_info(
    awaiting_post_import_step: bool, import_in_flight: bool
) -> Optional[Tuple[str, str]]:
    """Return (title, message) when a drop must be rejected, else None."""
    if awaiting_post_import_step:
        return (
            "Finish collection step",
            "Confirm or cancel the upload collection step before dropping more files.",
        )
    if import_in_flight:
        return (
            "Import in progress",
            "Wait for the current import to finish before adding more files.",
        )
    return None


def try_add_unique_path(paths: MutableSequence[str], path: str) -> bool:
    """Append the normalised path unless already present; report whether it was added."""
    clean = os.path.normpath(path)
    if clean in paths:
        return False
    paths.append(clean)
    return True


def uri_local_path(uri: Union[str, os.PathLike, None]) -> str:
    """Return the local filesystem path for a dropped URI; raise ValueError otherwise."""
    if uri is None:
        raise ValueError("nil URI")
    if isinstance(uri, os.PathLike):
        raw = os.fspath(uri)
        if not raw.strip():
            raise ValueError("empty path")
        return os.path.normpath(raw.strip())
    parsed = urlparse(uri)
    scheme = parsed.scheme.strip().lower()
    if len(scheme) == 1:
        # A Windows drive letter, not a scheme.
        path = uri.strip()
    elif scheme and scheme != "file":
        raise ValueError(f"not a local file ({scheme})")
    elif scheme == "file":
        path = url2pathname(parsed.path).strip() if parsed.path.strip() else ""
    else:
        path = uri.strip()
    if not path:
        raise ValueError("empty path")
    return os.path.normpath(path)


def drop_reject_reason(err: Optional[BaseException]) -> str:
    """Turn uri_local_path failures into short user-facing lines."""
    if err is None:
        return ""
    text = str(err)
    if text == "nil URI":
        return "A dropped item could not be read."
    if text == "empty path":
        return "A dropped item had no file path."
    if text.startswith("not a local file ("):
        return _NON_LOCAL_DROP
    return text


def dropped_skip_summary_for_dialog(lines: Optional[Sequence[str]]) -> str:
    """Join skip reasons for a dialog, capping long lists with a recovery hint."""
    if not lines:
        return ""
    if len(lines) <= _SKIP_SUMMARY_CAP:
        return "\n".join(lines)
    head = "\n".join(lines[:_SKIP_SUMMARY_CAP])
    rest = len(lines) - _SKIP_SUMMARY_CAP
    return (
        f"{head}\n\n… and {rest} more — use Add images… if you need to pick files manually."
    )


def rect_contains_point(
    pos: Tuple[float, float], top_left: Tuple[float, float], size: Tuple[float, float]
) -> bool:
    """True when pos lies in the half-open rectangle at top_left with the given size."""
    x, y = pos
    left, top = top_left
    width, height = size
    return left <= x < left + width and top <= y < top + height


def take_pending(pending: Optional[MutableSequence[str]]) -> list[str]:
    """Move all pending lines out of the list, leaving it empty."""
    if not pending:
        return []
    taken = list(pending)
    pending.clear()
    return taken


def _go_style_ext(path: str) -> str:
    base = os.path.basename(path)
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def classify_dropped_uris(
    uris: Iterable[Union[str, os.PathLike, None]],
    is_supported_ext: Callable[[str], bool],
    stat: Callable[[str], os.stat_result] = os.stat,
) -> DroppedPaths:
    """Split dropped URIs into supported file paths and human-facing skip lines."""
    seen: set[str] = set()
    out = DroppedPaths()
    for uri in uris:
        try:
            path = uri_local_path(uri)
        except ValueError as err:
            out.unsupported.append(drop_reject_reason(err))
            continue
        if path in seen:
            continue
        seen.add(path)
        name = os.path.basename(path)
        try:
            info = stat(path)
        except OSError:
            out.unsupported.append(
                f"{name}: could not be opened — check it exists and you have permission, "
                "or use Add images…"
            )
            continue
        if stat_mod.S_ISDIR(info.st_mode):
            out.unsupported.append(f"{name}: folders are not supported (drop files only)")
            continue
        if not is_supported_ext(_go_style_ext(path)):
            out.unsupported.append(f"{name}: unsupported type")
            continue
        out.supported.append(path)
    return out