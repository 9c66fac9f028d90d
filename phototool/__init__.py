"""Review-surface logic for a local photo library: grid paging, loupe navigation, drops, undo, imaging, display scale and error copy."""

__version__ = "0.1.0"

__all__ = [
    "display_scale",
    "drops",
    "errtext",
    "grid",
    "imaging",
    "loupe",
    "loupe_layout",
    "undo",
]