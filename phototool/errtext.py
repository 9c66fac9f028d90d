"""Short, user-facing copy for library and album failures."""

from __future__ import annotations

from typing import Optional

_COLLECTION_GONE = "This album is no longer in the library. Refresh and try again."
_FOREIGN_KEY_GONE = (
    "This photo or album is no longer in the library. Refresh Review and try again."
)
_LIBRARY_READ_FAILED = (
    "Could not read the library. Check that the library folder is available, then try again."
)
_LIBRARY_UPDATE_FAILED = (
    "Could not update the library. Check that the library folder is available, then try again."
)
_DATABASE_BUSY = (
    "The library database is busy. Wait a moment, close other copies of this app "
    "if any are open, then try again."
)
_DISK_TROUBLE = (
    "The library disk may be full or unreadable. Free disk space, check the library "
    "folder, then try again."
)
_TRASH_MOVE_FAILED = (
    "Could not move the photo into library trash (.trash). Check disk space and that "
    "the library folder is writable, then try again."
)
_PATH_UNRESOLVED = (
    "Could not resolve the photo's path in your library. Return to Review and refresh; "
    "if it continues, the database may need repair."
)
_PERMISSION_DENIED = (
    "Permission denied. Check that the library folder and files are readable and "
    "writable, then try again."
)
_FILE_OPEN_FAILED = (
    "Could not open the selected file. Check permissions and try again, "
    "or pick a different file."
)


class CollectionNotFoundError(LookupError):
    """Raised when a collection (album) row no longer exists."""

    def __init__(self, message: str = "collection not found") -> None:
        super().__init__(message)


def _is_collection_not_found(err: BaseException) -> bool:
    """Walk the exception chain looking for a missing-collection error."""
    seen: set[int] = set()
    current: Optional[BaseException] = err
    while current is not None and id(current) not in seen:
        if isinstance(current, CollectionNotFoundError):
            return True
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return False


def collection_store_err_text(err: Optional[BaseException]) -> str:
    """Map store failures to short album copy; other messages pass through unchanged."""
    if err is None:
        return ""
    if _is_collection_not_found(err):
        return _COLLECTION_GONE
    text = str(err)
    if "FOREIGN KEY" in text:
        return _FOREIGN_KEY_GONE
    return text


def library_err_text(err: Optional[BaseException]) -> str:
    """Map library read failures to factual copy with a next step."""
    if err is None:
        return ""
    mapped = collection_store_err_text(err)
    if mapped != str(err):
        return mapped
    return _LIBRARY_READ_FAILED


def user_facing_collection_write_err_text(err: Optional[BaseException]) -> str:
    """Map album create/update/link failures without surfacing raw database text."""
    if err is None:
        return ""
    mapped = collection_store_err_text(err)
    plain = str(err)
    if mapped != plain:
        return mapped
    low = plain.lower()
    if any(
        fragment in low
        for fragment in ("sqlite", "constraint failed", "no such table", "sql logic error")
    ):
        return _LIBRARY_UPDATE_FAILED
    if plain.startswith(("create collection:", "update collection:")):
        return plain
    return user_facing_dialog_err_text(err)


def user_facing_dialog_err_text(err: Optional[BaseException]) -> str:
    """Map failures shown in error dialogs to short factual copy with a next step."""
    if err is None:
        return ""
    mapped = collection_store_err_text(err)
    if mapped != str(err):
        return mapped
    low = str(err).lower()
    if (
        "database is locked" in low
        or "sqlite_busy" in low
        or ("locked" in low and "sqlite" in low)
    ):
        return _DATABASE_BUSY
    if "disk i/o" in low or "sqlite_full" in low or "no space left" in low:
        return _DISK_TROUBLE
    if any(
        fragment in low
        for fragment in (
            "delete mkdir quarantine",
            "delete quarantine rename",
            "delete stat source",
            "delete asset update",
        )
    ):
        return _TRASH_MOVE_FAILED
    if any(
        fragment in low
        for fragment in (
            "delete asset path",
            "asset path escapes",
            "asset path resolves to library root",
        )
    ):
        return _PATH_UNRESOLVED
    if "permission denied" in low:
        return _PERMISSION_DENIED
    return _LIBRARY_UPDATE_FAILED


def user_facing_file_open_err_text(err: Optional[BaseException]) -> str:
    """Copy for file-picker failures on the upload surface."""
    if err is None:
        return ""
    return _FILE_OPEN_FAILED