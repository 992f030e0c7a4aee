"""Exception types raised by the listing pipeline.

Each fatal failure mode has its own type so the CLI can map it to an exit code.
Per-entry metadata failures are not represented here: they skip the entry.
"""

from __future__ import annotations


class ListingError(Exception):
    """Base class for failures that stop a directory listing."""


class PathNotAccessibleError(ListingError):
    """Target path does not exist or cannot be probed."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Error: {path} not exist or inaccessible!")
        self.path = path


class DirectoryOpenError(ListingError):
    """Target path exists but cannot be opened as a directory."""

    def __init__(self, path: str, cause: OSError | None = None) -> None:
        super().__init__(f"Could not open directory {path}")
        self.path = path
        self.cause = cause


class IdentityResolutionError(ListingError):
    """Owner or group id has no name; aborts the describe pass in strict mode."""

    def __init__(self, kind: str, identity_id: int) -> None:
        super().__init__(f"Couldn't get {kind} name")
        self.kind = kind
        self.identity_id = identity_id


__all__ = [
    "ListingError",
    "PathNotAccessibleError",
    "DirectoryOpenError",
    "IdentityResolutionError",
]
