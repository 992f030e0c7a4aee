"""Filesystem probes backing the listing: existence, enumeration, metadata."""

from __future__ import annotations

import os

from ..errors import DirectoryOpenError
from .types import DirectoryEntryMetadata

POSIX_ACL_ATTRIBUTE_NAMES = frozenset({"system.posix_acl_access", "system.posix_acl_default"})


def path_exists(path: str) -> bool:
    """Return whether one ``stat`` probe of ``path`` succeeds."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def list_children(directory: str) -> list[str]:
    """Return child names in filesystem order.

    Raises ``DirectoryOpenError`` when ``directory`` cannot be scanned.
    """
    try:
        with os.scandir(directory) as entries:
            return [entry.name for entry in entries]
    except OSError as exc:
        raise DirectoryOpenError(directory, exc) from exc


def attribute_names(path: str) -> tuple[str, ...]:
    """Return extended-attribute names of ``path`` itself (symlinks not followed).

    Platforms without ``os.listxattr`` and filesystems that refuse the query
    report no attributes.
    """
    listxattr = getattr(os, "listxattr", None)
    if listxattr is None:
        return ()
    try:
        return tuple(listxattr(path, follow_symlinks=False))
    except OSError:
        return ()


def has_extended_attributes(path: str, names: tuple[str, ...] | None = None) -> bool:
    """Return whether ``path`` carries extended attributes other than ACL storage."""
    if names is None:
        names = attribute_names(path)
    return any(name not in POSIX_ACL_ATTRIBUTE_NAMES for name in names)


def has_access_control_list(path: str, names: tuple[str, ...] | None = None) -> bool:
    """Return whether ``path`` carries a POSIX access or default ACL."""
    if names is None:
        names = attribute_names(path)
    return any(name in POSIX_ACL_ATTRIBUTE_NAMES for name in names)


def probe_entry_metadata(directory: str, name: str) -> DirectoryEntryMetadata:
    """Collect metadata for ``directory``/``name``.

    Follows symlinks like ``stat``; raises ``OSError`` when the probe fails
    (e.g. a dangling link) so callers can skip the entry.
    """
    full_path = os.path.join(directory, name)
    st = os.stat(full_path)
    names = attribute_names(full_path)
    return DirectoryEntryMetadata(
        name=name,
        mode=int(st.st_mode),
        link_count=int(st.st_nlink),
        owner_id=int(st.st_uid),
        group_id=int(st.st_gid),
        size_bytes=int(st.st_size),
        modified_at_epoch=int(st.st_mtime_ns // 1_000_000_000),
        has_extended_attributes=has_extended_attributes(full_path, names),
        has_access_control_list=has_access_control_list(full_path, names),
    )


__all__ = [
    "POSIX_ACL_ATTRIBUTE_NAMES",
    "path_exists",
    "list_children",
    "attribute_names",
    "has_extended_attributes",
    "has_access_control_list",
    "probe_entry_metadata",
]
