"""Datatypes for per-entry metadata and formatted listing rows."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryEntryMetadata:
    """Metadata observed for one directory child.

    ``modified_at_epoch`` is whole seconds; the probe drops sub-second precision.
    """

    name: str
    mode: int
    link_count: int
    owner_id: int
    group_id: int
    size_bytes: int
    modified_at_epoch: int
    has_extended_attributes: bool = False
    has_access_control_list: bool = False


@dataclass(frozen=True)
class FormattedRecord:
    """One rendered listing line keyed by modification time."""

    sort_key: int
    line: str


__all__ = [
    "DirectoryEntryMetadata",
    "FormattedRecord",
]
