"""Domain model and filesystem probes for directory children.

This package contains non-rendering primitives:
- per-entry metadata and formatted-row datatypes
- path validation and directory enumeration
- metadata, extended-attribute and ACL probes
"""

from __future__ import annotations

from .types import DirectoryEntryMetadata, FormattedRecord
from .fs import (
    POSIX_ACL_ATTRIBUTE_NAMES,
    attribute_names,
    has_access_control_list,
    has_extended_attributes,
    list_children,
    path_exists,
    probe_entry_metadata,
)

__all__ = [
    "DirectoryEntryMetadata",
    "FormattedRecord",
    "POSIX_ACL_ATTRIBUTE_NAMES",
    "attribute_names",
    "has_access_control_list",
    "has_extended_attributes",
    "list_children",
    "path_exists",
    "probe_entry_metadata",
]
