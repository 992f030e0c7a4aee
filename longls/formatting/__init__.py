"""Pure formatters for listing columns: size, time, mode, color, and names."""

from __future__ import annotations

from .color import color_for_mode
from .mode import ACL_MARKER, MARKER_POSITION, XATTR_MARKER, build_mode_string, with_marker
from .size import human_readable
from .text import sanitize_entry_name
from .timestamps import format_mtime

__all__ = [
    "ACL_MARKER",
    "MARKER_POSITION",
    "XATTR_MARKER",
    "build_mode_string",
    "color_for_mode",
    "format_mtime",
    "human_readable",
    "sanitize_entry_name",
    "with_marker",
]
