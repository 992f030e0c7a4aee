"""Fixed-width mode strings with an extended-attribute/ACL marker slot.

The string is ``stat.filemode`` output (type char plus nine permission chars)
followed by one marker column. The marker is blank, ``@`` for extended
attributes, or ``+`` for an ACL; the ACL marker wins when both apply.
"""

from __future__ import annotations

import stat

MODE_STRING_LENGTH = 11
MARKER_POSITION = 10
OWNER_EXECUTE_POSITION = 3
BLANK_MARKER = " "
XATTR_MARKER = "@"
ACL_MARKER = "+"


def with_marker(mode_string: str, marker: str) -> str:
    """Return ``mode_string`` with the marker column replaced by ``marker``."""
    return mode_string[:MARKER_POSITION] + marker + mode_string[MARKER_POSITION + 1 :]


def build_mode_string(
    mode: int,
    *,
    has_extended_attributes: bool = False,
    has_access_control_list: bool = False,
) -> str:
    """Build the 11-character mode string for ``st_mode`` bits."""
    mode_string = stat.filemode(mode) + BLANK_MARKER
    if has_extended_attributes:
        mode_string = with_marker(mode_string, XATTR_MARKER)
    if has_access_control_list:
        mode_string = with_marker(mode_string, ACL_MARKER)
    return mode_string


__all__ = [
    "MODE_STRING_LENGTH",
    "MARKER_POSITION",
    "OWNER_EXECUTE_POSITION",
    "BLANK_MARKER",
    "XATTR_MARKER",
    "ACL_MARKER",
    "with_marker",
    "build_mode_string",
]
