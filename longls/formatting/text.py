"""Terminal-safe rendering of entry names."""

from __future__ import annotations

import re

# C0 controls + DEL + C1 controls, plus surrogate escapes for undecodable bytes.
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f\udc80-\udcff]")
_SURROGATE_ESCAPE_BASE = 0xDC00


def _escape_char(match: re.Match[str]) -> str:
    code = ord(match.group(0))
    if code > 0xFF:
        code -= _SURROGATE_ESCAPE_BASE
    return f"\\x{code:02x}"


def sanitize_entry_name(name: str) -> str:
    """Escape characters that are unsafe to write to a terminal.

    Control characters (newlines and tabs included) keep each entry on one
    line. Bytes that ``os.fsdecode`` could not decode arrive as lone surrogates
    and are rendered as ``\\xNN`` of the original byte so a strict UTF-8 stream
    can still encode the row.
    """
    if _CONTROL_RE.search(name) is None:
        return name
    return _CONTROL_RE.sub(_escape_char, name)


__all__ = ["sanitize_entry_name"]
