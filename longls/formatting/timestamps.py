"""Modification-time labels in ``ls -l`` short form (no year)."""

from __future__ import annotations

import time

# C-locale month names; labels must not change with LC_TIME.
_MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def format_mtime(epoch_seconds: int) -> str:
    """Render ``epoch_seconds`` in local time as ``"Jun 05 14:32"``."""
    local = time.localtime(epoch_seconds)
    month = _MONTH_ABBREVIATIONS[local.tm_mon - 1]
    return f"{month} {local.tm_mday:02d} {local.tm_hour:02d}:{local.tm_min:02d}"


__all__ = ["format_mtime"]
