"""Newest-first ordering and output of formatted records."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from .entries.types import FormattedRecord


def rank_records(records: Iterable[FormattedRecord]) -> list[FormattedRecord]:
    """Sort records by modification time, newest first; ties keep input order."""
    return sorted(records, key=lambda record: record.sort_key, reverse=True)


def print_records(records: Iterable[FormattedRecord], stream: TextIO | None = None) -> None:
    """Write each record's line to ``stream`` (stdout by default)."""
    out = sys.stdout if stream is None else stream
    for record in records:
        out.write(record.line)
        out.write("\n")


__all__ = ["rank_records", "print_records"]
