"""Directory listing driver.

Validates the target path, enumerates children, describes them, then prints
the records newest first. Fatal conditions surface as ``ListingError``
subclasses for the CLI to map onto exit codes.
"""

from __future__ import annotations

import sys
from typing import TextIO

from .config import ListingSettings, load_listing_settings
from .describe import describe_directory
from .entries.fs import list_children, path_exists
from .entries.types import FormattedRecord
from .errors import IdentityResolutionError, PathNotAccessibleError
from .ranking import print_records, rank_records
from .theme import resolve_theme


def list_directory(
    path: str,
    settings: ListingSettings | None = None,
    stream: TextIO | None = None,
    error_stream: TextIO | None = None,
) -> list[FormattedRecord]:
    """List ``path`` to ``stream`` and return the printed records in order.

    Raises ``PathNotAccessibleError`` before any directory I/O when ``path``
    cannot be probed and ``DirectoryOpenError`` when it cannot be scanned. A
    strict-mode identity failure writes its diagnostic to ``error_stream`` and
    prints nothing.
    """
    if not path_exists(path):
        raise PathNotAccessibleError(path)
    names = list_children(path)

    if settings is None:
        settings = load_listing_settings()
    theme = resolve_theme(settings.theme_name)
    try:
        records = describe_directory(path, names, theme, strict_identity=settings.strict_identity)
    except IdentityResolutionError as exc:
        err = sys.stderr if error_stream is None else error_stream
        err.write(f"{exc}\n")
        return []

    ranked = rank_records(records)
    print_records(ranked, stream)
    return ranked


__all__ = ["list_directory"]
