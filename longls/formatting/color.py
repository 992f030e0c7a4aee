"""Name color selection from a rendered mode string."""

from __future__ import annotations

from ..theme import DEFAULT_THEME, ListingTheme
from .mode import OWNER_EXECUTE_POSITION


def color_for_mode(mode_string: str, theme: ListingTheme = DEFAULT_THEME) -> str:
    """Return the escape that prefixes an entry name.

    Directories get ``theme.directory``; regular files with the owner-execute
    bit get ``theme.executable``; everything else gets ``theme.default``.
    """
    if not mode_string:
        return theme.default
    type_char = mode_string[0]
    if type_char == "d":
        return theme.directory
    if type_char == "-" and len(mode_string) > OWNER_EXECUTE_POSITION and mode_string[OWNER_EXECUTE_POSITION] == "x":
        return theme.executable
    return theme.default


__all__ = ["color_for_mode"]
