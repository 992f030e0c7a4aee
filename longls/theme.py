"""ANSI palettes for entry names and palette selection helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ListingTheme:
    """Escapes used around entry names."""

    name: str
    directory: str
    executable: str
    default: str
    reset: str


DEFAULT_THEME = ListingTheme(
    name="default",
    directory="\033[1;34m",
    executable="\033[0;31m",
    default="\033[0m",
    reset="\033[0m",
)

OCEAN_THEME = ListingTheme(
    name="ocean",
    directory="\033[1;38;5;45m",
    executable="\033[38;5;215m",
    default="\033[38;5;252m",
    reset="\033[0m",
)

_THEMES: dict[str, ListingTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None) -> ListingTheme:
    """Return concrete theme for requested name."""
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "ListingTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
