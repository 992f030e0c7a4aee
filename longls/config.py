"""Read-only JSON user config.

Selects the name palette and whether identity lookup failures abort a listing.
All access is defensive: malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .theme import normalize_theme_name

APP_NAME = "longls"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


@dataclass(frozen=True)
class ListingSettings:
    """Listing options resolved from config."""

    theme_name: str = "default"
    strict_identity: bool = False


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_listing_settings() -> ListingSettings:
    """Resolve listing settings from config.

    Unknown theme names fall back to the default palette. Only an explicit
    boolean enables ``strict_identity``.
    """
    data = load_config()
    theme = data.get("theme")
    strict = data.get("strict_identity")
    return ListingSettings(
        theme_name=normalize_theme_name(theme if isinstance(theme, str) else None),
        strict_identity=strict if isinstance(strict, bool) else False,
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "ListingSettings",
    "load_config",
    "load_listing_settings",
]
