"""Turn directory children into formatted listing records.

Each child is probed for metadata, its owner and group ids are resolved to
names, and the columns are composed into one colorized row. Children whose
probe fails are skipped. Identity failures either fall back to the numeric id
or, in strict mode, abort the whole pass.
"""

from __future__ import annotations

import grp
import pwd
from collections.abc import Callable, Iterable

from .entries.fs import probe_entry_metadata
from .entries.types import DirectoryEntryMetadata, FormattedRecord
from .errors import IdentityResolutionError
from .formatting.color import color_for_mode
from .formatting.mode import build_mode_string
from .formatting.size import human_readable
from .formatting.text import sanitize_entry_name
from .formatting.timestamps import format_mtime
from .theme import DEFAULT_THEME, ListingTheme

LINK_COUNT_WIDTH = 2
SIZE_WIDTH = 6

IdentityLookup = Callable[[int], str]
MetadataProbe = Callable[[str, str], DirectoryEntryMetadata]


def lookup_owner_name(uid: int) -> str:
    """Return the login name for ``uid``; raises ``KeyError`` when unknown."""
    return pwd.getpwuid(uid).pw_name


def lookup_group_name(gid: int) -> str:
    """Return the group name for ``gid``; raises ``KeyError`` when unknown."""
    return grp.getgrgid(gid).gr_name


def resolve_identity(identity_id: int, lookup: IdentityLookup, kind: str, *, strict: bool = False) -> str:
    """Resolve ``identity_id`` through ``lookup``.

    Unknown ids render as their decimal value unless ``strict`` is set, in
    which case ``IdentityResolutionError`` is raised.
    """
    try:
        return lookup(identity_id)
    except KeyError as exc:
        if strict:
            raise IdentityResolutionError(kind, identity_id) from exc
        return str(identity_id)


def compose_line(
    metadata: DirectoryEntryMetadata,
    owner_name: str,
    group_name: str,
    theme: ListingTheme = DEFAULT_THEME,
) -> str:
    """Lay out one listing row; the name is wrapped in color and reset escapes."""
    mode_string = build_mode_string(
        metadata.mode,
        has_extended_attributes=metadata.has_extended_attributes,
        has_access_control_list=metadata.has_access_control_list,
    )
    color = color_for_mode(mode_string, theme)
    size = human_readable(metadata.size_bytes)
    when = format_mtime(metadata.modified_at_epoch)
    name = sanitize_entry_name(metadata.name)
    return (
        f"{mode_string}  {metadata.link_count:>{LINK_COUNT_WIDTH}} {owner_name}  {group_name} "
        f"{size:>{SIZE_WIDTH}} {when} {color}{name}{theme.reset}"
    )


def describe_entry(
    metadata: DirectoryEntryMetadata,
    theme: ListingTheme = DEFAULT_THEME,
    *,
    strict_identity: bool = False,
    owner_lookup: IdentityLookup = lookup_owner_name,
    group_lookup: IdentityLookup = lookup_group_name,
) -> FormattedRecord:
    """Build the formatted record for one probed entry."""
    owner_name = resolve_identity(metadata.owner_id, owner_lookup, "user", strict=strict_identity)
    group_name = resolve_identity(metadata.group_id, group_lookup, "group", strict=strict_identity)
    return FormattedRecord(
        sort_key=metadata.modified_at_epoch,
        line=compose_line(metadata, owner_name, group_name, theme),
    )


def describe_directory(
    directory: str,
    names: Iterable[str],
    theme: ListingTheme = DEFAULT_THEME,
    *,
    strict_identity: bool = False,
    probe: MetadataProbe = probe_entry_metadata,
    owner_lookup: IdentityLookup = lookup_owner_name,
    group_lookup: IdentityLookup = lookup_group_name,
) -> list[FormattedRecord]:
    """Describe every child in ``names`` in enumeration order.

    Children whose metadata probe raises ``OSError`` contribute no record.
    ``IdentityResolutionError`` propagates in strict mode and leaves the
    remaining children unprocessed.
    """
    records: list[FormattedRecord] = []
    for name in names:
        try:
            metadata = probe(directory, name)
        except OSError:
            continue
        records.append(
            describe_entry(
                metadata,
                theme,
                strict_identity=strict_identity,
                owner_lookup=owner_lookup,
                group_lookup=group_lookup,
            )
        )
    return records


__all__ = [
    "LINK_COUNT_WIDTH",
    "SIZE_WIDTH",
    "lookup_owner_name",
    "lookup_group_name",
    "resolve_identity",
    "compose_line",
    "describe_entry",
    "describe_directory",
]
