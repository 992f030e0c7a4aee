"""Human-readable byte counts using 1024-based units."""

from __future__ import annotations

KIB = 1024
MIB = KIB * KIB
GIB = MIB * KIB

_UNIT_BANDS = (
    (GIB, "G"),
    (MIB, "M"),
    (KIB, "K"),
)


def human_readable(size_bytes: int) -> str:
    """Render ``size_bytes`` as ``"500B"``, ``"2.0K"``, ``"5.0M"`` or ``"1.5G"``.

    Byte counts below 1 KiB print as integers; larger values print the quotient
    with one decimal. Exact powers of 1024 belong to the larger unit, so
    ``1024`` renders as ``"1.0K"``.
    """
    if size_bytes < 0:
        raise ValueError(f"size must be non-negative: {size_bytes}")
    for threshold, suffix in _UNIT_BANDS:
        if size_bytes >= threshold:
            return f"{size_bytes / threshold:.1f}{suffix}"
    return f"{size_bytes}B"


__all__ = ["KIB", "MIB", "GIB", "human_readable"]
