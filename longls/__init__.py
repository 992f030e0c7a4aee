"""Public package surface for longls.

Exports ``main`` for programmatic CLI invocation.
The listing pipeline lives in submodules under ``longls``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
