"""Module entrypoint for ``python -m longls``.

Argument parsing and exit-code mapping happen in ``longls.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
