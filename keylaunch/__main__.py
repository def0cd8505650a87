"""Module entrypoint for ``python -m keylaunch``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and search setup happen in ``keylaunch.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
