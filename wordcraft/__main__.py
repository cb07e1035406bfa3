"""Module entrypoint for running wordcraft as ``python -m wordcraft``."""

from __future__ import annotations

from wordcraft.cli import main


if __name__ == "__main__":
    main()
