"""Module entrypoint for running Nittei as ``python -m nittei``."""

from __future__ import annotations

from nittei.cli import main


if __name__ == "__main__":
    main()
