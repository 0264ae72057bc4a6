"""Module entrypoint for running the inspector as ``python -m vpnconfig``."""

from __future__ import annotations

from vpnconfig.cli import main


if __name__ == "__main__":
    main()
