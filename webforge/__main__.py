"""Entry point for running webforge as a module: ``python -m webforge build``."""

from __future__ import annotations

from webforge.cli.main import main

if __name__ == "__main__":
    main()
