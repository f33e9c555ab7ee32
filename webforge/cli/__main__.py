#!/usr/bin/env python3
"""Entry point for webforge CLI when run as python -m webforge.cli."""

if __name__ == "__main__":
    from webforge.cli.main import main

    main()
