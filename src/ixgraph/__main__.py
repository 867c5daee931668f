"""Run the graph inspection CLI with ``python -m ixgraph``."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
