"""Allow running covserve with ``python -m covserve``."""

from covserve.cli import main

main()
