"""Allow running aspectlog via ``python -m aspectlog``."""

from aspectlog.cli import main

main()
