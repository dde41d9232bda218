"""Allow running Sketchboard with ``python -m sketchboard``."""

from .app import main

main()
