"""Entry point for ``python -m dewey2md``."""

from dewey2md.cli import main

raise SystemExit(main())
