"""Allow `python -m docmerge`."""

from docmerge.cli import main

raise SystemExit(main())
