"""Allow ``python -m temp_cleaner``."""

from .cli import main

raise SystemExit(main())
