"""Allow ``python -m skillmart``."""

from skillmart.cli.main import main

raise SystemExit(main())
