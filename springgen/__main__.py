"""Allow ``python -m springgen``."""

from springgen.cli import main

raise SystemExit(main())
