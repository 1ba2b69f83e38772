"""Allow ``python -m gogo``."""

import sys

from gogo.cli import main

sys.exit(main())
