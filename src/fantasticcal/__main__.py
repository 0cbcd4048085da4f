"""Allow ``python -m fantasticcal``."""

import sys

from fantasticcal.cli import main

sys.exit(main())
