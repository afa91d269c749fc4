"""Allow ``python -m mdpage``."""

import sys

from mdpage.cli import main

sys.exit(main())
