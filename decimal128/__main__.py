"""Allow ``python -m decimal128``."""

import sys

from decimal128.cli import main

sys.exit(main())
