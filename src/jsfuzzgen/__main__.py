"""Entry point for ``python -m jsfuzzgen``."""

import sys

from .cli import main

sys.exit(main())
