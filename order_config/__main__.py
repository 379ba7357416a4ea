# Path: order_config/__main__.py
"""Allow ``python -m order_config``."""

import sys

from .main import main

sys.exit(main())
