"""Allow running as ``python -m stock_agent``."""

import sys

from stock_agent.cli import main

sys.exit(main())
