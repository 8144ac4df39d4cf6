"""Allow running as python -m netparse."""

import sys

from .main import main

sys.exit(main())
