"""Allow ``python -m number_prettifier``."""

from __future__ import annotations

import sys

from .cli import main

sys.exit(main())
