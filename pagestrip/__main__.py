"""Entry point for ``python -m pagestrip``."""

import sys

from .cli import main

sys.exit(main())
