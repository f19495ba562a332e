"""Allow ``python -m bajzel``."""

import sys

from .cli import main

sys.exit(main())
