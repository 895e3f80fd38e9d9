"""Allow ``python -m railfence``."""

import sys

from railfence.cli import main

if __name__ == "__main__":
    sys.exit(main())
