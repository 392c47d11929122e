"""Allow ``python -m precopy``."""

import sys

from precopy.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
