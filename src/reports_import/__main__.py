"""Allow ``python -m reports_import``."""

import sys

from reports_import.cli import main

if __name__ == "__main__":
    sys.exit(main())
