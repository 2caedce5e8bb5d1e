"""Run the reqsign CLI."""

import sys

from reqsign.cli import main

if __name__ == "__main__":
    sys.exit(main())
