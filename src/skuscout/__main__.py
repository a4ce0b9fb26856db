# ▶️ skuscout/__main__.py
"""▶️ `python -m skuscout`."""

import sys

from skuscout.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
