"""Entry point for running outlinesync as a module.

Usage:
    python -m outlinesync render notification.json
"""

import sys

from outlinesync.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
