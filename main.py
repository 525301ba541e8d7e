#!/usr/bin/env python3
"""pomotimer entry point.

Run with:
    python main.py
    python -m pomotimer
"""

import sys

from pomotimer.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
