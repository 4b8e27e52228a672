"""
Entry point for module execution (``python -m strict_comparisons``).

This module delegates execution to the CLI handler in ``strict_comparisons.cli.__main__``.
"""

import sys
from strict_comparisons.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
