"""
CLI Command Handlers Facade.

Re-exports the handlers from `strict_comparisons.cli.handlers` so that the
dispatcher (and tests patching it) have a single import location.
"""

from strict_comparisons.cli.handlers.check import handle_check, collect_files
from strict_comparisons.cli.handlers.rules import handle_rules

__all__ = [
  "collect_files",
  "handle_check",
  "handle_rules",
]
