"""
Main Entry Point for strict-comparisons CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `strict_comparisons.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from strict_comparisons.config import LintConfig, parse_cli_key_values
from strict_comparisons.cli import commands
from strict_comparisons.rules import available_rules
from strict_comparisons.utils.console import log_error, set_verbose
from strict_comparisons import __version__


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="strict-comparisons: Type-aware comparison linter")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CHECK ---
  cmd_check = subparsers.add_parser("check", help="Lint a Python file or directory")
  cmd_check.add_argument("path", type=Path, help="Input source file or directory")
  cmd_check.add_argument(
    "--rules",
    nargs="+",
    choices=available_rules(),
    default=None,
    help="Rules to run (default: from toml, else all recommended rules)",
  )
  cmd_check.add_argument(
    "--allow-object-equal-comparison",
    action="store_true",
    default=None,
    help="Allow equality comparisons of objects and None (Overrides config)",
  )
  cmd_check.add_argument(
    "--allow-string-order-comparison",
    action="store_true",
    default=None,
    help="Allow ordering comparisons of strings (Overrides config)",
  )
  cmd_check.add_argument(
    "--config",
    nargs="*",
    help="Rule options in key=value format (e.g. allowStringOrderComparison=true)",
  )
  cmd_check.add_argument("--json", action="store_true", help="Print diagnostics as JSON")

  # --- Command: RULES ---
  subparsers.add_parser("rules", help="List available rules")

  args = parser.parse_args(argv)
  set_verbose(args.verbose)

  if args.command == "check":
    try:
      config = LintConfig.load(
        rules=args.rules,
        allow_object_equal_comparison=args.allow_object_equal_comparison,
        allow_string_order_comparison=args.allow_string_order_comparison,
        options=parse_cli_key_values(args.config),
        search_path=args.path if args.path.is_dir() else args.path.parent,
      )
    except ValueError as e:
      log_error(str(e))
      return 2
    return commands.handle_check(args.path, config, args.json)

  elif args.command == "rules":
    return commands.handle_rules()

  return 0


if __name__ == "__main__":
  sys.exit(main())
