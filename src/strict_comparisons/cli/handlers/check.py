"""
Check Command Handler.

Runs the enabled rules over source files and renders the diagnostics either as
a Rich table with a summary or as JSON.
"""

import json
from pathlib import Path
from typing import List

from rich.table import Table

from strict_comparisons.config import LintConfig
from strict_comparisons.core.engine import LintEngine, LintResult
from strict_comparisons.utils.console import console, log_error, log_info, log_success


def collect_files(path: Path) -> List[Path]:
  """
  Expands a path into the Python files to check.

  Args:
      path: A file or a directory.

  Returns:
      The file itself, or every ``*.py`` file below the directory in sorted order.
  """
  if path.is_file():
    return [path]
  return sorted(path.rglob("*.py"))


def _render_table(results: List[LintResult]) -> None:
  table = Table(title="Comparison and Naming Diagnostics")
  table.add_column("Location", style="path")
  table.add_column("Rule", style="rule")
  table.add_column("Message")

  for result in results:
    for diagnostic in result.diagnostics:
      where = result.path or "<string>"
      if diagnostic.location:
        where = f"{where}:{diagnostic.location}"
      table.add_row(where, diagnostic.rule, diagnostic.message)

  console.print(table)


def handle_check(path: Path, config: LintConfig, json_mode: bool = False) -> int:
  """
  Lints a file or directory.

  Args:
      path: Input source file or directory.
      config: The resolved lint configuration.
      json_mode: If True, output JSON to stdout and suppress Rich logs.

  Returns:
      int: Exit code (0 if clean, 1 if any diagnostic or failure).
  """
  if not path.exists():
    log_error(f"Path not found: {path}")
    return 1

  files = collect_files(path)
  engine = LintEngine(config)

  if not json_mode:
    log_info(f"Checking {len(files)} files with rules: {', '.join(config.rules)}...")

  results: List[LintResult] = []
  for f in files:
    result = engine.run_file(f)
    if not result.success:
      # Parse errors are logged even in JSON mode (stderr).
      log_error(f"Failed to analyse {f}: {'; '.join(result.errors)}")
    results.append(result)

  diagnostics_count = sum(len(r.diagnostics) for r in results)
  failures = [r for r in results if not r.success]

  if json_mode:
    output = []
    for result in results:
      for diagnostic in result.diagnostics:
        item = {"path": result.path, **diagnostic.to_dict()}
        output.append(item)
    print(json.dumps(output, indent=2))
    return 1 if diagnostics_count or failures else 0

  if diagnostics_count:
    _render_table(results)
    console.print("\n")

  console.print(f"[bold]Check Summary for {path.name}[/bold]")
  console.print(f"Files Checked:     {len(files)}")
  console.print(f"Diagnostics:       [red]{diagnostics_count}[/red]")
  console.print(f"Failed To Parse:   [yellow]{len(failures)}[/yellow]")

  if not diagnostics_count and not failures:
    log_success("No problems found.")
    return 0
  return 1
