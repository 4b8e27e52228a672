"""
Tests for Centralized Logging Utility and Injection Mechanics.

Verifies:
1. Singleton Proxy correctness.
2. Injection capabilities (`set_console`), with separate report and log consoles.
3. Standard logging wrappers and the verbose switch.
"""

import io
import logging

from rich.console import Console
from rich.table import Table

from strict_comparisons.utils.console import (
  SUCCESS_LEVEL_NUM,
  console,
  log_error,
  log_info,
  log_success,
  log_warning,
  reset_console,
  set_console,
  set_verbose,
)


def capturing_console() -> Console:
  return Console(record=True, file=io.StringIO(), width=120)


def test_console_singleton_proxy():
  """
  Verify `console` acts as a proxy to a real Rich console.
  """
  assert callable(console.print)
  assert hasattr(console, "export_text")
  assert isinstance(console.backend, Console)


def test_custom_console_injection():
  """
  Verify we can inject a capturing console and retrieve logs.
  """
  capture = capturing_console()
  set_console(capture)

  log_info("Captured Log")
  log_warning("Careful")
  log_error("Broken")
  log_success("Done")

  output = capture.export_text()
  assert "Captured Log" in output
  assert "Careful" in output
  assert "Broken" in output
  assert "SUCCESS" in output
  assert logging.getLevelName(SUCCESS_LEVEL_NUM) == "SUCCESS"


def test_reports_and_logs_are_separate():
  reports = capturing_console()
  logs = capturing_console()
  set_console(reports, logs)

  console.print("table row")
  log_error("problem")

  assert "table row" in reports.export_text()
  assert "problem" not in reports.export_text()
  assert "problem" in logs.export_text()


def test_reset_functionality():
  """
  Verify `reset_console` restores a fresh default backend.
  """
  temp = capturing_console()
  set_console(temp)
  assert console.backend is temp

  reset_console()
  assert console.backend is not temp


def test_set_verbose():
  set_verbose(True)
  assert logging.getLogger("strict_comparisons").getEffectiveLevel() == logging.DEBUG
  set_verbose(False)
  assert logging.getLogger("strict_comparisons").level == logging.NOTSET


def test_injected_console_resolves_table_styles():
  """
  Report tables use the application's custom styles ("rule", "path"); a plain
  injected Console must still render them.
  """
  reports = Console(record=True, file=io.StringIO(), width=120)
  logs = Console(record=True, file=io.StringIO(), width=120)
  set_console(reports, logs)

  table = Table()
  table.add_column("Location", style="path")
  table.add_column("Rule", style="rule")
  table.add_row("mod.py:1:0", "strict-comparisons")
  console.print(table)
  log_info("[rule]styled log[/rule]")

  assert "strict-comparisons" in reports.export_text()
  assert "styled log" in logs.export_text()
