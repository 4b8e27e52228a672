"""
Rules Command Handler.

Lists the registered rules and their metadata.
"""

from rich.table import Table

from strict_comparisons.rules import available_rules, get_rule
from strict_comparisons.utils.console import console


def handle_rules() -> int:
  """
  Prints the rule registry as a table.

  Returns:
      int: Exit code (always 0).
  """
  table = Table(title="Available Rules")
  table.add_column("Rule", style="rule")
  table.add_column("Type")
  table.add_column("Category", style="dim")
  table.add_column("Recommended")
  table.add_column("Options", style="dim")
  table.add_column("Description")

  for name in available_rules():
    meta = get_rule(name)
    table.add_row(
      meta.name,
      meta.type,
      meta.category,
      meta.recommended or "-",
      ", ".join(meta.options) or "-",
      meta.description,
    )

  console.print(table)
  return 0
