"""
strict-comparisons Package.

A type-aware linter for Python comparisons. Each operand of `==`, `!=`, `<`,
`>`, `<=` and `>=` is reduced to a semantic kind (number, string, boolean,
null-like, object, any) and the comparison is flagged when the kinds are
unrelated or the operator makes no sense for them, e.g. ordering objects.

Usage
-----

Simple String Check
^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import strict_comparisons as sc
    for diagnostic in sc.lint('x = 1 == "a"'):
        print(diagnostic.message)
    # cannot compare type 'number' to type 'string'

Advanced Usage (Engine)
^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from strict_comparisons import LintEngine, LintConfig, StrictComparisonsOptions

    options = StrictComparisonsOptions(allowStringOrderComparison=True)
    engine = LintEngine(LintConfig(strict_comparisons=options))
    result = engine.run('ok = "a" < "b"')
    assert not result.has_diagnostics
"""

from typing import List, Optional

__version__ = "0.1.0"

from strict_comparisons.config import LintConfig, StrictComparisonsOptions
from strict_comparisons.core.diagnostics import Diagnostic
from strict_comparisons.core.engine import LintEngine, LintResult


def lint(
  code: str,
  allow_object_equal_comparison: bool = False,
  allow_string_order_comparison: bool = False,
  rules: Optional[List[str]] = None,
) -> List[Diagnostic]:
  """
  Lints a string of Python code.

  This is a high-level convenience wrapper around the `LintEngine`. For
  file-based checks use `strict_comparisons.cli` or `LintEngine.run_file`.

  Args:
      code (str): The source code to check.
      allow_object_equal_comparison (bool): Permit `==` / `!=` on objects and None.
      allow_string_order_comparison (bool): Permit `<`, `>`, `<=`, `>=` on strings.
      rules (list, optional): Rules to run. Defaults to every recommended rule.

  Returns:
      List[Diagnostic]: The findings, sorted by position.

  Raises:
      ValueError: If the code cannot be parsed.
  """
  options = StrictComparisonsOptions(
    allow_object_equal_comparison=allow_object_equal_comparison,
    allow_string_order_comparison=allow_string_order_comparison,
  )
  config = LintConfig(strict_comparisons=options) if rules is None else LintConfig(rules=rules, strict_comparisons=options)
  result = LintEngine(config).run(code)

  if not result.success:
    raise ValueError("\n".join(result.errors))

  return result.diagnostics


__all__ = [
  "Diagnostic",
  "LintConfig",
  "LintEngine",
  "LintResult",
  "StrictComparisonsOptions",
  "lint",
  "__version__",
]
