"""
Comparison Expression Scanner.

This module provides the `ComparisonScanner`, a LibCST visitor that finds every
comparison in a module, pairs each operator with the inferred types of its two
operands, and hands the resulting `ComparisonExpression` to the evaluator.

Chained comparisons are split pairwise: `a < b <= c` is checked as `a < b` and
`b <= c`. Identity (`is`, `is not`) and membership (`in`, `not in`) tests are not
value comparisons and are skipped.
"""

from typing import Dict, List, Optional, Type

import libcst as cst
from libcst.metadata import PositionProvider

from strict_comparisons.analysis.symbol_table import SymbolTable
from strict_comparisons.core.diagnostics import DiagnosticSink, SourceLocation
from strict_comparisons.core.evaluator import ComparisonEvaluator, ComparisonExpression

_OPERATOR_SYMBOLS: Dict[Type[cst.BaseCompOp], str] = {
  cst.Equal: "==",
  cst.NotEqual: "!=",
  cst.LessThan: "<",
  cst.GreaterThan: ">",
  cst.LessThanEqual: "<=",
  cst.GreaterThanEqual: ">=",
}


def operator_symbol(operator: cst.BaseCompOp) -> Optional[str]:
  """
  Maps a LibCST comparison operator node to its symbol.

  Args:
      operator: The operator node of a `ComparisonTarget`.

  Returns:
      The symbol (e.g. "<="), or None for identity and membership tests.
  """
  return _OPERATOR_SYMBOLS.get(type(operator))


class ComparisonScanner(cst.CSTVisitor):
  """
  Feeds every comparison of a module to a `ComparisonEvaluator`.

  Attributes:
      expressions (List[ComparisonExpression]): Every comparison evaluated, in source order.
  """

  METADATA_DEPENDENCIES = (PositionProvider,)

  def __init__(self, table: SymbolTable, evaluator: ComparisonEvaluator, sink: DiagnosticSink):
    """
    Initializes the scanner.

    Args:
        table: Types inferred by a prior `SymbolTableAnalyzer` pass over the same tree.
        evaluator: The policy evaluator.
        sink: Receiver of diagnostics.
    """
    self.table = table
    self.evaluator = evaluator
    self.sink = sink
    self.expressions: List[ComparisonExpression] = []

  def _location(self, node: cst.CSTNode) -> Optional[SourceLocation]:
    position = self.get_metadata(PositionProvider, node, None)
    if position is None:
      return None
    return SourceLocation(line=position.start.line, column=position.start.column)

  def visit_Comparison(self, node: cst.Comparison) -> None:
    """
    Evaluates each operator of a (possibly chained) comparison.

    Args:
        node: The comparison node.
    """
    left = node.left
    for target in node.comparisons:
      right = target.comparator
      symbol = operator_symbol(target.operator)
      if symbol is not None:
        expression = ComparisonExpression(
          operator=symbol,
          left_type=self.table.type_of(left),
          right_type=self.table.type_of(right),
          location=self._location(left),
        )
        self.expressions.append(expression)
        self.evaluator.evaluate(expression, self.sink)
      left = right
