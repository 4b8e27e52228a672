"""
Comparison Evaluation.

The `ComparisonEvaluator` drives the check for one comparison expression at a
time: classify both operands, resolve the governing kind, apply the operator
policy, and report at most one diagnostic. It holds no state between
expressions beyond the read-only rule options.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from strict_comparisons.analysis.static_types import StaticType
from strict_comparisons.config import StrictComparisonsOptions
from strict_comparisons.core.classifier import classify, describe
from strict_comparisons.core.diagnostics import Diagnostic, DiagnosticSink, SourceLocation
from strict_comparisons.core.policy import decide, operator_class
from strict_comparisons.core.resolver import INCOMPARABLE, resolve
from strict_comparisons.enums import MessageId
from strict_comparisons.rules import STRICT_COMPARISONS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonExpression:
  """
  A comparison to evaluate: an operator and the static types of both operands.
  """

  operator: str
  left_type: StaticType
  right_type: StaticType
  location: Optional[SourceLocation] = None


class ComparisonEvaluator:
  """
  Evaluates comparison expressions against the strict-comparisons policy.
  """

  def __init__(self, options: Optional[StrictComparisonsOptions] = None):
    """
    Initializes the evaluator.

    Args:
        options: Rule options. Defaults to all overrides disabled.
    """
    self.options = options or StrictComparisonsOptions()

  def check(self, expression: ComparisonExpression) -> Optional[Diagnostic]:
    """
    Computes the diagnostic for a comparison, if any.

    Args:
        expression: The comparison to check.

    Returns:
        The diagnostic, or None if the comparison is allowed or the operator
        is not a comparison.
    """
    op_class = operator_class(expression.operator)
    if op_class is None:
      return None

    left_kinds = classify(expression.left_type)
    right_kinds = classify(expression.right_type)

    governing = resolve(left_kinds, right_kinds)
    if governing is INCOMPARABLE:
      return Diagnostic(
        rule=STRICT_COMPARISONS,
        message_id=MessageId.NON_COMPARABLE_TYPES,
        data={"typesLeft": describe(left_kinds), "typesRight": describe(right_kinds)},
        location=expression.location,
      )

    decision = decide(governing, op_class, self.options)
    if decision.allowed:
      return None

    return Diagnostic(
      rule=STRICT_COMPARISONS,
      message_id=decision.reason,
      data={"comparator": expression.operator, "type": governing.display_name},
      location=expression.location,
    )

  def evaluate(self, expression: ComparisonExpression, sink: DiagnosticSink) -> Optional[Diagnostic]:
    """
    Checks a comparison and reports its diagnostic to a sink.

    Args:
        expression: The comparison to check.
        sink: Receiver of the diagnostic.

    Returns:
        The reported diagnostic, or None.
    """
    diagnostic = self.check(expression)
    if diagnostic is not None:
      logger.debug(f"{expression.location}: {diagnostic.message}")
      sink.report(diagnostic)
    return diagnostic
