"""
Operator Policy.

Applies operator-class specific rules to a governing kind:

* Equality (`==`, `!=`, `===`, `!==`) is allowed for primitives and enums.
  Objects and null-like values need `allowObjectEqualComparison`.
* Ordering (`<`, `>`, `<=`, `>=`) is allowed for numbers and `any`.
  Strings need `allowStringOrderComparison`; nothing else can be ordered.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

from strict_comparisons.config import StrictComparisonsOptions
from strict_comparisons.enums import Kind, MessageId, OperatorClass

EQUALITY_OPERATORS: FrozenSet[str] = frozenset({"==", "!=", "===", "!=="})
ORDERING_OPERATORS: FrozenSet[str] = frozenset({"<", ">", "<=", ">="})

_ALWAYS_ALLOWED: Dict[OperatorClass, FrozenSet[Kind]] = {
  OperatorClass.EQUALITY: frozenset({Kind.ANY, Kind.NUMBER, Kind.ENUM, Kind.STRING, Kind.BOOLEAN}),
  OperatorClass.ORDERING: frozenset({Kind.ANY, Kind.NUMBER}),
}


@dataclass(frozen=True)
class PolicyDecision:
  """
  Outcome of an operator policy check.
  """

  allowed: bool
  reason: Optional[MessageId] = None


ALLOW = PolicyDecision(allowed=True)
REJECT = PolicyDecision(allowed=False, reason=MessageId.INVALID_TYPE_FOR_OPERATOR)


def operator_class(operator: str) -> Optional[OperatorClass]:
  """
  Classifies an operator symbol.

  Args:
      operator: The operator as written (e.g. "<=").

  Returns:
      The operator class, or None if the operator is not a comparison.
  """
  if operator in EQUALITY_OPERATORS:
    return OperatorClass.EQUALITY
  if operator in ORDERING_OPERATORS:
    return OperatorClass.ORDERING
  return None


def decide(kind: Kind, op_class: OperatorClass, options: StrictComparisonsOptions) -> PolicyDecision:
  """
  Decides whether a governing kind may be used with an operator class.

  Args:
      kind: The governing kind from the resolver.
      op_class: Equality or ordering.
      options: Rule options carrying the two override flags.

  Returns:
      `ALLOW` or `REJECT`.
  """
  if kind in _ALWAYS_ALLOWED[op_class]:
    return ALLOW

  if op_class is OperatorClass.EQUALITY:
    if kind in (Kind.NULL_OR_UNDEFINED, Kind.OBJECT) and options.allow_object_equal_comparison:
      return ALLOW
    return REJECT

  if kind is Kind.STRING and options.allow_string_order_comparison:
    return ALLOW
  return REJECT
