"""
Tests for Operator Policy.

Verifies the equality and ordering decision tables, with and without the
`allowObjectEqualComparison` and `allowStringOrderComparison` overrides.
"""

import pytest

from strict_comparisons.config import StrictComparisonsOptions
from strict_comparisons.core.policy import ALLOW, REJECT, decide, operator_class
from strict_comparisons.enums import Kind, MessageId, OperatorClass

DEFAULT = StrictComparisonsOptions()
OBJECTS = StrictComparisonsOptions(allowObjectEqualComparison=True)
STRINGS = StrictComparisonsOptions(allowStringOrderComparison=True)
EVERYTHING = StrictComparisonsOptions(allowObjectEqualComparison=True, allowStringOrderComparison=True)


@pytest.mark.parametrize("operator", ["==", "!=", "===", "!=="])
def test_equality_operators(operator):
  assert operator_class(operator) is OperatorClass.EQUALITY


@pytest.mark.parametrize("operator", ["<", ">", "<=", ">="])
def test_ordering_operators(operator):
  assert operator_class(operator) is OperatorClass.ORDERING


@pytest.mark.parametrize("operator", ["in", "is", "+", "=", "<<", ""])
def test_other_operators_are_not_comparisons(operator):
  assert operator_class(operator) is None


@pytest.mark.parametrize("kind", [Kind.ANY, Kind.NUMBER, Kind.ENUM, Kind.STRING, Kind.BOOLEAN])
def test_equality_always_allowed(kind):
  assert decide(kind, OperatorClass.EQUALITY, DEFAULT) == ALLOW


@pytest.mark.parametrize("kind", [Kind.NULL_OR_UNDEFINED, Kind.OBJECT])
def test_equality_on_objects_needs_flag(kind):
  assert decide(kind, OperatorClass.EQUALITY, DEFAULT) == REJECT
  assert decide(kind, OperatorClass.EQUALITY, STRINGS) == REJECT
  assert decide(kind, OperatorClass.EQUALITY, OBJECTS) == ALLOW


@pytest.mark.parametrize("kind", [Kind.ANY, Kind.NUMBER])
def test_ordering_always_allowed(kind):
  assert decide(kind, OperatorClass.ORDERING, DEFAULT) == ALLOW


def test_ordering_strings_needs_flag():
  assert decide(Kind.STRING, OperatorClass.ORDERING, DEFAULT) == REJECT
  assert decide(Kind.STRING, OperatorClass.ORDERING, OBJECTS) == REJECT
  assert decide(Kind.STRING, OperatorClass.ORDERING, STRINGS) == ALLOW


@pytest.mark.parametrize("kind", [Kind.BOOLEAN, Kind.ENUM, Kind.NULL_OR_UNDEFINED, Kind.OBJECT])
def test_ordering_never_allowed(kind):
  assert decide(kind, OperatorClass.ORDERING, EVERYTHING) == REJECT


def test_rejection_carries_reason():
  decision = decide(Kind.OBJECT, OperatorClass.ORDERING, DEFAULT)
  assert not decision.allowed
  assert decision.reason is MessageId.INVALID_TYPE_FOR_OPERATOR
  assert ALLOW.reason is None
