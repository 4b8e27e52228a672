"""
Type Classification.

Reduces a static type, including unions, to the semantic kinds used by the
comparability resolver. Classification is a pure function of the type and
never fails: every type maps to exactly one `Kind` per union member.
"""

from functools import lru_cache
from typing import List, Tuple

from strict_comparisons.analysis.static_types import StaticType, union_members
from strict_comparisons.enums import Kind, TypeFlags

KindSet = Tuple[Kind, ...]


def classify(sym_type: StaticType) -> KindSet:
  """
  Classifies a type into its operand kind-set.

  Each union member is classified independently. Duplicates are dropped and
  first-seen order is kept so that diagnostic text follows the declared order.

  Args:
      sym_type: The resolved static type of an operand.

  Returns:
      A non-empty tuple of distinct kinds.
  """
  return _classify_cached(sym_type)


@lru_cache(maxsize=1024)
def _classify_cached(sym_type: StaticType) -> KindSet:
  kinds: List[Kind] = []
  for member in union_members(sym_type):
    kind = classify_member(member)
    if kind not in kinds:
      kinds.append(kind)
  return tuple(kinds)


def classify_member(sym_type: StaticType) -> Kind:
  """
  Classifies a single non-union type. First matching rule wins.

  Note:
      `Kind.ENUM` is never returned. Enum types carry the flags of their
      backing value and land on `NUMBER`, `STRING` or `OBJECT` instead. The
      kind stays in the vocabulary because the equality policy lists it.

  Args:
      sym_type: A non-union static type.

  Returns:
      The semantic kind.
  """
  if sym_type.is_flag_set(TypeFlags.STRING_LIKE):
    return Kind.STRING
  if sym_type.is_flag_set(TypeFlags.NUMBER_LIKE):
    return Kind.NUMBER
  if sym_type.is_flag_set(TypeFlags.BOOLEAN_LIKE):
    return Kind.BOOLEAN
  if sym_type.is_flag_set(TypeFlags.NULLISH):
    return Kind.NULL_OR_UNDEFINED
  if sym_type.is_flag_set(TypeFlags.ANY):
    return Kind.ANY
  return Kind.OBJECT


def describe(kinds: KindSet) -> str:
  """
  Joins the display names of a kind-set for diagnostics (e.g. "number | string").

  Args:
      kinds: An operand kind-set.

  Returns:
      The " | " separated display names.
  """
  return " | ".join(kind.display_name for kind in kinds)
