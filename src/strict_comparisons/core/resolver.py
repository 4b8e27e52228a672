"""
Comparability Resolution.

Decides whether two operand kind-sets are comparable and, if so, which single
kind governs the operator policy check. When several kinds are eligible the
strictest one wins, where strictness is the explicit rank from `KIND_RANK`.
"""

from typing import Iterable, Union

from strict_comparisons.enums import Kind


class _Incomparable:
  """Sentinel type for operand pairs with no shared or fallback kind."""

  _instance = None

  def __new__(cls) -> "_Incomparable":
    if cls._instance is None:
      cls._instance = super().__new__(cls)
    return cls._instance

  def __repr__(self) -> str:
    return "INCOMPARABLE"

  def __bool__(self) -> bool:
    return False


INCOMPARABLE = _Incomparable()

Resolution = Union[Kind, _Incomparable]


def strictest_kind(kinds: Iterable[Kind]) -> Kind:
  """
  Returns the kind with the highest rank.

  Args:
      kinds: A non-empty collection of kinds.

  Returns:
      The strictest kind.
  """
  return max(kinds, key=lambda kind: kind.rank)


def resolve(left: Iterable[Kind], right: Iterable[Kind]) -> Resolution:
  """
  Resolves the governing kind of a comparison.

  1. If the sides share kinds, the strictest shared kind governs.
  2. If one side contains `ANY`, the strictest kind of the other side governs.
  3. A nullable side against an object side is an object comparison.
  4. Otherwise the operands are incomparable.

  Every rule is checked in both directions, so `resolve(l, r) == resolve(r, l)`.

  Args:
      left: Kind-set of the left operand.
      right: Kind-set of the right operand.

  Returns:
      The governing `Kind`, or `INCOMPARABLE`.
  """
  left_kinds = frozenset(left)
  right_kinds = frozenset(right)

  overlap = left_kinds & right_kinds
  if overlap:
    return strictest_kind(overlap)

  # Both sides containing ANY is already covered by the overlap.
  if Kind.ANY in left_kinds:
    return strictest_kind(right_kinds)
  if Kind.ANY in right_kinds:
    return strictest_kind(left_kinds)

  if (Kind.NULL_OR_UNDEFINED in left_kinds and Kind.OBJECT in right_kinds) or (
    Kind.NULL_OR_UNDEFINED in right_kinds and Kind.OBJECT in left_kinds
  ):
    return Kind.OBJECT

  return INCOMPARABLE
