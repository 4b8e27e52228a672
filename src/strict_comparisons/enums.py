"""
Enumerations for strict-comparisons.

This module defines the closed vocabularies shared by the analysis core and the
host front end: semantic comparison kinds, static type flags, operator classes,
and diagnostic message identifiers.
"""

from enum import Enum, IntFlag
from typing import Dict


class Kind(str, Enum):
  """
  Semantic class a static type resolves to for comparison purposes.

  The definition order carries no meaning. Ordering between kinds is looked up
  in `KIND_RANK`, never derived from the member order or value.
  """

  ANY = "any"
  NUMBER = "number"
  ENUM = "enum"  # Reserved: no classification rule produces it (see classifier.py)
  STRING = "string"
  BOOLEAN = "boolean"
  NULL_OR_UNDEFINED = "null_or_undefined"
  OBJECT = "object"

  @property
  def rank(self) -> int:
    """Tie-breaking rank. Higher wins when several kinds are eligible."""
    return KIND_RANK[self]

  @property
  def display_name(self) -> str:
    """Human-readable name used in diagnostic messages."""
    return KIND_DISPLAY_NAMES[self]


KIND_RANK: Dict[Kind, int] = {
  Kind.ANY: 0,
  Kind.NUMBER: 1,
  Kind.ENUM: 2,
  Kind.STRING: 3,
  Kind.BOOLEAN: 4,
  Kind.NULL_OR_UNDEFINED: 5,
  Kind.OBJECT: 6,
}

KIND_DISPLAY_NAMES: Dict[Kind, str] = {
  Kind.ANY: "any",
  Kind.NUMBER: "number",
  Kind.ENUM: "enum",
  Kind.STRING: "string",
  Kind.BOOLEAN: "boolean",
  Kind.NULL_OR_UNDEFINED: "null | undefined",
  Kind.OBJECT: "object",
}


class TypeFlags(IntFlag):
  """
  Bit flags describing a static type.

  Only the composite categories (`STRING_LIKE`, `NUMBER_LIKE`, `BOOLEAN_LIKE`,
  `NULLISH`) and `ANY` are inspected by the classifier.
  """

  NONE = 0
  ANY = 1 << 0
  STRING = 1 << 1
  NUMBER = 1 << 2
  BOOLEAN = 1 << 3
  ENUM = 1 << 4
  STRING_LITERAL = 1 << 5
  NUMBER_LITERAL = 1 << 6
  BOOLEAN_LITERAL = 1 << 7
  ENUM_LITERAL = 1 << 8
  NULL = 1 << 9
  UNDEFINED = 1 << 10
  VOID = 1 << 11
  OBJECT = 1 << 12
  UNION = 1 << 13

  STRING_LIKE = STRING | STRING_LITERAL
  NUMBER_LIKE = NUMBER | NUMBER_LITERAL
  BOOLEAN_LIKE = BOOLEAN | BOOLEAN_LITERAL
  NULLISH = NULL | UNDEFINED | VOID


class OperatorClass(str, Enum):
  """
  Policy family a comparison operator belongs to.
  """

  EQUALITY = "equality"  # == != === !==
  ORDERING = "ordering"  # < > <= >=


class MessageId(str, Enum):
  """
  Identifiers of the diagnostics emitted by the bundled rules.
  """

  NON_COMPARABLE_TYPES = "nonComparableTypes"
  INVALID_TYPE_FOR_OPERATOR = "invalidTypeForOperator"
  NOT_PASCAL_CASED = "notPascalCased"
