"""
Tests for Type Classification.

Verifies:
1.  Each flag category maps to its kind (string, number, boolean, null, any, object).
2.  First matching rule wins when a type carries several categories.
3.  Unions classify per member, deduplicated, in first-seen order.
4.  Enumerations land on their backing kind and never on `Kind.ENUM`.
5.  Classification is deterministic and total.
"""

import pytest

from strict_comparisons.analysis.static_types import (
  ANY,
  BOOL,
  BYTES,
  FLOAT,
  INT,
  NONE,
  STR,
  ClassType,
  EnumType,
  LiteralType,
  PrimitiveType,
  make_union,
)
from strict_comparisons.core.classifier import classify, classify_member, describe
from strict_comparisons.enums import Kind, TypeFlags


@pytest.mark.parametrize(
  "sym_type, expected",
  [
    (STR, Kind.STRING),
    (LiteralType(value="a"), Kind.STRING),
    (INT, Kind.NUMBER),
    (FLOAT, Kind.NUMBER),
    (LiteralType(value=1.5), Kind.NUMBER),
    (BOOL, Kind.BOOLEAN),
    (LiteralType(value=True), Kind.BOOLEAN),
    (NONE, Kind.NULL_OR_UNDEFINED),
    (PrimitiveType("void", TypeFlags.VOID), Kind.NULL_OR_UNDEFINED),
    (PrimitiveType("undefined", TypeFlags.UNDEFINED), Kind.NULL_OR_UNDEFINED),
    (ANY, Kind.ANY),
    (ClassType("Foo"), Kind.OBJECT),
    (BYTES, Kind.STRING),
  ],
)
def test_single_type_kinds(sym_type, expected):
  assert classify(sym_type) == (expected,)


def test_bool_literal_is_not_a_number():
  """`True == 1` in Python, but the literal kinds must stay apart."""
  assert classify(LiteralType(value=True)) == (Kind.BOOLEAN,)
  assert classify(LiteralType(value=1)) == (Kind.NUMBER,)


def test_first_matching_rule_wins():
  assert classify_member(PrimitiveType("odd", TypeFlags.STRING | TypeFlags.NUMBER)) == Kind.STRING
  assert classify_member(PrimitiveType("odd", TypeFlags.NUMBER | TypeFlags.BOOLEAN)) == Kind.NUMBER
  assert classify_member(PrimitiveType("odd", TypeFlags.ANY | TypeFlags.NULL)) == Kind.NULL_OR_UNDEFINED


def test_union_members_deduplicated_in_order():
  union = make_union([INT, STR, LiteralType(value=2), LiteralType(value="x")])
  assert classify(union) == (Kind.NUMBER, Kind.STRING)


def test_optional_object_union():
  union = make_union([ClassType("Foo"), NONE])
  assert classify(union) == (Kind.OBJECT, Kind.NULL_OR_UNDEFINED)


@pytest.mark.parametrize(
  "enum_type, expected",
  [
    (EnumType(name="Color"), Kind.OBJECT),
    (EnumType(name="Color", member="RED"), Kind.OBJECT),
    (EnumType(name="Level", numeric=True), Kind.NUMBER),
    (EnumType(name="Level", numeric=True, member="LOW"), Kind.NUMBER),
    (EnumType(name="Mode", textual=True, member="READ"), Kind.STRING),
  ],
)
def test_enums_use_backing_kind(enum_type, expected):
  assert classify(enum_type) == (expected,)


def test_enum_kind_is_never_produced():
  samples = [
    STR,
    INT,
    BOOL,
    NONE,
    ANY,
    ClassType("Foo"),
    EnumType(name="E"),
    EnumType(name="E", numeric=True),
    PrimitiveType("flagged", TypeFlags.ENUM),
    PrimitiveType("flagged", TypeFlags.ENUM_LITERAL),
  ]
  for sym_type in samples:
    assert Kind.ENUM not in classify(sym_type)


def test_deterministic_and_total():
  samples = [STR, INT, BOOL, NONE, ANY, ClassType("Foo"), make_union([INT, NONE]), PrimitiveType("bare", TypeFlags.NONE)]
  for sym_type in samples:
    first = classify(sym_type)
    assert first
    assert classify(sym_type) == first


def test_describe_joins_display_names():
  assert describe((Kind.NUMBER, Kind.STRING)) == "number | string"
  assert describe((Kind.NULL_OR_UNDEFINED,)) == "null | undefined"
  assert describe((Kind.OBJECT, Kind.ANY)) == "object | any"
