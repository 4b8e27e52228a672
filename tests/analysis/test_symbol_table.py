"""
Tests for Symbol Table Type Inference.

Verifies that the `SymbolTableAnalyzer` infers:
1.  Literal, container and arithmetic types.
2.  Declared types from annotations (`Optional`, `X | Y`, `Literal`, forward refs).
3.  Union types after diverging control flow.
4.  Call results for annotated functions, classes and unshadowed builtins.
5.  Enumeration members with their backing kind.
"""

import libcst as cst
import libcst.matchers as m
import pytest

from strict_comparisons.analysis.static_types import (
  ANY,
  BYTES,
  FLOAT,
  INT,
  NONE,
  STR,
  ClassType,
  EnumType,
  LiteralType,
  UnionType,
)
from strict_comparisons.analysis.symbol_table import SymbolTableAnalyzer, get_full_name, get_leaf_name


def analyze(code: str) -> SymbolTableAnalyzer:
  analyzer = SymbolTableAnalyzer()
  cst.parse_module(code).visit(analyzer)
  return analyzer


def global_type(code: str, name: str):
  return analyze(code).root_scope.get(name)


@pytest.mark.parametrize(
  "code, expected",
  [
    ("x = 1", LiteralType(value=1)),
    ("x = 'a'", LiteralType(value="a")),
    ("x = True", LiteralType(value=True)),
    ("x = None", NONE),
    ("x = 1.5", LiteralType(value=1.5)),
    ("x = -1", LiteralType(value=-1)),
    ("x = 1 + 2", INT),
    ("x = 1 / 2", FLOAT),
    ("x = 1 + 2.0", FLOAT),
    ("x = 'a' + 'b'", STR),
    ("x = 'a' * 3", STR),
    ("x = f'{1}'", STR),
    ("x = [1, 2]", ClassType("list")),
    ("x = {}", ClassType("dict")),
  ],
)
def test_expression_types(code, expected):
  assert global_type(code, "x") == expected


def test_not_is_boolean():
  assert global_type("x = not y", "x").name == "bool"


def test_literal_bool_differs_from_int():
  assert global_type("x = True", "x") != LiteralType(value=1)


def test_unknown_names_are_any():
  analyzer = analyze("x = y")
  assert analyzer.root_scope.get("x") == ANY


@pytest.mark.parametrize(
  "code, expected",
  [
    ("from typing import Optional\nx: Optional[int] = None", UnionType(types=(INT, NONE))),
    ("x: int | str = 1", UnionType(types=(INT, STR))),
    ("from typing import Union\nx: Union[str, None] = None", UnionType(types=(STR, NONE))),
    (
      "from typing import Literal\nx: Literal['a', 'b'] = 'a'",
      UnionType(types=(LiteralType(value="a"), LiteralType(value="b"))),
    ),
    ("from typing import Final\nx: Final[int] = 1", INT),
    ("x: 'str' = ''", STR),
    ("x: SomeClass", ClassType("SomeClass")),
  ],
)
def test_annotation_types(code, expected):
  assert global_type(code, "x") == expected


def test_forward_reference_to_class():
  code = "class Foo:\n    pass\n\nx: 'Foo' = Foo()\n"
  assert global_type(code, "x") == ClassType("Foo")


def test_if_else_merges_to_union():
  code = "if c:\n    x = 1\nelse:\n    x = 'a'\n"
  assert global_type(code, "x") == UnionType(types=(LiteralType(value=1), LiteralType(value="a")))


def test_range_loop_variable_is_int():
  assert global_type("for i in range(3):\n    pass\n", "i") == INT


def test_string_loop_variable_is_str():
  assert global_type("for ch in 'abc':\n    pass\n", "ch") == STR


def test_comprehension_does_not_leak():
  code = "x = 'a'\ny = [x for x in range(3)]\n"
  assert global_type(code, "x") == LiteralType(value="a")
  assert global_type(code, "y") == ClassType("list")


def test_ternary_is_union():
  assert global_type("x = 1 if c else None", "x") == UnionType(types=(LiteralType(value=1), NONE))


def test_annotated_function_result():
  code = "def f() -> str:\n    return ''\n\ny = f()\n"
  assert global_type(code, "y") == STR


def test_builtin_results():
  assert global_type("n = len(x)", "n") == INT
  assert global_type("s = str(x)", "s") == STR


def test_shadowed_builtin_is_not_trusted():
  code = "def len(x):\n    return x\n\nn = len(y)\n"
  assert global_type(code, "n") == ANY


def test_class_call_is_instance():
  code = "class Foo:\n    pass\n\nx = Foo()\n"
  assert global_type(code, "x") == ClassType("Foo")


def test_int_enum_member():
  code = "from enum import IntEnum\n\nclass Level(IntEnum):\n    LOW = 1\n    HIGH = 2\n\nx = Level.LOW\n"
  assert global_type(code, "x") == EnumType(name="Level", numeric=True, member="LOW")


def test_plain_enum_member_and_value():
  code = "import enum\n\nclass Color(enum.Enum):\n    RED = 'r'\n\nx = Color.RED\nn = Color.RED.name\n"
  assert global_type(code, "x") == EnumType(name="Color", member="RED")
  assert global_type(code, "n") == STR


def test_method_parameters():
  code = "class A:\n    def m(self, other: int):\n        return self == other\n"
  module = cst.parse_module(code)
  analyzer = SymbolTableAnalyzer()
  module.visit(analyzer)
  comparison = m.findall(module, m.Comparison())[0]
  assert analyzer.table.type_of(comparison.left) == ClassType("A")
  assert analyzer.table.type_of(comparison.comparisons[0].comparator) == INT


def test_name_helpers():
  expr = cst.parse_expression("typing.Optional[int]")
  assert get_full_name(expr.value) == "typing.Optional"
  assert get_leaf_name(expr) == "Optional"
  assert get_full_name(cst.parse_expression("f()")) == ""


def test_bytes_operations():
  assert global_type("x = b'a' + b'b'", "x") == BYTES
  assert global_type("x = b'ab'[0]", "x") == INT
  assert global_type("x = b'ab'[:1]", "x") == BYTES
  assert global_type("for n in b'ab':\n    pass\n", "n") == INT
