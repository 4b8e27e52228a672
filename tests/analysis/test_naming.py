"""
Tests for Class Name Casing.

Verifies:
1.  Class, abstract class and interface definitions must be PascalCased.
2.  Named class expressions check the literal name.
3.  Anonymous class expressions check the variable they are bound to.
4.  Unbound anonymous class expressions and plain `type(x)` queries are ignored.
"""

import libcst as cst
import pytest

from strict_comparisons.analysis.naming import ClassNameCasingScanner, is_pascal_case
from strict_comparisons.core.diagnostics import CollectingSink, SourceLocation
from strict_comparisons.enums import MessageId


def scan(code: str):
  sink = CollectingSink()
  cst.MetadataWrapper(cst.parse_module(code)).visit(ClassNameCasingScanner(sink))
  return [d.data for d in sink.diagnostics]


@pytest.mark.parametrize(
  "name, expected",
  [
    ("Foo", True),
    ("FooBar2", True),
    ("HTTPServer", True),
    ("foo", False),
    ("fooBar", False),
    ("Foo_Bar", False),
    ("_Foo", False),
    ("", False),
  ],
)
def test_is_pascal_case(name, expected):
  assert is_pascal_case(name) is expected


def test_pascal_cased_class_passes():
  assert scan("class Foo:\n    pass\n") == []


def test_lowercase_class_reported():
  sink = CollectingSink()
  cst.MetadataWrapper(cst.parse_module("class foo:\n    pass\n")).visit(ClassNameCasingScanner(sink))
  diagnostic = sink.diagnostics[0]
  assert diagnostic.message_id is MessageId.NOT_PASCAL_CASED
  assert diagnostic.data == {"friendlyName": "Class", "name": "foo"}
  assert diagnostic.message == "Class 'foo' must be PascalCased."
  assert diagnostic.location == SourceLocation(line=1, column=6)


@pytest.mark.parametrize(
  "code, friendly",
  [
    ("from abc import ABC\nclass base(ABC):\n    pass\n", "Abstract class"),
    ("import abc\nclass base(abc.ABC):\n    pass\n", "Abstract class"),
    ("from abc import ABCMeta\nclass base(metaclass=ABCMeta):\n    pass\n", "Abstract class"),
    ("from typing import Protocol\nclass readable(Protocol):\n    pass\n", "Interface"),
    ("from typing import Protocol, TypeVar\nT = TypeVar('T')\nclass box(Protocol[T]):\n    pass\n", "Interface"),
  ],
)
def test_friendly_names(code, friendly):
  data = scan(code)
  assert len(data) == 1
  assert data[0]["friendlyName"] == friendly


def test_anonymous_class_checks_variable():
  assert scan("foo = type('', (), {})\n") == [{"friendlyName": "Class", "name": "foo"}]
  assert scan("Foo = type('', (), {})\n") == []


def test_annotated_binding():
  assert scan("foo: type = type('', (), {})\n") == [{"friendlyName": "Class", "name": "foo"}]


@pytest.mark.parametrize(
  "code",
  [
    "def f(name):\n    cls = type(name, (), {})\n",
    "cls = type(f'{prefix}Model', (), {})\n",
    "record = namedtuple(spec.name, spec.fields)\n",
    "model: type = new_class(name)\n",
  ],
)
def test_runtime_computed_names_ignored(code):
  """The class has a name, it is just not known statically."""
  assert scan(code) == []


def test_unbound_anonymous_class_ignored():
  assert scan("type('', (), {})\n") == []
  assert scan("make(type('', (), {}))\n") == []


def test_named_class_expression_checks_literal():
  assert scan("x = type('Foo', (), {})\n") == []
  assert scan("x = type('foo', (), {})\n") == [{"friendlyName": "Class", "name": "foo"}]


def test_namedtuple_and_typeddict():
  assert scan("from collections import namedtuple\npoint = namedtuple('point', 'x y')\n") == [
    {"friendlyName": "NamedTuple", "name": "point"}
  ]
  assert scan("from typing import TypedDict\nMovie = TypedDict('Movie', {'name': str})\n") == []


def test_type_query_ignored():
  assert scan("t = type(x)\n") == []
