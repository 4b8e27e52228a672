"""
Class Name Casing Analysis.

This module provides the `ClassNameCasingScanner`, a LibCST visitor that
requires PascalCased names for class-like declarations:

1.  **Class definitions**: `class Foo: ...`, reported as `Class`, `Abstract class`
    (ABC base or ABCMeta metaclass) or `Interface` (Protocol base).
2.  **Named class expressions**: dynamic class factories with a literal name,
    e.g. `type("Foo", (), {})` or `namedtuple("Point", "x y")`.
3.  **Anonymous class expressions**: factories given an empty name and bound to a
    variable, e.g. `foo = type("", (), {})`. The variable name is checked.

An anonymous class expression that is not bound to a name is never reported,
nor is a factory whose name is computed at runtime (`type(name, (), {})`).
"""

import re
from typing import Dict, Optional

import libcst as cst
from libcst.metadata import PositionProvider

from strict_comparisons.analysis.symbol_table import get_leaf_name
from strict_comparisons.core.diagnostics import Diagnostic, DiagnosticSink, SourceLocation
from strict_comparisons.enums import MessageId
from strict_comparisons.rules import CLASS_NAME_CASING

PASCAL_CASE = re.compile(r"^[A-Z][0-9A-Za-z]*$")

# Factory callable -> friendly name of the declaration it creates.
_CLASS_FACTORIES: Dict[str, str] = {
  "type": "Class",
  "new_class": "Class",
  "namedtuple": "NamedTuple",
  "NamedTuple": "NamedTuple",
  "TypedDict": "TypedDict",
}


def is_pascal_case(name: str) -> bool:
  """
  Determine if the identifier name is PascalCased.

  Args:
      name: The identifier.

  Returns:
      True if the name starts with an uppercase letter and is alphanumeric.
  """
  return PASCAL_CASE.match(name) is not None


def class_friendly_name(node: cst.ClassDef) -> str:
  """
  Describes a class definition for messages.

  Args:
      node: The class definition.

  Returns:
      "Interface", "Abstract class" or "Class".
  """
  base_names = {get_leaf_name(arg.value) for arg in node.bases}
  if "Protocol" in base_names:
    return "Interface"
  if "ABC" in base_names:
    return "Abstract class"
  for keyword in node.keywords:
    if keyword.keyword and keyword.keyword.value == "metaclass" and get_leaf_name(keyword.value) == "ABCMeta":
      return "Abstract class"
  return "Class"


class ClassNameCasingScanner(cst.CSTVisitor):
  """
  Reports class-like declarations whose bound identifier is not PascalCased.
  """

  METADATA_DEPENDENCIES = (PositionProvider,)

  def __init__(self, sink: DiagnosticSink):
    """
    Initializes the scanner.

    Args:
        sink: Receiver of diagnostics.
    """
    self.sink = sink

  def _report(self, friendly_name: str, name: str, node: cst.CSTNode) -> None:
    position = self.get_metadata(PositionProvider, node, None)
    location = SourceLocation(position.start.line, position.start.column) if position else None
    self.sink.report(
      Diagnostic(
        rule=CLASS_NAME_CASING,
        message_id=MessageId.NOT_PASCAL_CASED,
        data={"friendlyName": friendly_name, "name": name},
        location=location,
      )
    )

  def _factory_kind(self, node: cst.BaseExpression) -> Optional[str]:
    """Returns the friendly name if the node is a class factory call."""
    if not isinstance(node, cst.Call):
      return None
    factory = get_leaf_name(node.func)
    if factory not in _CLASS_FACTORIES:
      return None
    # type(x) with a single argument is a type query, not a class expression.
    if factory == "type" and len(node.args) != 3:
      return None
    if not node.args:
      return None
    return _CLASS_FACTORIES[factory]

  def _factory_name(self, node: cst.Call) -> Optional[str]:
    """
    Returns the literal class name given to a factory.

    An empty string means the class is anonymous. None means the name is
    computed at runtime (a variable, an f-string) and cannot be checked.
    """
    name_arg = node.args[0].value
    if isinstance(name_arg, (cst.SimpleString, cst.ConcatenatedString)):
      value = name_arg.evaluated_value
      if isinstance(value, str):
        return value
    return None

  def visit_ClassDef(self, node: cst.ClassDef) -> None:
    """
    Checks a class definition name.

    Args:
        node: The class definition.
    """
    name = node.name.value
    if not is_pascal_case(name):
      self._report(class_friendly_name(node), name, node.name)

  def visit_Call(self, node: cst.Call) -> None:
    """
    Checks the literal name of a named class expression.

    Args:
        node: Any call; only class factories are considered.
    """
    kind = self._factory_kind(node)
    if kind is None:
      return
    name = self._factory_name(node)
    if name and not is_pascal_case(name):
      self._report(kind, name, node.args[0].value)

  def _check_binding(self, target: cst.BaseExpression, value: Optional[cst.BaseExpression]) -> None:
    if value is None or not isinstance(target, cst.Name):
      return
    kind = self._factory_kind(value)
    if kind is None or self._factory_name(value) != "":
      return
    if not is_pascal_case(target.value):
      self._report(kind, target.value, target)

  def visit_Assign(self, node: cst.Assign) -> None:
    """
    Checks a variable bound to an anonymous class expression.

    Args:
        node: The assignment.
    """
    if len(node.targets) == 1:
      self._check_binding(node.targets[0].target, node.value)

  def visit_AnnAssign(self, node: cst.AnnAssign) -> None:
    """
    Checks an annotated variable bound to an anonymous class expression.

    Args:
        node: The annotated assignment.
    """
    self._check_binding(node.target, node.value)
