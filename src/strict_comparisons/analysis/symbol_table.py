"""
Symbol Table and Type Inference Analysis with Control Flow Support.

This module provides a static analysis pass that infers a `StaticType` for the
expressions of a module. It builds a mapping of CST nodes to inferred types so
that rules can reason about the semantic type of an operand (e.g. "is this a
string?") rather than its syntax.

The `SymbolTableAnalyzer` visitor populates a `SymbolTable` by tracking:
1.  **Literals**: Numbers, strings, booleans and `None`.
2.  **Annotations**: Parameters and annotated assignments, including `Optional`,
    `Union`, `X | Y`, `Literal` and string forward references.
3.  **Assignments**: Propagating types from RHS to LHS.
4.  **Definitions**: Classes (enum members included) and annotated functions.
5.  **Scopes**: Handling nested function, class, lambda and comprehension scopes.
6.  **Control Flow**: Handling type ambiguity in branches (Phi nodes) via Union types.

Anything the analyzer cannot type is statically unconstrained (`ANY`).
"""

import logging
from typing import Dict, List, Optional, Sequence

import libcst as cst

from strict_comparisons.analysis.static_types import (
  ANY,
  BOOL,
  BYTES,
  COMPLEX,
  FLOAT,
  INT,
  NONE,
  STR,
  CallableType,
  ClassRefType,
  ClassType,
  EnumType,
  LiteralType,
  StaticType,
  make_union,
)
from strict_comparisons.enums import TypeFlags

logger = logging.getLogger(__name__)

_ANNOTATION_NAMES: Dict[str, StaticType] = {
  "str": STR,
  "int": INT,
  "float": FLOAT,
  "complex": COMPLEX,
  "bool": BOOL,
  "bytes": BYTES,
  "None": NONE,
  "NoneType": NONE,
  "Any": ANY,
}

# Result types of builtin calls, used only when the name is not rebound.
_BUILTIN_RESULTS: Dict[str, StaticType] = {
  "str": STR,
  "repr": STR,
  "ascii": STR,
  "chr": STR,
  "format": STR,
  "input": STR,
  "int": INT,
  "len": INT,
  "ord": INT,
  "hash": INT,
  "id": INT,
  "float": FLOAT,
  "complex": COMPLEX,
  "bool": BOOL,
  "isinstance": BOOL,
  "issubclass": BOOL,
  "callable": BOOL,
  "hasattr": BOOL,
  "all": BOOL,
  "any": BOOL,
  "bytes": BYTES,
  "list": ClassType("list"),
  "dict": ClassType("dict"),
  "set": ClassType("set"),
  "frozenset": ClassType("frozenset"),
  "tuple": ClassType("tuple"),
  "object": ClassType("object"),
}

_ENUM_BASES = {"Enum", "IntEnum", "Flag", "IntFlag", "StrEnum"}
_NUMERIC_ENUM_BASES = {"IntEnum", "IntFlag"}
_TEXTUAL_ENUM_BASES = {"StrEnum"}

_ARITHMETIC_OPS = (
  cst.Add,
  cst.Subtract,
  cst.Multiply,
  cst.Divide,
  cst.FloorDivide,
  cst.Modulo,
  cst.Power,
  cst.LeftShift,
  cst.RightShift,
  cst.BitAnd,
  cst.BitOr,
  cst.BitXor,
  cst.AddAssign,
  cst.SubtractAssign,
  cst.MultiplyAssign,
  cst.DivideAssign,
  cst.FloorDivideAssign,
  cst.ModuloAssign,
  cst.PowerAssign,
  cst.LeftShiftAssign,
  cst.RightShiftAssign,
  cst.BitAndAssign,
  cst.BitOrAssign,
  cst.BitXorAssign,
)


def _is_float(sym_type: StaticType) -> bool:
  return sym_type == FLOAT or (isinstance(sym_type, LiteralType) and isinstance(sym_type.value, float))


def _is_complex(sym_type: StaticType) -> bool:
  return sym_type == COMPLEX or (isinstance(sym_type, LiteralType) and isinstance(sym_type.value, complex))


def get_full_name(node: cst.BaseExpression) -> str:
  """
  Recursively resolves a CST Name or Attribute chain to a dot-separated string.

  Args:
    node: The CST node representing the identifier.

  Returns:
    str: The dotted name (e.g., "typing.Optional"), or an empty string if the
    node is not a Name/Attribute chain.
  """
  if isinstance(node, cst.Name):
    return node.value
  elif isinstance(node, cst.Attribute):
    prefix = get_full_name(node.value)
    return f"{prefix}.{node.attr.value}" if prefix else ""
  return ""


def get_leaf_name(node: cst.BaseExpression) -> str:
  """
  Returns the last segment of a dotted name (`typing.Optional` -> `Optional`).

  Subscripted names (`Protocol[T]`) resolve to their base.
  """
  if isinstance(node, cst.Subscript):
    node = node.value
  return get_full_name(node).split(".")[-1]


class Scope:
  """
  Represents a variable scope (Global, Class, Function, Lambda or Comprehension).
  """

  def __init__(self, parent: Optional["Scope"] = None, name: str = "<root>", owner: Optional[ClassRefType] = None):
    """
    Initialize the scope.

    Args:
        parent: The enclosing scope (None for global).
        name: Debug name for the scope.
        owner: The class whose body this scope is, if any.
    """
    self.parent = parent
    self.name = name
    self.owner = owner
    self.symbols: Dict[str, StaticType] = {}

  def set(self, name: str, sym_type: StaticType) -> None:
    """
    Register a symbol in the current scope.

    Args:
        name: Variable identifier.
        sym_type: Inferred Type object.
    """
    self.symbols[name] = sym_type

  def get(self, name: str) -> Optional[StaticType]:
    """
    Resolve a symbol, traversing parent scopes.

    Class scopes are not visible from nested function scopes, as in Python.

    Args:
        name: Variable identifier to lookup.

    Returns:
        The StaticType if found, else None.
    """
    if name in self.symbols:
      return self.symbols[name]
    parent = self.parent
    while parent is not None and parent.owner is not None and self.owner is None:
      parent = parent.parent
    if parent:
      return parent.get(name)
    return None

  def snapshot(self) -> Dict[str, StaticType]:
    """Returns a shallow copy of the current symbol table for branching."""
    return self.symbols.copy()


class SymbolTable:
  """
  Container for analysis results. Maps CST Nodes (by identity) to inferred Types.
  """

  def __init__(self):
    """Initializes an empty node map."""
    self._node_types: Dict[cst.CSTNode, StaticType] = {}

  def record_type(self, node: cst.CSTNode, sym_type: StaticType) -> None:
    """
    Associates a CST node with a type.

    Args:
        node: The CST node.
        sym_type: The determined type.
    """
    self._node_types[node] = sym_type

  def get_type(self, node: cst.CSTNode) -> Optional[StaticType]:
    """
    Retrieves the inferred type for a CST node.

    Args:
        node: The CST node to inspect.

    Returns:
        The stored StaticType or None.
    """
    return self._node_types.get(node)

  def type_of(self, node: cst.CSTNode) -> StaticType:
    """
    Retrieves the inferred type for a CST node, defaulting to `ANY`.

    Args:
        node: The CST node to inspect.

    Returns:
        The stored StaticType, or `ANY` if nothing was inferred.
    """
    return self._node_types.get(node, ANY)

  def __len__(self) -> int:
    return len(self._node_types)


class SymbolTableAnalyzer(cst.CSTVisitor):
  """
  Static Analysis pass to populate the SymbolTable.
  Runs post-order traversal logic (via leave methods) to propagate types bottom-up.
  Implements shallow control flow inference for If/Else and Loops.
  """

  def __init__(self):
    """Initializes the analyzer."""
    self.table = SymbolTable()
    self.root_scope = Scope(name="global")
    self.current_scope = self.root_scope

  # --- Scoping ---

  def _push_scope(self, name: str, owner: Optional[ClassRefType] = None) -> None:
    self.current_scope = Scope(parent=self.current_scope, name=name, owner=owner)

  def _pop_scope(self) -> None:
    if self.current_scope.parent:
      self.current_scope = self.current_scope.parent

  def visit_ClassDef(self, node: cst.ClassDef) -> None:
    """Binds the class object in the enclosing scope, then enters class scope."""
    class_ref = self._class_ref(node)
    self.current_scope.set(node.name.value, class_ref)
    self._push_scope(f"class_{node.name.value}", owner=class_ref)

  def leave_ClassDef(self, node: cst.ClassDef) -> None:
    """Exits class scope."""
    self._pop_scope()

  def visit_FunctionDef(self, node: cst.FunctionDef) -> None:
    """
    Binds the function in the enclosing scope and its parameters in a new scope.
    """
    returns = self.annotation_type(node.returns.annotation) if node.returns else ANY
    owner = self.current_scope.owner
    self.current_scope.set(node.name.value, CallableType(name=node.name.value, returns=returns))

    self._push_scope(f"func_{node.name.value}")
    self._bind_parameters(node.params, owner, node.decorators)

  def leave_FunctionDef(self, node: cst.FunctionDef) -> None:
    """Exits function scope."""
    self._pop_scope()

  def visit_Lambda(self, node: cst.Lambda) -> None:
    """Enters lambda scope. Lambda parameters are unconstrained."""
    self._push_scope("lambda")
    self._bind_parameters(node.params, None, ())

  def leave_Lambda(self, node: cst.Lambda) -> None:
    """Exits lambda scope."""
    self._pop_scope()
    self.table.record_type(node, ClassType("function"))

  def _visit_comprehension(self, for_in: cst.CompFor) -> None:
    self._push_scope("comprehension")
    current: Optional[cst.CompFor] = for_in
    while current is not None:
      self._bind_target(current.target, ANY)
      current = current.inner_for_in

  def visit_ListComp(self, node: cst.ListComp) -> None:
    self._visit_comprehension(node.for_in)

  def leave_ListComp(self, node: cst.ListComp) -> None:
    self._pop_scope()
    self.table.record_type(node, ClassType("list"))

  def visit_SetComp(self, node: cst.SetComp) -> None:
    self._visit_comprehension(node.for_in)

  def leave_SetComp(self, node: cst.SetComp) -> None:
    self._pop_scope()
    self.table.record_type(node, ClassType("set"))

  def visit_DictComp(self, node: cst.DictComp) -> None:
    self._visit_comprehension(node.for_in)

  def leave_DictComp(self, node: cst.DictComp) -> None:
    self._pop_scope()
    self.table.record_type(node, ClassType("dict"))

  def visit_GeneratorExp(self, node: cst.GeneratorExp) -> None:
    self._visit_comprehension(node.for_in)

  def leave_GeneratorExp(self, node: cst.GeneratorExp) -> None:
    self._pop_scope()
    self.table.record_type(node, ClassType("generator"))

  def _bind_parameters(
    self, params: cst.Parameters, owner: Optional[ClassRefType], decorators: Sequence[cst.Decorator]
  ) -> None:
    """
    Binds function parameters in the current scope.

    The first positional parameter of a method is the instance (or the class
    for classmethods) unless the method is a staticmethod.
    """
    decorator_names = {get_leaf_name(d.decorator) for d in decorators}
    positional = [*params.posonly_params, *params.params]

    for index, param in enumerate(positional):
      if param.annotation:
        self.current_scope.set(param.name.value, self.annotation_type(param.annotation.annotation))
      elif index == 0 and owner is not None and "staticmethod" not in decorator_names:
        self.current_scope.set(param.name.value, owner if "classmethod" in decorator_names else owner.instance)
      else:
        self.current_scope.set(param.name.value, ANY)

    for param in params.kwonly_params:
      annotated = self.annotation_type(param.annotation.annotation) if param.annotation else ANY
      self.current_scope.set(param.name.value, annotated)

    # *args and **kwargs are containers regardless of their element annotation.
    if isinstance(params.star_arg, cst.Param):
      self.current_scope.set(params.star_arg.name.value, ClassType("tuple"))
    if params.star_kwarg:
      self.current_scope.set(params.star_kwarg.name.value, ClassType("dict"))

  def _class_ref(self, node: cst.ClassDef) -> ClassRefType:
    """
    Builds the class object type of a class definition.

    Enumerations get an `EnumType` instance and the list of member names
    assigned in the class body.
    """
    name = node.name.value
    base_names = {get_leaf_name(arg.value) for arg in node.bases}

    if not base_names & _ENUM_BASES:
      return ClassRefType(name=name, instance=ClassType(name))

    numeric = bool(base_names & _NUMERIC_ENUM_BASES) or "int" in base_names or "float" in base_names
    textual = bool(base_names & _TEXTUAL_ENUM_BASES) or "str" in base_names
    members: List[str] = []
    for stmt in node.body.body:
      if not isinstance(stmt, cst.SimpleStatementLine):
        continue
      for small in stmt.body:
        targets: List[cst.BaseExpression] = []
        if isinstance(small, cst.Assign):
          targets = [t.target for t in small.targets]
        elif isinstance(small, cst.AnnAssign) and small.value is not None:
          targets = [small.target]
        for target in targets:
          if isinstance(target, cst.Name) and not target.value.startswith("_"):
            members.append(target.value)

    return ClassRefType(
      name=name,
      instance=EnumType(name=name, numeric=numeric, textual=textual),
      members=tuple(members),
    )

  # --- Annotations ---

  def annotation_type(self, node: cst.BaseExpression) -> StaticType:
    """
    Converts an annotation expression into a static type.

    Args:
        node: The annotation expression.

    Returns:
        The declared type. Unknown class names become structural `ClassType`s.
    """
    if isinstance(node, cst.Name) and node.value in _ANNOTATION_NAMES:
      bound = self.current_scope.get(node.value)
      if bound is None:
        return _ANNOTATION_NAMES[node.value]

    if isinstance(node, (cst.Name, cst.Attribute)):
      full_name = get_full_name(node)
      leaf = full_name.split(".")[-1]
      bound = self.current_scope.get(full_name)
      if isinstance(bound, ClassRefType):
        return bound.instance
      if leaf in ("Any", "None") or (leaf in _ANNOTATION_NAMES and full_name.startswith("builtins.")):
        return _ANNOTATION_NAMES[leaf]
      return ClassType(full_name)

    if isinstance(node, cst.BinaryOperation) and isinstance(node.operator, cst.BitOr):
      return make_union([self.annotation_type(node.left), self.annotation_type(node.right)])

    if isinstance(node, (cst.SimpleString, cst.ConcatenatedString)):
      value = node.evaluated_value
      if isinstance(value, str):
        try:
          return self.annotation_type(cst.parse_expression(value))
        except cst.ParserSyntaxError:
          logger.debug(f"Unparseable forward reference: {value!r}")
      return ANY

    if isinstance(node, cst.Subscript):
      return self._subscript_annotation(node)

    return ANY

  def _subscript_annotation(self, node: cst.Subscript) -> StaticType:
    base = get_leaf_name(node.value)
    args = [
      element.slice.value for element in node.slice if isinstance(element.slice, cst.Index)
    ]

    if base == "Optional" and args:
      return make_union([self.annotation_type(args[0]), NONE])
    if base == "Union":
      return make_union(self.annotation_type(arg) for arg in args)
    if base == "Literal":
      return make_union(self._literal_annotation(arg) for arg in args)
    if base in ("Annotated", "Final", "ClassVar") and args:
      return self.annotation_type(args[0])
    return ClassType(get_full_name(node.value) or base)

  def _literal_annotation(self, node: cst.BaseExpression) -> StaticType:
    if isinstance(node, (cst.Integer, cst.Float, cst.Imaginary, cst.SimpleString, cst.ConcatenatedString)):
      literal = self._literal_type(node)
      if literal is not None:
        return literal
    if isinstance(node, cst.Name) and node.value in ("True", "False"):
      return LiteralType(value=node.value == "True")
    if isinstance(node, cst.Name) and node.value == "None":
      return NONE
    if isinstance(node, cst.UnaryOperation) and isinstance(node.operator, cst.Minus):
      inner = self._literal_annotation(node.expression)
      if isinstance(inner, LiteralType) and inner.is_flag_set(TypeFlags.NUMBER_LITERAL):
        return LiteralType(value=-inner.value)
    if isinstance(node, cst.Attribute):
      member = self._enum_member(node)
      if member is not None:
        return member
    return ANY

  # --- Control Flow Support ---

  def visit_If(self, node: cst.If) -> bool:
    """
    Handle branching logic.
    1. Snapshot state.
    2. Visit body -> State_Body.
    3. Revert to Snapshot.
    4. Visit Else (if any) -> State_Else.
    5. Merge (State_Body, State_Else).
    """
    node.test.visit(self)

    start_state = self.current_scope.snapshot()

    node.body.visit(self)
    body_state = self.current_scope.snapshot()

    self.current_scope.symbols = start_state.copy()

    # orelse can contain an 'if' (elif) or 'else' block
    if node.orelse:
      node.orelse.visit(self)

    else_state = self.current_scope.snapshot()

    self.current_scope.symbols = self._merge_states(body_state, else_state)

    return False

  def visit_For(self, node: cst.For) -> bool:
    """
    Handle loop logic.
    Loops may execute 0 times or N times, introducing potential ambiguity.
    We merge the state after loop body with the state before loop.
    """
    node.iter.visit(self)
    self._bind_target(node.target, self._element_type(node.iter))
    node.target.visit(self)

    start_state = self.current_scope.snapshot()

    node.body.visit(self)

    if node.orelse:
      node.orelse.visit(self)

    end_state = self.current_scope.snapshot()

    # Merge start (0 iterations case) with end (N iterations case)
    self.current_scope.symbols = self._merge_states(start_state, end_state)
    return False

  def visit_While(self, node: cst.While) -> bool:
    """Handle while loop logic."""
    node.test.visit(self)
    start_state = self.current_scope.snapshot()
    node.body.visit(self)
    if node.orelse:
      node.orelse.visit(self)
    end_state = self.current_scope.snapshot()
    self.current_scope.symbols = self._merge_states(start_state, end_state)
    return False

  def _element_type(self, iterable: cst.BaseExpression) -> StaticType:
    """Infers the loop variable type of `for x in <iterable>`."""
    if isinstance(iterable, cst.Call) and get_full_name(iterable.func) == "range":
      if self.current_scope.get("range") is None:
        return INT
    iterable_type = self.table.type_of(iterable)
    if iterable_type == BYTES:
      return INT
    if iterable_type.is_flag_set(TypeFlags.STRING_LIKE):
      return STR
    return ANY

  def _merge_states(self, state_a: Dict[str, StaticType], state_b: Dict[str, StaticType]) -> Dict[str, StaticType]:
    """
    Merges two symbol dictionaries, creating Unions for conflicts.
    A missing key in one branch implies a potential Unbound state,
    but we optimistically retain the type found in the other branch.
    """
    merged = {}
    all_keys = set(state_a.keys()) | set(state_b.keys())

    for k in all_keys:
      in_a = k in state_a
      in_b = k in state_b

      if in_a and in_b:
        merged[k] = make_union([state_a[k], state_b[k]])
      elif in_a:
        merged[k] = state_a[k]
      else:
        merged[k] = state_b[k]

    return merged

  # --- Definition Tracking ---

  def _bind_target(self, target: cst.BaseExpression, sym_type: StaticType) -> None:
    """Binds an assignment target. Unpacked elements are unconstrained."""
    if isinstance(target, cst.Name):
      self.current_scope.set(target.value, sym_type)
      self.table.record_type(target, sym_type)
    elif isinstance(target, (cst.Tuple, cst.List)):
      for element in target.elements:
        self._bind_target(element.value, ANY)
    elif isinstance(target, cst.StarredElement):
      self._bind_target(target.value, ClassType("list"))
    elif isinstance(target, cst.Attribute):
      self.table.record_type(target, sym_type)

  def leave_Import(self, node: cst.Import) -> None:
    """Imported modules are opaque."""
    for alias in node.names:
      bind_name = alias.asname.name.value if alias.asname else get_full_name(alias.name).split(".")[0]
      self.current_scope.set(bind_name, ANY)

  def leave_ImportFrom(self, node: cst.ImportFrom) -> None:
    """Imported names are opaque; they may shadow builtins."""
    if isinstance(node.names, cst.ImportStar):
      return
    for alias in node.names:
      if isinstance(alias.asname, cst.AsName) and isinstance(alias.asname.name, cst.Name):
        self.current_scope.set(alias.asname.name.value, ANY)
      elif isinstance(alias.name, cst.Name):
        self.current_scope.set(alias.name.value, ANY)

  def leave_Assign(self, node: cst.Assign) -> None:
    """
    Propagate type from RHS to LHS.
    x = 1 -> x is Literal[1].
    """
    rhs_type = self.table.type_of(node.value)
    for target in node.targets:
      self._bind_target(target.target, rhs_type)

  def leave_AnnAssign(self, node: cst.AnnAssign) -> None:
    """
    The declared type wins over the assigned value.
    x: Optional[int] = 0 -> x is int | None.
    """
    self._bind_target(node.target, self.annotation_type(node.annotation.annotation))

  def leave_AugAssign(self, node: cst.AugAssign) -> None:
    """x += 1 keeps numbers numeric and strings textual; anything else becomes unconstrained."""
    if isinstance(node.target, cst.Name):
      current = self.table.type_of(node.target)
      combined = self._arithmetic_type(current, self.table.type_of(node.value), node.operator)
      self.current_scope.set(node.target.value, combined)

  def leave_NamedExpr(self, node: cst.NamedExpr) -> None:
    """(x := value) binds x and has the value's type."""
    value_type = self.table.type_of(node.value)
    self._bind_target(node.target, value_type)
    self.table.record_type(node, value_type)

  def leave_WithItem(self, node: cst.WithItem) -> None:
    """Context manager targets are opaque."""
    if node.asname:
      self._bind_target(node.asname.name, ANY)

  def leave_ExceptHandler(self, node: cst.ExceptHandler) -> None:
    """`except E as e` binds an exception instance."""
    if node.name and isinstance(node.name.name, cst.Name):
      self.current_scope.set(node.name.name.value, ClassType("BaseException"))

  # --- Literals ---

  def _literal_type(self, node: cst.BaseExpression) -> Optional[StaticType]:
    value = getattr(node, "evaluated_value", None)
    if isinstance(value, bytes):
      return BYTES
    if isinstance(value, (str, int, float, complex)):
      return LiteralType(value=value)
    return None

  def leave_Integer(self, node: cst.Integer) -> None:
    self.table.record_type(node, self._literal_type(node) or INT)

  def leave_Float(self, node: cst.Float) -> None:
    self.table.record_type(node, self._literal_type(node) or FLOAT)

  def leave_Imaginary(self, node: cst.Imaginary) -> None:
    self.table.record_type(node, self._literal_type(node) or COMPLEX)

  def leave_SimpleString(self, node: cst.SimpleString) -> None:
    self.table.record_type(node, self._literal_type(node) or STR)

  def leave_ConcatenatedString(self, node: cst.ConcatenatedString) -> None:
    # evaluated_value is None when an f-string takes part.
    self.table.record_type(node, self._literal_type(node) or STR)

  def leave_FormattedString(self, node: cst.FormattedString) -> None:
    self.table.record_type(node, STR)

  def leave_List(self, node: cst.List) -> None:
    self.table.record_type(node, ClassType("list"))

  def leave_Tuple(self, node: cst.Tuple) -> None:
    self.table.record_type(node, ClassType("tuple"))

  def leave_Set(self, node: cst.Set) -> None:
    self.table.record_type(node, ClassType("set"))

  def leave_Dict(self, node: cst.Dict) -> None:
    self.table.record_type(node, ClassType("dict"))

  # --- Usage Resolution ---

  def leave_Name(self, node: cst.Name) -> None:
    """
    Look up variable in scope. `True`, `False` and `None` are literals.
    """
    if node.value in ("True", "False"):
      self.table.record_type(node, LiteralType(value=node.value == "True"))
      return
    if node.value == "None":
      self.table.record_type(node, NONE)
      return

    sym_type = self.current_scope.get(node.value)
    if sym_type:
      self.table.record_type(node, sym_type)

  def _enum_member(self, node: cst.Attribute) -> Optional[StaticType]:
    owner_name = get_full_name(node.value)
    owner = self.current_scope.get(owner_name) if owner_name else None
    if not isinstance(owner, ClassRefType) or not isinstance(owner.instance, EnumType):
      return None
    if node.attr.value not in owner.members:
      return None
    enum_type = owner.instance
    return EnumType(
      name=enum_type.name,
      numeric=enum_type.numeric,
      textual=enum_type.textual,
      member=node.attr.value,
    )

  def leave_Attribute(self, node: cst.Attribute) -> None:
    """
    Resolve enum members: `Color.RED` where `Color` is an enumeration.
    Other attributes are unconstrained.
    """
    member = self._enum_member(node)
    if member is not None:
      self.table.record_type(node, member)
    elif node.attr.value in ("value", "name"):
      # Color.RED.value / Color.RED.name
      base = self.table.get_type(node.value)
      if isinstance(base, EnumType) and node.attr.value == "name":
        self.table.record_type(node, STR)
      elif isinstance(base, EnumType) and base.numeric:
        self.table.record_type(node, INT)
      elif isinstance(base, EnumType) and base.textual:
        self.table.record_type(node, STR)

  def leave_Call(self, node: cst.Call) -> None:
    """
    Infer the result type of a call.
    1. Annotated functions return their declared type.
    2. Classes produce instances.
    3. Unshadowed builtins produce their known result type.
    """
    func_type = self.table.get_type(node.func)

    if isinstance(func_type, CallableType):
      self.table.record_type(node, func_type.returns)
    elif isinstance(func_type, ClassRefType):
      self.table.record_type(node, func_type.instance)
    elif isinstance(node.func, cst.Name) and func_type is None:
      builtin = _BUILTIN_RESULTS.get(node.func.value)
      if builtin is not None:
        self.table.record_type(node, builtin)

  def leave_Subscript(self, node: cst.Subscript) -> None:
    """Slicing a string or bytes keeps its type; indexing bytes yields an int."""
    value_type = self.table.type_of(node.value)
    if value_type == BYTES:
      sliced = any(isinstance(element.slice, cst.Slice) for element in node.slice)
      self.table.record_type(node, BYTES if sliced else INT)
    elif value_type.is_flag_set(TypeFlags.STRING_LIKE):
      self.table.record_type(node, STR)

  # --- Operators ---

  def _arithmetic_type(
    self, left: StaticType, right: StaticType, operator: cst.CSTNode
  ) -> StaticType:
    left_number = left.is_flag_set(TypeFlags.NUMBER_LIKE | TypeFlags.BOOLEAN_LIKE)
    right_number = right.is_flag_set(TypeFlags.NUMBER_LIKE | TypeFlags.BOOLEAN_LIKE)
    left_text = left.is_flag_set(TypeFlags.STRING_LIKE)
    right_text = right.is_flag_set(TypeFlags.STRING_LIKE)
    text = BYTES if BYTES in (left, right) else STR

    if left_number and right_number and isinstance(operator, _ARITHMETIC_OPS):
      if _is_complex(left) or _is_complex(right):
        return COMPLEX
      if isinstance(operator, (cst.Divide, cst.DivideAssign)) or _is_float(left) or _is_float(right):
        return FLOAT
      return INT

    if isinstance(operator, (cst.Add, cst.AddAssign)) and left_text and right_text:
      return text
    if isinstance(operator, (cst.Modulo, cst.ModuloAssign)) and left_text:
      return text
    if isinstance(operator, (cst.Multiply, cst.MultiplyAssign)) and (
      (left_text and right_number) or (left_number and right_text)
    ):
      return text
    return ANY

  def leave_BinaryOperation(self, node: cst.BinaryOperation) -> None:
    left = self.table.type_of(node.left)
    right = self.table.type_of(node.right)
    result = self._arithmetic_type(left, right, node.operator)
    if result is not ANY:
      self.table.record_type(node, result)

  def leave_UnaryOperation(self, node: cst.UnaryOperation) -> None:
    if isinstance(node.operator, cst.Not):
      self.table.record_type(node, BOOL)
      return

    operand = self.table.type_of(node.expression)
    if not operand.is_flag_set(TypeFlags.NUMBER_LIKE | TypeFlags.BOOLEAN_LIKE):
      return
    if isinstance(node.operator, cst.Minus) and isinstance(operand, LiteralType):
      self.table.record_type(node, LiteralType(value=-operand.value))
    elif isinstance(node.operator, cst.BitInvert):
      self.table.record_type(node, INT)
    elif operand.is_flag_set(TypeFlags.NUMBER_LIKE):
      self.table.record_type(node, operand)
    else:
      self.table.record_type(node, INT)

  def leave_Comparison(self, node: cst.Comparison) -> None:
    self.table.record_type(node, BOOL)

  def leave_BooleanOperation(self, node: cst.BooleanOperation) -> None:
    """`a or b` evaluates to one of its operands."""
    self.table.record_type(node, make_union([self.table.type_of(node.left), self.table.type_of(node.right)]))

  def leave_IfExp(self, node: cst.IfExp) -> None:
    """
    Infers type for ternary expression: `A if C else B`.
    """
    self.table.record_type(node, make_union([self.table.type_of(node.body), self.table.type_of(node.orelse)]))

  def leave_Module(self, node: cst.Module) -> None:
    logger.debug(f"Inferred types for {len(self.table)} nodes")
