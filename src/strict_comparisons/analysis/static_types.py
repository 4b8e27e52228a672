"""
Static Type Model.

Tagged type variants produced by the `SymbolTableAnalyzer` and consumed by the
classifier. Each variant exposes a `flags` bitmask (`TypeFlags`); the analysis
core never looks at anything else, so other front ends only have to map their
own type representation onto these flags.

All variants are frozen dataclasses, which makes them hashable and lets
classification results be cached by value.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple, Union as PyUnion

from strict_comparisons.enums import TypeFlags


@dataclass(frozen=True)
class StaticType:
  """
  Base class for inferred types.
  """

  name: str
  """A string representation of the type (e.g., 'str')."""

  @property
  def flags(self) -> TypeFlags:
    """Flags describing this type. Plain types are structural objects."""
    return TypeFlags.OBJECT

  def is_flag_set(self, flags: TypeFlags) -> bool:
    """
    Checks whether any of the given flags is set on this type.

    Args:
        flags: A single flag or a composite category.

    Returns:
        True if the intersection is non-empty.
    """
    return bool(self.flags & flags)

  def __str__(self) -> str:
    """Returns the type name."""
    return self.name


@dataclass(frozen=True)
class AnyType(StaticType):
  """
  A statically unconstrained type (an unannotated name, an unknown call result).
  """

  name: str = "Any"

  @property
  def flags(self) -> TypeFlags:
    return TypeFlags.ANY


@dataclass(frozen=True)
class PrimitiveType(StaticType):
  """
  A builtin scalar type such as `str`, `int` or `bool`.
  """

  kind_flags: TypeFlags = TypeFlags.OBJECT

  @property
  def flags(self) -> TypeFlags:
    return self.kind_flags


@dataclass(frozen=True)
class NoneType(StaticType):
  """
  The type of `None`, including the implicit result of a function without a return value.
  """

  name: str = "None"

  @property
  def flags(self) -> TypeFlags:
    return TypeFlags.NULL


@dataclass(frozen=True)
class LiteralType(StaticType):
  """
  A literal value type (`1`, `"a"`, `True`).

  The literal category is derived from the Python type of `value`.
  """

  name: str = "Literal"
  value: PyUnion[str, int, float, complex, bool, bytes] = ""

  def __eq__(self, other: object) -> bool:
    # `1 == True` in Python, but the literal types differ.
    if not isinstance(other, LiteralType):
      return False
    return type(self.value) is type(other.value) and self.value == other.value

  def __hash__(self) -> int:
    return hash((type(self.value).__name__, self.value))

  @property
  def flags(self) -> TypeFlags:
    # bool must be checked before int: bool is an int subclass.
    if isinstance(self.value, bool):
      return TypeFlags.BOOLEAN_LITERAL
    if isinstance(self.value, (int, float, complex)):
      return TypeFlags.NUMBER_LITERAL
    if isinstance(self.value, str):
      return TypeFlags.STRING_LITERAL
    return TypeFlags.OBJECT

  def __str__(self) -> str:
    return f"Literal[{self.value!r}]"


@dataclass(frozen=True)
class ClassType(StaticType):
  """
  An instance of a user-defined or library class, or a container.
  """


@dataclass(frozen=True)
class EnumType(StaticType):
  """
  An enumeration class or one of its members.

  `numeric` marks enums whose members are numbers (`IntEnum`, `IntFlag`);
  `textual` marks enums whose members are strings (`StrEnum`). The member flags
  follow the backing value, so the classifier sees a number, a string, or an object.
  """

  numeric: bool = False
  textual: bool = False
  member: str = ""

  @property
  def flags(self) -> TypeFlags:
    flags = TypeFlags.ENUM_LITERAL if self.member else TypeFlags.ENUM
    if self.numeric:
      return flags | (TypeFlags.NUMBER_LITERAL if self.member else TypeFlags.NUMBER)
    if self.textual:
      return flags | (TypeFlags.STRING_LITERAL if self.member else TypeFlags.STRING)
    return flags | TypeFlags.OBJECT

  def __str__(self) -> str:
    return f"{self.name}.{self.member}" if self.member else self.name


@dataclass(frozen=True)
class CallableType(StaticType):
  """
  A function whose return type is known from its annotation.
  """

  returns: StaticType = field(default_factory=AnyType)


@dataclass(frozen=True)
class ClassRefType(StaticType):
  """
  A class object itself (not an instance). Calling it produces `instance`.

  For enumerations, `members` lists the member names declared in the class body.
  """

  instance: StaticType = field(default_factory=AnyType)
  members: Tuple[str, ...] = ()


@dataclass(frozen=True)
class UnionType(StaticType):
  """
  Represents a union of potential types, from annotations or control flow divergence.
  """

  name: str = "Union"
  types: Tuple[StaticType, ...] = field(default_factory=tuple)

  @property
  def flags(self) -> TypeFlags:
    return TypeFlags.UNION

  def __str__(self) -> str:
    return " | ".join(str(t) for t in self.types)


# Common builtin types.
STR = PrimitiveType("str", TypeFlags.STRING)
# bytes compare by value and order lexicographically, like str.
BYTES = PrimitiveType("bytes", TypeFlags.STRING)
INT = PrimitiveType("int", TypeFlags.NUMBER)
FLOAT = PrimitiveType("float", TypeFlags.NUMBER)
COMPLEX = PrimitiveType("complex", TypeFlags.NUMBER)
BOOL = PrimitiveType("bool", TypeFlags.BOOLEAN)
NONE = NoneType()
ANY = AnyType()


def make_union(types: Iterable[StaticType]) -> StaticType:
  """
  Builds a flattened, deduplicated union.

  Nested unions are flattened. A single remaining member is returned as-is
  rather than wrapped.

  Args:
      types: Member types, in order of appearance.

  Returns:
      A `UnionType`, or the only member if there is just one.
  """
  unique: List[StaticType] = []

  def collect(t: StaticType) -> None:
    if isinstance(t, UnionType):
      for member in t.types:
        collect(member)
    elif t not in unique:
      unique.append(t)

  for t in types:
    collect(t)

  if not unique:
    return ANY
  if len(unique) == 1:
    return unique[0]
  return UnionType(types=tuple(unique))


def union_members(sym_type: StaticType) -> Tuple[StaticType, ...]:
  """
  Returns the members of a union, or the type itself as a singleton.

  Args:
      sym_type: Any static type.

  Returns:
      Tuple of non-union member types.
  """
  if isinstance(sym_type, UnionType):
    return sym_type.types
  return (sym_type,)
