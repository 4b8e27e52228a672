"""
Diagnostics and Reporting Sinks.

A `Diagnostic` is the only user-visible output of a rule. Rules hand their
diagnostics to a `DiagnosticSink`; the engine uses a `CollectingSink` and
returns the collected list in its `LintResult`.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol

from strict_comparisons.enums import MessageId
from strict_comparisons.rules import get_rule


@dataclass(frozen=True)
class SourceLocation:
  """
  Position of a node in the source (1-based line, 0-based column).
  """

  line: int
  column: int

  def __str__(self) -> str:
    return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Diagnostic:
  """
  A single finding reported by a rule.
  """

  rule: str
  message_id: MessageId
  data: Dict[str, str] = field(default_factory=dict)
  location: Optional[SourceLocation] = None

  @property
  def message(self) -> str:
    """The message template of the rule rendered with `data`."""
    meta = get_rule(self.rule)
    if meta is None or self.message_id not in meta.messages:
      return f"{self.message_id.value}: {self.data}"
    try:
      return meta.render(self.message_id, self.data)
    except KeyError:
      # Incomplete data, e.g. a diagnostic built by hand.
      return f"{self.message_id.value}: {self.data}"

  def to_dict(self) -> Dict[str, object]:
    """
    Serializes the diagnostic for JSON output.

    Returns:
        A JSON-compatible dictionary.
    """
    return {
      "rule": self.rule,
      "messageId": self.message_id.value,
      "message": self.message,
      "line": self.location.line if self.location else None,
      "column": self.location.column if self.location else None,
      "data": dict(self.data),
    }


class DiagnosticSink(Protocol):
  """
  Receiver of diagnostics.
  """

  def report(self, diagnostic: Diagnostic) -> None:
    """Accepts one diagnostic."""
    ...


class CollectingSink:
  """
  Sink that accumulates diagnostics in report order.
  """

  def __init__(self) -> None:
    """Initializes an empty sink."""
    self.diagnostics: List[Diagnostic] = []

  def report(self, diagnostic: Diagnostic) -> None:
    """
    Appends a diagnostic.

    Args:
        diagnostic: The finding to record.
    """
    self.diagnostics.append(diagnostic)

  def __len__(self) -> int:
    return len(self.diagnostics)
