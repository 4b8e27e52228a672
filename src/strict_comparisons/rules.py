"""
Rule Registry.

Static metadata for the rules shipped with strict-comparisons: their names,
documentation, message templates and default enablement. Analysis code looks
rules up here to render diagnostic messages; the CLI lists them.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from strict_comparisons.enums import MessageId

STRICT_COMPARISONS = "strict-comparisons"
CLASS_NAME_CASING = "class-name-casing"


class RuleMeta(BaseModel):
  """
  Descriptive metadata of a single rule.
  """

  model_config = ConfigDict(frozen=True)

  name: str = Field(..., description="Unique rule identifier used in configuration.")
  type: str = Field("problem", description="'problem' for likely bugs, 'suggestion' for style.")
  category: str = Field("Best Practices", description="Documentation category.")
  description: str = Field("", description="One-line summary of what the rule enforces.")
  recommended: Optional[str] = Field("error", description="Recommended level, or None if opt-in.")
  messages: Dict[MessageId, str] = Field(default_factory=dict, description="Message templates by id.")
  options: List[str] = Field(default_factory=list, description="Names of the accepted option keys.")

  def render(self, message_id: MessageId, data: Dict[str, str]) -> str:
    """
    Formats a message template with diagnostic data.

    Args:
        message_id: Which template to use.
        data: Placeholder values.

    Returns:
        The rendered message.

    Raises:
        KeyError: If the rule has no such message.
    """
    return self.messages[message_id].format(**data)


_RULE_REGISTRY: Dict[str, RuleMeta] = {
  STRICT_COMPARISONS: RuleMeta(
    name=STRICT_COMPARISONS,
    type="problem",
    description="Only allow comparisons between primitive types.",
    messages={
      MessageId.NON_COMPARABLE_TYPES: "cannot compare type '{typesLeft}' to type '{typesRight}'",
      MessageId.INVALID_TYPE_FOR_OPERATOR: "cannot use '{comparator}' comparator for type '{type}'",
    },
    options=["allowObjectEqualComparison", "allowStringOrderComparison"],
  ),
  CLASS_NAME_CASING: RuleMeta(
    name=CLASS_NAME_CASING,
    type="suggestion",
    description="Require PascalCased class and interface names",
    messages={
      MessageId.NOT_PASCAL_CASED: "{friendlyName} '{name}' must be PascalCased.",
    },
  ),
}


def get_rule(name: str) -> Optional[RuleMeta]:
  """
  Looks up a rule by name.

  Args:
      name: Rule identifier (e.g. "strict-comparisons").

  Returns:
      The rule metadata, or None if unknown.
  """
  return _RULE_REGISTRY.get(name)


def available_rules() -> List[str]:
  """Returns all registered rule names in registration order."""
  return list(_RULE_REGISTRY.keys())


def recommended_rules() -> List[str]:
  """Returns the names of rules enabled by default."""
  return [name for name, meta in _RULE_REGISTRY.items() if meta.recommended]
