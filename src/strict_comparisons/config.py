"""
Runtime Configuration Store.

Rule options and rule selection, loaded from ``[tool.strict_comparisons]`` in
the nearest pyproject.toml and overridden by CLI arguments.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, field_validator

from strict_comparisons.rules import available_rules, recommended_rules

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

logger = logging.getLogger(__name__)


class StrictComparisonsOptions(BaseModel):
  """
  Options of the strict-comparisons rule.

  Immutable for the lifetime of an analysis run. Keys may be given in their
  camelCase form (as written in configuration files) or by field name.
  Unknown keys and non-boolean values (e.g. "yes" or 1) are rejected.
  """

  model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

  allow_object_equal_comparison: StrictBool = Field(
    False,
    alias="allowObjectEqualComparison",
    description="Permit equality comparisons of objects and null-like values.",
  )
  allow_string_order_comparison: StrictBool = Field(
    False,
    alias="allowStringOrderComparison",
    description="Permit ordering comparisons of strings.",
  )


class LintConfig(BaseModel):
  """
  Global configuration container for the lint engine.
  """

  rules: List[str] = Field(default_factory=recommended_rules, description="Names of the enabled rules.")
  strict_comparisons: StrictComparisonsOptions = Field(
    default_factory=StrictComparisonsOptions,
    description="Options of the strict-comparisons rule.",
  )

  @field_validator("rules")
  @classmethod
  def validate_rules(cls, v: List[str]) -> List[str]:
    """
    Ensures every enabled rule is registered.

    Args:
        v (List[str]): Requested rule names.

    Returns:
        List[str]: The normalized (lowercase, deduplicated) rule names.

    Raises:
        ValueError: If a rule is not found in the registry.
    """
    known = available_rules()
    cleaned: List[str] = []
    for name in v:
      name_clean = name.lower().strip()
      if name_clean not in known:
        raise ValueError(f"Unknown rule: '{name_clean}'. Available rules: {known}")
      if name_clean not in cleaned:
        cleaned.append(name_clean)
    return cleaned

  def is_enabled(self, rule: str) -> bool:
    """
    Checks whether a rule is enabled.

    Args:
        rule (str): Rule name.

    Returns:
        bool: True if the rule runs.
    """
    return rule in self.rules

  @classmethod
  def load(
    cls,
    rules: Optional[List[str]] = None,
    allow_object_equal_comparison: Optional[bool] = None,
    allow_string_order_comparison: Optional[bool] = None,
    options: Optional[Dict[str, Any]] = None,
    search_path: Optional[Path] = None,
  ) -> "LintConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        rules (Optional[List[str]]): Override for the enabled rules.
        allow_object_equal_comparison (Optional[bool]): Override for the object equality flag.
        allow_string_order_comparison (Optional[bool]): Override for the string ordering flag.
        options (Optional[Dict]): Additional raw option values (camelCase keys).
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        LintConfig: The fully resolved configuration object.

    Raises:
        ValueError: If the merged configuration fails validation.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)
    if toml_dir:
      logger.debug(f"Using configuration from {toml_dir / 'pyproject.toml'}")

    # 1. Rules
    final_rules = rules or toml_config.get("rules") or recommended_rules()

    # 2. Options: TOML < raw CLI key/values < explicit flags
    final_options: Dict[str, Any] = {**toml_config.get("options", {}), **(options or {})}
    if allow_object_equal_comparison is not None:
      final_options["allowObjectEqualComparison"] = allow_object_equal_comparison
    if allow_string_order_comparison is not None:
      final_options["allowStringOrderComparison"] = allow_string_order_comparison

    try:
      return cls(
        rules=final_rules,
        strict_comparisons=StrictComparisonsOptions.model_validate(final_options),
      )
    except ValidationError as e:
      raise ValueError(f"Invalid strict-comparisons configuration: {e}") from e


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Ignoring unreadable {toml_path}: {e}")
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("strict_comparisons", {}), parent

  return {}, None


def parse_cli_key_values(items: Optional[List[str]]) -> Dict[str, Any]:
  """
  Parses a list of 'key=value' strings into a dictionary.

  Types are inferred (int, float, bool, or string).

  Args:
      items (Optional[List[str]]): List of raw CLI strings directly from argparse.

  Returns:
      Dict[str, Any]: Parsed dictionary.
  """
  if not items:
    return {}

  config = {}
  for item in items:
    if "=" not in item:
      logger.warning(f"Ignoring invalid config format: '{item}'. Expected 'key=value'.")
      continue

    key, val_str = item.split("=", 1)
    key = key.strip()
    val_str = val_str.strip()

    final_val: Any = val_str

    if val_str.lower() == "true":
      final_val = True
    elif val_str.lower() == "false":
      final_val = False
    else:
      try:
        if "." in val_str or "e" in val_str:
          final_val = float(val_str)
        else:
          final_val = int(val_str)
      except ValueError:
        pass

    config[key] = final_val

  return config
