"""
Orchestration Engine for Lint Passes.

This module provides the `LintEngine`, the primary driver of an analysis run.
It coordinates the passes required to check one module:

1.  **Ingestion Phase**: Parses Python source code into a LibCST tree.
    Syntax errors end the run for this module with a failed `LintResult`.
2.  **Type Inference**: The `SymbolTableAnalyzer` records a static type for
    every expression it can type (only when `strict-comparisons` is enabled).
3.  **Rules**:
    - **strict-comparisons**: The `ComparisonScanner` evaluates each comparison.
    - **class-name-casing**: The `ClassNameCasingScanner` checks class names.
4.  **Collection**: Diagnostics are returned sorted by source position.

Every pass visits the same `MetadataWrapper` module so that node identities
recorded by type inference match the nodes the rules see.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import libcst as cst
from pydantic import BaseModel, Field

from strict_comparisons.analysis.comparisons import ComparisonScanner
from strict_comparisons.analysis.naming import ClassNameCasingScanner
from strict_comparisons.analysis.symbol_table import SymbolTableAnalyzer
from strict_comparisons.config import LintConfig
from strict_comparisons.core.diagnostics import CollectingSink, Diagnostic
from strict_comparisons.core.evaluator import ComparisonEvaluator
from strict_comparisons.rules import CLASS_NAME_CASING, STRICT_COMPARISONS

logger = logging.getLogger(__name__)


class LintResult(BaseModel):
  """
  Structured result of linting a single module.
  """

  path: Optional[str] = Field(default=None, description="The file the source was read from, if any.")
  diagnostics: List[Diagnostic] = Field(default_factory=list, description="Findings of all enabled rules.")
  errors: List[str] = Field(default_factory=list, description="Failures that prevented analysis.")
  success: bool = Field(
    default=True,
    description="True if the module was parsed and analysed.",
  )

  @property
  def has_diagnostics(self) -> bool:
    """
    Returns True if any rule reported a finding.

    Returns:
        bool: True if diagnostics list is non-empty.
    """
    return len(self.diagnostics) > 0


class LintEngine:
  """
  The main analysis unit.

  Runs every enabled rule over one module at a time. The engine holds only the
  immutable configuration and can be reused for any number of modules.
  """

  def __init__(self, config: Optional[LintConfig] = None):
    """
    Initializes the Engine.

    Args:
        config (LintConfig, optional): The lint configuration. Defaults to the
            recommended rules with default options.
    """
    self.config = config or LintConfig()
    self.evaluator = ComparisonEvaluator(self.config.strict_comparisons)

  def run(self, code: str, path: Optional[str] = None) -> LintResult:
    """
    Lints a module.

    Args:
        code (str): Python source code.
        path (str, optional): Where the code came from, for reporting.

    Returns:
        LintResult: Diagnostics, or the parse error if the code is invalid.
    """
    try:
      module = cst.parse_module(code)
    except cst.ParserSyntaxError as e:
      logger.debug(f"Parse failure in {path or '<string>'}: {e}")
      return LintResult(path=path, success=False, errors=[f"Syntax error: {e}"])

    wrapper = cst.MetadataWrapper(module)
    sink = CollectingSink()

    if self.config.is_enabled(STRICT_COMPARISONS):
      analyzer = SymbolTableAnalyzer()
      wrapper.visit(analyzer)
      scanner = ComparisonScanner(analyzer.table, self.evaluator, sink)
      wrapper.visit(scanner)
      logger.debug(f"{path or '<string>'}: evaluated {len(scanner.expressions)} comparisons")

    if self.config.is_enabled(CLASS_NAME_CASING):
      wrapper.visit(ClassNameCasingScanner(sink))

    return LintResult(path=path, diagnostics=_sorted(sink.diagnostics))

  def run_file(self, path: Union[str, Path]) -> LintResult:
    """
    Reads and lints a file.

    Args:
        path: The Python file.

    Returns:
        LintResult: The lint outcome. Unreadable files yield a failed result.
    """
    file_path = Path(path)
    try:
      code = file_path.read_text("utf-8")
    except (OSError, UnicodeDecodeError) as e:
      return LintResult(path=str(file_path), success=False, errors=[f"Could not read file: {e}"])
    return self.run(code, path=str(file_path))


def _sorted(diagnostics: List[Diagnostic]) -> List[Diagnostic]:
  def key(d: Diagnostic):
    if d.location is None:
      return (0, 0)
    return (d.location.line, d.location.column)

  return sorted(diagnostics, key=key)
