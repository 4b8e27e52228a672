"""
Tests for the top-level `strict_comparisons.lint` helper.
"""

import pytest

import strict_comparisons as sc
from strict_comparisons.enums import MessageId


def test_lint_reports_mixed_kinds():
  diagnostics = sc.lint('x = 1 == "a"')
  assert [d.message for d in diagnostics] == ["cannot compare type 'number' to type 'string'"]


def test_lint_flags():
  code = 'x = "a" < "b"\ny = None == object()\n'
  assert len(sc.lint(code)) == 2
  assert len(sc.lint(code, allow_string_order_comparison=True)) == 1
  assert sc.lint(code, allow_object_equal_comparison=True, allow_string_order_comparison=True) == []


def test_lint_rule_selection():
  code = 'class foo:\n    x = 1 == "a"\n'
  diagnostics = sc.lint(code, rules=["class-name-casing"])
  assert [d.message_id for d in diagnostics] == [MessageId.NOT_PASCAL_CASED]


def test_lint_syntax_error():
  with pytest.raises(ValueError, match="Syntax error"):
    sc.lint("x = = 1")


def test_version():
  assert sc.__version__ == "0.1.0"
