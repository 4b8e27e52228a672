"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so that tests capturing Rich output do not leak backends.
- Cache isolation for the type classifier.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'strict_comparisons' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from strict_comparisons.core.classifier import _classify_cached
from strict_comparisons.utils.console import reset_console


@pytest.fixture(autouse=True)
def isolate_console():
  """
  Ensures that tests swapping the console backend restore the default afterwards.
  """
  yield
  reset_console()


@pytest.fixture(autouse=True)
def clear_classifier_cache():
  """Classification must not depend on what earlier tests classified."""
  _classify_cached.cache_clear()
  yield
