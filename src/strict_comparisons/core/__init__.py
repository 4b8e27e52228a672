"""
Core Package.

Contains the comparison analysis logic:
- Type classification into semantic kinds
- Comparability resolution
- Operator policy
- Comparison evaluation and diagnostics
- Lint Engine
"""
