"""
Static Analysis Package.

This package contains visitors and utilities for inspecting Python CSTs
(Concrete Syntax Trees) to infer operand types and drive the bundled rules.

Modules:
    - ``static_types``: Tagged static type variants and their flags.
    - ``symbol_table``: Inferring expression types and scopes.
    - ``comparisons``: Feeding comparison expressions to the evaluator.
    - ``naming``: Checking class-like declaration names for PascalCase.
"""
