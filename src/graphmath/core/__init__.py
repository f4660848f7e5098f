"""
Core value types, numeric primitives, and invariants.

Vectors and matrices are immutable values; every operation is a pure
function with no shared mutable state.
"""
