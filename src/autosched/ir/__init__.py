"""
Symbolic IR consumed by the auto-scheduler utilities.
"""

from autosched.ir.expr import (
    BinaryExpr,
    BinaryOp,
    FloatImm,
    IntImm,
    IterKind,
    IterVar,
    PrimExpr,
    Range,
    Var,
    const,
    iter_var,
)

__all__ = [
    "PrimExpr",
    "IntImm",
    "FloatImm",
    "Var",
    "BinaryOp",
    "BinaryExpr",
    "Range",
    "IterKind",
    "IterVar",
    "const",
    "iter_var",
]
