"""
Symbolic expression nodes inspected by the auto-scheduler utilities.

This module defines the minimal expression vocabulary that schedule
transformations carry around: integer and float literals, opaque symbolic
variables, compound arithmetic, iteration ranges and loop iterators.
Every node is immutable. Literals and compound expressions compare by
value; variables and iterators compare by identity, so two iterators
that happen to share a name are still distinct axes.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class PrimExpr:
    """Base class for all symbolic scalar expressions."""

    __slots__ = ()


# -----------------------------------------------------------------------------
# Literals
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class IntImm(PrimExpr):
    """An integer literal."""

    value: int
    dtype: str = "int64"


@dataclass(frozen=True, slots=True)
class FloatImm(PrimExpr):
    """A floating-point literal."""

    value: float
    dtype: str = "float32"


# -----------------------------------------------------------------------------
# Symbolic Nodes
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True, eq=False)
class Var(PrimExpr):
    """
    An unbound symbolic variable.

    Example:
        n, batch_size
    """

    name: str
    dtype: str = "int64"


class BinaryOp(Enum):
    """Arithmetic operators that may appear in symbolic extents."""

    ADD = auto()
    SUB = auto()
    MUL = auto()
    FLOOR_DIV = auto()
    FLOOR_MOD = auto()


@dataclass(frozen=True, slots=True)
class BinaryExpr(PrimExpr):
    """
    A compound arithmetic expression.

    Example:
        n * 4, (m + 1) // 2
    """

    op: BinaryOp
    left: PrimExpr
    right: PrimExpr


# -----------------------------------------------------------------------------
# Iteration Domains
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Range:
    """The half-open iteration domain ``[min, min + extent)``."""

    min: PrimExpr
    extent: PrimExpr

    @classmethod
    def from_extent(cls, extent: Union[int, PrimExpr]) -> "Range":
        """Build the domain ``[0, extent)``."""
        return cls(IntImm(0), const(extent))


class IterKind(Enum):
    """Role of a loop iterator in a computation."""

    DATA_PAR = auto()
    REDUCE = auto()


@dataclass(frozen=True, slots=True, eq=False)
class IterVar:
    """
    A loop iterator (axis) of a computation.

    Attributes:
        var: The symbolic variable bound by the loop
        dom: The iteration domain
        kind: Whether the axis is spatial or a reduction
    """

    var: Var
    dom: Range
    kind: IterKind = IterKind.DATA_PAR

    @property
    def name(self) -> str:
        return self.var.name

    @property
    def extent(self) -> PrimExpr:
        return self.dom.extent


def const(value: Union[int, float, PrimExpr]) -> PrimExpr:
    """
    Wrap a Python number into the matching literal node.

    Existing expressions are returned unchanged.

    Raises:
        TypeError: If the value is not a number or expression
    """
    if isinstance(value, PrimExpr):
        return value
    if isinstance(value, bool):
        raise TypeError("Cannot convert bool to a symbolic literal")
    if isinstance(value, int):
        return IntImm(value)
    if isinstance(value, float):
        return FloatImm(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a symbolic literal")


def iter_var(name: str, extent: Union[int, PrimExpr], kind: IterKind = IterKind.DATA_PAR) -> IterVar:
    """Create an iterator over ``[0, extent)`` bound to a fresh variable."""
    return IterVar(Var(name), Range.from_extent(extent), kind)
