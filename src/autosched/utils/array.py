"""
Sequence and numeric helpers over arrays of symbolic expressions.

Lookups here are fatal on a miss: callers only ask for items they
inserted themselves or that exist by construction, such as an axis
created earlier in the same transformation record. A miss therefore
means an upstream invariant is broken and raises FatalError.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Optional, TypeVar, Union

import numpy as np

from autosched.ir.expr import FloatImm, IntImm, IterVar, PrimExpr
from autosched.utils.errors import check, fatal

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Returned by axis_length_prod when an extent is not a known integer.
UNKNOWN_EXTENT = -1


# =============================================================================
# Sequence Search
# =============================================================================


def find_index(array: Sequence[T], to_locate: T) -> Optional[int]:
    """
    Get the first appearance index of an element, or None when absent.

    Example:
        find_index([a, b, a], a) -> 0
    """
    for i, item in enumerate(array):
        if item == to_locate:
            return i
    return None


def get_index(array: Sequence[T], to_locate: T) -> int:
    """
    Get the first appearance index of an element in an array.

    Args:
        array: The sequence to search
        to_locate: The element to find

    Returns:
        The lowest index holding an element equal to ``to_locate``

    Raises:
        FatalError: If the element is not in the array
    """
    index = find_index(array, to_locate)
    if index is None:
        fatal("Cannot find the item", item=to_locate)
    return index


def get_indices(array: Sequence[T], to_locate: Iterable[T]) -> list[int]:
    """
    Get the first appearance index of each element of ``to_locate``.

    The result follows the iteration order of ``to_locate``.

    Raises:
        FatalError: If any element is not in the array
    """
    return [get_index(array, item) for item in to_locate]


def find_and_delete_item(array: MutableSequence[T], to_delete: T) -> None:
    """Delete the first occurrence of an item if it exists."""
    index = find_index(array, to_delete)
    if index is not None:
        del array[index]


# =============================================================================
# Conversions
# =============================================================================


def get_int_imm(expr: PrimExpr) -> int:
    """Get the value of an integer literal."""
    check(isinstance(expr, IntImm), "Expected an integer literal", expr=expr)
    return expr.value


def int_array_to_vector(data: Iterable[Union[IntImm, int, None]]) -> list[int]:
    """
    Convert an array of integer literals to plain ints.

    Elements may be ``IntImm`` nodes, plain ints, or ``None`` for an
    optional slot; a ``None`` is a violation either way.

    Raises:
        FatalError: If an element is missing or is not an integer
    """
    out = []
    for i, x in enumerate(data):
        check(x is not None, "Undefined integer in array", index=i)
        value = _literal_int(x)
        if value is None:
            fatal("Expected an integer literal", index=i, item=x)
        out.append(value)
    return out


def _literal_int(x: object) -> Optional[int]:
    """Return the value of an ``IntImm`` or plain int, else None."""
    if isinstance(x, IntImm):
        return x.value
    if isinstance(x, int) and not isinstance(x, bool):
        return x
    return None


def int_array_equal(arr1: Sequence[PrimExpr], arr2: Sequence[PrimExpr]) -> bool:
    """
    Return whether two int arrays are elementwise-equal.

    Only literal arrays can be compared; a symbolic element raises
    FatalError instead of comparing unequal.
    """
    if len(arr1) != len(arr2):
        return False

    for i, (lhs, rhs) in enumerate(zip(arr1, arr2)):
        check(isinstance(lhs, IntImm), "Expected an integer literal", index=i, item=lhs)
        check(isinstance(rhs, IntImm), "Expected an integer literal", index=i, item=rhs)
        if lhs.value != rhs.value:
            return False
    return True


# =============================================================================
# Numeric Reducers
# =============================================================================


def float_array_mean(float_array: Sequence[PrimExpr]) -> float:
    """
    Compute the mean of an array of float literals.

    An empty array has mean 0.0. Values are summed strictly left to
    right, so rankings built on the mean do not depend on numpy's
    pairwise summation.

    Raises:
        FatalError: If an element is not a FloatImm
    """
    if len(float_array) == 0:
        return 0.0

    for i, x in enumerate(float_array):
        check(isinstance(x, FloatImm), "Expected a float literal", index=i, item=x)
    values = np.fromiter((x.value for x in float_array), dtype=np.float64, count=len(float_array))
    total = np.cumsum(values)[-1]
    return float(total / len(values))


def axis_length_prod(axes: Iterable[Union[IterVar, PrimExpr]]) -> int:
    """
    Compute the product of the lengths of axes.

    Each item is either an iterator, whose domain extent is used, or an
    extent given as an ``IntImm``, a plain int or a symbolic expression.
    When any extent is symbolic the product cannot be known statically
    and UNKNOWN_EXTENT is returned.

    Example:
        axis_length_prod([IntImm(4), IntImm(8), IntImm(2)]) -> 64
        axis_length_prod([4, 8, 2]) -> 64
        axis_length_prod([IntImm(4), Var("n")]) -> UNKNOWN_EXTENT

    Raises:
        FatalError: If an extent is neither an integer nor an expression
    """
    ret = 1
    for i, axis in enumerate(axes):
        extent = axis.dom.extent if isinstance(axis, IterVar) else axis
        value = _literal_int(extent)
        if value is None:
            check(
                isinstance(extent, PrimExpr) and not isinstance(extent, FloatImm),
                "Malformed axis extent",
                index=i,
                item=extent,
            )
            logger.debug("Axis extent %r is not a constant", extent)
            return UNKNOWN_EXTENT
        ret *= value
    return ret
