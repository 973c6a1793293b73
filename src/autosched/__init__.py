"""
autosched - support layer for a search-based tensor-program optimizer.

Provides the shared primitives that the schedule search, cost model and
serialization layers build on: lookups over arrays of symbolic
expressions, iterator name cleaning, numeric reducers over literal
arrays, and verbosity-gated diagnostic output.
"""

from autosched.ir import FloatImm, IntImm, IterVar, Range, Var, iter_var
from autosched.utils import (
    UNKNOWN_EXTENT,
    FatalError,
    axis_length_prod,
    clean_name,
    find_and_delete_item,
    float_array_mean,
    get_index,
    get_indices,
    int_array_equal,
    int_array_to_vector,
    print_title,
    std_cout,
)

__version__ = "0.1.0"
__all__ = [
    "IntImm",
    "FloatImm",
    "Var",
    "Range",
    "IterVar",
    "iter_var",
    "FatalError",
    "UNKNOWN_EXTENT",
    "get_index",
    "get_indices",
    "find_and_delete_item",
    "clean_name",
    "float_array_mean",
    "axis_length_prod",
    "int_array_to_vector",
    "int_array_equal",
    "std_cout",
    "print_title",
]
