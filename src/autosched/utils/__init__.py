"""
Auto-scheduler Utilities Package.

Common helpers shared by the search policy, cost model and serialization
layers: array lookups, numeric reducers, name cleaning, verbosity-gated
output and hashing.
"""

from autosched.utils.errors import (
    AutoSchedError,
    ConfigError,
    FatalError,
    check,
    fatal,
)
from autosched.utils.config import (
    OutputConfig,
    configure_logging,
    get_config,
    set_config,
    verbose_to_log_level,
)
from autosched.utils.array import (
    UNKNOWN_EXTENT,
    axis_length_prod,
    find_and_delete_item,
    find_index,
    float_array_mean,
    get_index,
    get_indices,
    get_int_imm,
    int_array_equal,
    int_array_to_vector,
)
from autosched.utils.hashing import hash_combine, hash_tuple
from autosched.utils.stream import NullStream, print_title, std_cout
from autosched.utils.strings import chars, clean_name, str_replace

__all__ = [
    # Errors
    "AutoSchedError",
    "ConfigError",
    "FatalError",
    "check",
    "fatal",
    # Configuration
    "OutputConfig",
    "configure_logging",
    "get_config",
    "set_config",
    "verbose_to_log_level",
    # Sequence search
    "find_index",
    "get_index",
    "get_indices",
    "find_and_delete_item",
    # Conversions and reducers
    "UNKNOWN_EXTENT",
    "axis_length_prod",
    "float_array_mean",
    "get_int_imm",
    "int_array_equal",
    "int_array_to_vector",
    # Strings
    "chars",
    "clean_name",
    "str_replace",
    # Output
    "NullStream",
    "print_title",
    "std_cout",
    # Hashing
    "hash_combine",
    "hash_tuple",
]
