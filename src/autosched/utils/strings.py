"""
String helpers for naming iterators in generated schedules.
"""

from autosched.utils.errors import check

# Applied in order, each rule once over the whole string.
_CLEAN_NAME_RULES = (
    (".", "_"),
    ("@", "_"),
    ("outer", "o"),
    ("inner", "i"),
)


def str_replace(base: str, old: str, new: str) -> str:
    """
    Replace every occurrence of ``old`` in ``base`` with ``new``.

    The scan resumes after each inserted ``new``, so replacement text is
    never matched again.

    Raises:
        FatalError: If ``old`` is empty
    """
    check(old, "Cannot replace an empty substring", base=base)
    pieces = []
    start = 0
    pos = base.find(old)
    while pos != -1:
        pieces.append(base[start:pos])
        pieces.append(new)
        start = pos + len(old)
        pos = base.find(old, start)
    pieces.append(base[start:])
    return "".join(pieces)


def clean_name(name: str) -> str:
    """
    Clean the name of an iterator to make it valid in generated Python code.

    Example:
        clean_name("T.outer@inner") -> "T_o_i"
    """
    ret = name
    for old, new in _CLEAN_NAME_RULES:
        ret = str_replace(ret, old, new)
    return ret


def chars(ch: str, times: int) -> str:
    """Repeat a character ``times`` times."""
    return ch * max(times, 0)
