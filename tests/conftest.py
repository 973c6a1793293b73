"""
Pytest configuration and shared fixtures for auto-scheduler utility tests.
"""

import pytest

from autosched.ir.expr import FloatImm, IntImm, IterKind, IterVar, Var, iter_var
from autosched.utils.config import OutputConfig, set_config


@pytest.fixture
def int_array():
    """Factory fixture for arrays of integer literals."""

    def _create(*values: int) -> list[IntImm]:
        return [IntImm(v) for v in values]

    return _create


@pytest.fixture
def float_array():
    """Factory fixture for arrays of float literals."""

    def _create(*values: float) -> list[FloatImm]:
        return [FloatImm(v) for v in values]

    return _create


@pytest.fixture
def matmul_axes() -> list[IterVar]:
    """Axes of a 64x32x16 matmul: two spatial axes and one reduction."""
    return [
        iter_var("i", 64),
        iter_var("j", 32),
        iter_var("k", 16, IterKind.REDUCE),
    ]


@pytest.fixture
def symbolic_axes() -> list[IterVar]:
    """Axes where the batch dimension is an unbound variable."""
    return [
        iter_var("b", Var("batch")),
        iter_var("i", 4),
    ]


@pytest.fixture(autouse=True)
def reset_output_config():
    """Restore the default output configuration after each test."""
    previous = set_config(OutputConfig())
    yield
    set_config(previous)
