"""Diagnostics and debugging utilities for advectfd."""

from .core import (
    assert_boundary_conditions,
    assert_finite,
    is_binary_field,
    sup_norm,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "sup_norm",
    "is_binary_field",
    "assert_boundary_conditions",
    "assert_finite",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
