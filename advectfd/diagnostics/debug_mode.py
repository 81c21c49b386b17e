"""
Debug mode management for advectfd.

When enabled, :class:`~advectfd.pde.solver.AdvectionSolver1D` validates each
finished run: the inflow and outflow rows must still hold 1 and 0, and runs
expected to be stable must contain no NaN or infinite values.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "ADVECTFD_DEBUG"
_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in (
    "1",
    "true",
    "yes",
    "on",
)


def is_debug_enabled() -> bool:
    """
    Return whether advectfd debug mode is currently enabled.

    Debug mode can be toggled via set_debug_enabled(...) or the
    ADVECTFD_DEBUG environment variable. While enabled, every solver run
    re-checks its boundary rows once the last time level is written, and
    stable runs are checked for non-finite values.

    Returns
    -------
    bool
        True if debug mode is enabled, False otherwise.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable the post-run solver checks.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    Example
    -------
    >>> from advectfd import simulate
    >>> with debug_context(True):
    ...     _ = simulate("lax-friedrichs", 1.0, 1.0, 1.0, 20, 20, 5)
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
