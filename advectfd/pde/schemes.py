"""
Explicit single-step update rules for ``u_t + c u_x = 0``.

Both schemes read time level ``k`` and write level ``k + 1`` at the requested
interior nodes. ``factor`` is ``c * dt / (2 * dx)``.

FTCS (forward time, centred space)::

    u[i, k+1] = u[i, k] - factor * (u[i+1, k] - u[i-1, k])

Lax–Friedrichs (FTCS with ``u[i, k]`` replaced by its neighbour average)::

    u[i, k+1] = 0.5 * (u[i+1, k] + u[i-1, k]) - factor * (u[i+1, k] - u[i-1, k])

FTCS amplifies every non-zero wavenumber for any ``factor`` and is therefore
unconditionally unstable. Lax–Friedrichs is stable iff ``|c| dt / dx <= 1``.
Neither rule is modified to enforce stability.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Union

import numpy as np

IndexLike = Union[int, slice, np.ndarray]


class Scheme(str, Enum):
    """Time-marching scheme tag."""

    FTCS = "ftcs"
    LAX_FRIEDRICHS = "lax-friedrichs"

    @classmethod
    def _missing_(cls, value: object) -> "Scheme | None":
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "-")
            if key == "lax":
                return cls.LAX_FRIEDRICHS
            for member in cls:
                if member.value == key:
                    return member
        return None


def resolve_scheme(scheme: Union[Scheme, str]) -> Scheme:
    """Return the Scheme for a member or its name (``"ftcs"``, ``"lax"``, ...)."""
    try:
        return Scheme(scheme)
    except ValueError:
        raise ValueError(
            f"Unsupported scheme {scheme!r}; expected 'ftcs' or 'lax-friedrichs'."
        ) from None


def _interior_indices(u: np.ndarray, i: IndexLike) -> np.ndarray:
    n_space = u.shape[0]
    if isinstance(i, slice):
        idx = np.arange(n_space)[i]
    else:
        idx = np.asarray(i, dtype=np.intp)

    if idx.size and (idx.min() < 1 or idx.max() > n_space - 2):
        raise IndexError(
            f"Spatial indices must lie in [1, {n_space - 2}]; boundary nodes are fixed."
        )
    return idx


def _check_level(u: np.ndarray, k: int) -> None:
    if not 0 <= k < u.shape[1] - 1:
        raise IndexError(f"Time level k must lie in [0, {u.shape[1] - 2}], got {k}.")


def ftcs_step(u: np.ndarray, i: IndexLike, k: int, factor: float) -> None:
    """Write the FTCS update of level ``k`` into ``u[i, k + 1]``."""
    _check_level(u, k)
    idx = _interior_indices(u, i)
    left = u[idx - 1, k]
    right = u[idx + 1, k]
    u[idx, k + 1] = u[idx, k] - factor * (right - left)


def lax_friedrichs_step(u: np.ndarray, i: IndexLike, k: int, factor: float) -> None:
    """Write the Lax–Friedrichs update of level ``k`` into ``u[i, k + 1]``."""
    _check_level(u, k)
    idx = _interior_indices(u, i)
    left = u[idx - 1, k]
    right = u[idx + 1, k]
    u[idx, k + 1] = 0.5 * (right + left) - factor * (right - left)


_STEPPERS: Dict[Scheme, Callable[[np.ndarray, IndexLike, int, float], None]] = {
    Scheme.FTCS: ftcs_step,
    Scheme.LAX_FRIEDRICHS: lax_friedrichs_step,
}


def advance(
    scheme: Union[Scheme, str],
    u: np.ndarray,
    i: IndexLike,
    k: int,
    factor: float,
) -> None:
    """
    Advance ``u`` from level ``k`` to ``k + 1`` at spatial index/indices ``i``.

    All reads come from column ``k`` before the write to column ``k + 1``, so
    passing every interior index at once gives the same values as visiting
    them one by one.
    """
    _STEPPERS[resolve_scheme(scheme)](u, i, k, factor)
