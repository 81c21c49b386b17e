"""Core diagnostic functions for space-time solution fields."""

from __future__ import annotations

import numpy as np


def sup_norm(u: np.ndarray, axis: int = 0) -> np.ndarray:
    """
    Compute the sup-norm max|u| along ``axis``.

    For a solution field ``u[space_index, time_index]`` the default axis gives
    one value per time level.

    Parameters
    ----------
    u:
        Real array with at least one dimension.
    axis:
        Axis to reduce over.

    Returns
    -------
    np.ndarray
        Array with ``axis`` removed.

    Raises
    ------
    ValueError
        If u is empty or zero-dimensional.
    """
    arr = np.asarray(u, dtype=float)
    if arr.ndim < 1 or arr.size == 0:
        raise ValueError("sup_norm expects a non-empty array with at least 1 dimension.")
    return np.max(np.abs(arr), axis=axis)


def is_binary_field(u: np.ndarray) -> bool:
    """Return True if every entry of ``u`` is exactly 0.0 or 1.0."""
    arr = np.asarray(u, dtype=float)
    return bool(np.all((arr == 0.0) | (arr == 1.0)))


def assert_boundary_conditions(
    u: np.ndarray,
    left: float = 1.0,
    right: float = 0.0,
) -> None:
    """
    Assert that the first and last spatial rows hold their Dirichlet values.

    Parameters
    ----------
    u:
        Solution field of shape (space_steps + 1, time_steps + 1).
    left:
        Inflow value expected in ``u[0, :]``.
    right:
        Outflow value expected in ``u[-1, :]``.

    Raises
    ------
    ValueError
        If u is not 2D or a boundary entry differs from its value.
    """
    arr = np.asarray(u)
    if arr.ndim != 2:
        raise ValueError(f"u must be a 2D array, got shape {arr.shape}.")

    bad_left = np.flatnonzero(arr[0, :] != left)
    if bad_left.size:
        raise ValueError(
            f"Left boundary differs from {left} at time levels "
            f"{bad_left[:5].tolist()}."
        )

    bad_right = np.flatnonzero(arr[-1, :] != right)
    if bad_right.size:
        raise ValueError(
            f"Right boundary differs from {right} at time levels "
            f"{bad_right[:5].tolist()}."
        )


def assert_finite(u: np.ndarray) -> None:
    """
    Assert that every entry of ``u`` is finite.

    Raises
    ------
    ValueError
        If u holds NaN or infinite values. The message reports how many and
        the first offending ``(space_index, time_index)`` position.
    """
    arr = np.asarray(u, dtype=float)
    bad = ~np.isfinite(arr)
    if bad.any():
        first = tuple(int(i) for i in np.argwhere(bad)[0])
        raise ValueError(
            f"Field holds {int(bad.sum())} non-finite values; first at index {first}."
        )
