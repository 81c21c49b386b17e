"""
Initial and boundary data for the square-wave advection problem.

The inflow edge (``x = 0``) is held at amplitude 1 and the outflow edge
(``x = max_length``) at 0 for every time level. The initial profile is a
square wave of width ``front_size`` attached to the inflow edge.
"""

from __future__ import annotations

import numpy as np

INFLOW_VALUE = 1.0
OUTFLOW_VALUE = 0.0


def square_wave_profile(num_points: int, front_size: int) -> np.ndarray:
    """
    Return the initial profile with ``num_points`` nodes.

    Node ``i`` (0-based) is 1.0 when its 1-based position ``i + 1`` is below
    ``front_size`` and 0.0 otherwise, so ``front_size = 50`` yields 49 ones.
    Thresholds outside ``[1, num_points]`` saturate to all zeros or all ones.
    """
    positions = np.arange(1, num_points + 1)
    return np.where(positions < front_size, 1.0, 0.0)


def apply_boundary_values(
    u: np.ndarray,
    left: float = INFLOW_VALUE,
    right: float = OUTFLOW_VALUE,
) -> None:
    """
    Mutate `u` in-place so both boundary rows hold their Dirichlet values.

    Parameters
    ----------
    u:
        Solution field of shape (space_steps + 1, time_steps + 1).
    left / right:
        Values written to ``u[0, :]`` and ``u[-1, :]``.
    """
    if u.ndim != 2 or u.shape[0] < 2:
        raise ValueError("Boundary application requires at least two spatial nodes.")

    u[0, :] = left
    u[-1, :] = right
