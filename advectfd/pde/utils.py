"""
Utility helpers for the advection solvers: CFL computations and axes.
"""

from __future__ import annotations

import numpy as np


def compute_cfl(dx: float, dt: float, wave_speed: float) -> float:
    """Return the Courant–Friedrichs–Lewy number |c| dt / dx."""
    if dx <= 0.0 or dt <= 0.0:
        raise ValueError("dx and dt must be positive.")
    return abs(wave_speed) * dt / dx


def is_stable_explicit(cfl: float, limit: float = 1.0) -> bool:
    """Return True if an explicit scheme is stable under the provided limit."""
    return cfl <= limit + 1e-12


def is_cfl_satisfied(velocity: float, dt: float, dx: float) -> bool:
    """
    Return True if ``|velocity| * dt / dx <= 1``.

    This is the stability condition of the Lax–Friedrichs scheme. The solvers
    never enforce it; callers may check it before a run or deliberately
    violate it to observe the instability.
    """
    return is_stable_explicit(compute_cfl(dx, dt, velocity))


def uniform_axis(step: float, num_steps: int) -> np.ndarray:
    """
    Return the read-only axis ``[k * step for k in 0 .. num_steps]``.

    Each node is computed as an exact product rather than by accumulation, so
    two axes built from the same inputs are bit-identical.
    """
    if num_steps < 1:
        raise ValueError("num_steps must be at least 1 to form an axis.")
    axis = np.arange(num_steps + 1, dtype=float) * float(step)
    axis.flags.writeable = False
    return axis
