"""
Space-time grid construction for the 1D advection problem.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from ..errors import InvalidGridError
from .boundary import apply_boundary_values, square_wave_profile
from .utils import uniform_axis


def _as_step_count(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise InvalidGridError(f"{name} must be an integer, got {value!r}.")
    try:
        count = operator.index(value)
    except TypeError:
        raise InvalidGridError(f"{name} must be an integer, got {value!r}.") from None
    if count <= 0:
        raise InvalidGridError(f"{name} must be positive, got {count}.")
    return count


@dataclass(frozen=True)
class Grid:
    """
    Uniform discretization of ``[0, max_length] x [0, max_time]``.

    ``space_steps`` and ``time_steps`` count intervals, so the axes hold
    ``space_steps + 1`` and ``time_steps + 1`` nodes.
    """

    max_length: float
    max_time: float
    space_steps: int
    time_steps: int

    def __post_init__(self) -> None:
        """Validate Grid invariants."""
        object.__setattr__(self, "space_steps", _as_step_count("space_steps", self.space_steps))
        object.__setattr__(self, "time_steps", _as_step_count("time_steps", self.time_steps))

        for name in ("max_length", "max_time"):
            value = float(getattr(self, name))
            if not math.isfinite(value) or value <= 0.0:
                raise InvalidGridError(f"{name} must be positive and finite, got {value}.")
            object.__setattr__(self, name, value)

    @property
    def dx(self) -> float:
        return self.max_length / self.space_steps

    @property
    def dt(self) -> float:
        return self.max_time / self.time_steps

    @property
    def shape(self) -> tuple[int, int]:
        """Shape of the solution field ``u[space_index, time_index]``."""
        return (self.space_steps + 1, self.time_steps + 1)


@dataclass(frozen=True)
class AdvectionParameters:
    """Transport speed and initial square-wave width."""

    velocity: float
    front_size: int

    def __post_init__(self) -> None:
        """Validate AdvectionParameters invariants."""
        velocity = float(self.velocity)
        if not math.isfinite(velocity):
            raise ValueError(f"velocity must be finite, got {velocity}.")
        object.__setattr__(self, "velocity", velocity)

        try:
            front_size = operator.index(self.front_size)
        except TypeError:
            raise ValueError(
                f"front_size must be an integer, got {self.front_size!r}."
            ) from None
        object.__setattr__(self, "front_size", front_size)

    def courant_factor(self, grid: Grid) -> float:
        """Return ``velocity * dt / (2 * dx)``, the coefficient of the centred difference."""
        return self.velocity * grid.dt / (2.0 * grid.dx)


class GridState(NamedTuple):
    """Initialized grid: step sizes, Courant factor, solution field and axes."""

    dt: float
    dx: float
    factor: float
    u: np.ndarray
    x: np.ndarray
    t: np.ndarray


def build_grid_state(grid: Grid, params: AdvectionParameters) -> GridState:
    """
    Allocate the solution field for ``grid`` and apply initial/boundary data.

    The boundary rows are written after the initial profile, so ``u[0, 0]``
    is always 1.0 and ``u[-1, 0]`` always 0.0.
    """
    u = np.zeros(grid.shape, dtype=float)
    u[:, 0] = square_wave_profile(grid.space_steps + 1, params.front_size)
    apply_boundary_values(u)

    return GridState(
        dt=grid.dt,
        dx=grid.dx,
        factor=params.courant_factor(grid),
        u=u,
        x=uniform_axis(grid.dx, grid.space_steps),
        t=uniform_axis(grid.dt, grid.time_steps),
    )


def initialize_grid(
    max_length: float,
    max_time: float,
    velocity: float,
    time_steps: int,
    space_steps: int,
    front_size: int,
) -> GridState:
    """
    Build ``(dt, dx, factor, u, x, t)`` for a square-wave advection run.

    Parameters
    ----------
    max_length:
        Length of the spatial domain.
    max_time:
        Simulation horizon.
    velocity:
        Signed advection speed ``c``.
    time_steps / space_steps:
        Number of time and space intervals.
    front_size:
        1-based index threshold of the initial square wave. Values outside
        ``[1, space_steps + 1]`` are accepted and saturate.

    Returns
    -------
    GridState
        ``factor = velocity * dt / (2 * dx)``; ``u`` has shape
        ``(space_steps + 1, time_steps + 1)`` and is zero beyond its initial
        column and boundary rows.

    Raises
    ------
    InvalidGridError
        If a step count is not a positive integer or an extent is not
        positive.
    """
    grid = Grid(
        max_length=max_length,
        max_time=max_time,
        space_steps=space_steps,
        time_steps=time_steps,
    )
    params = AdvectionParameters(velocity=velocity, front_size=front_size)
    return build_grid_state(grid, params)
