"""
Finite-difference solver for the 1D linear advection equation.
"""

from __future__ import annotations

from typing import NamedTuple, Union

import numpy as np

from ..diagnostics.core import assert_boundary_conditions, assert_finite
from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .boundary import INFLOW_VALUE, OUTFLOW_VALUE
from .grid import AdvectionParameters, Grid, build_grid_state
from .schemes import Scheme, advance, resolve_scheme
from .utils import compute_cfl, is_stable_explicit

logger = get_logger(__name__)


class AdvectionSolution(NamedTuple):
    """Result of one run, unpackable as ``x, u, t``."""

    x: np.ndarray
    u: np.ndarray
    t: np.ndarray


class AdvectionSolver1D:
    """
    Explicit finite-difference solver for ``u_t + c u_x = 0`` on a uniform grid.

    The domain carries a square wave attached to the inflow edge. The inflow
    boundary is held at 1 and the outflow boundary at 0. Each call to
    :meth:`solve` allocates a fresh solution field and returns the full
    space-time history.

    Unstable Lax-Friedrichs runs log a warning unless ``warn_unstable`` is
    False. In debug mode every run re-checks its boundary rows, and stable
    runs are also checked for non-finite values.
    """

    def __init__(
        self,
        grid: Grid,
        params: AdvectionParameters,
        scheme: Union[Scheme, str] = Scheme.LAX_FRIEDRICHS,
        *,
        warn_unstable: bool = True,
    ) -> None:
        self.grid = grid
        self.params = params
        self.scheme = resolve_scheme(scheme)
        self.cfl = compute_cfl(grid.dx, grid.dt, params.velocity)
        self.warn_unstable = warn_unstable

    # ------------------------------------------------------------------
    @property
    def is_stable(self) -> bool:
        """Whether the run is expected to stay bounded."""
        if self.scheme is Scheme.FTCS:
            return self.params.velocity == 0.0
        return is_stable_explicit(self.cfl)

    def solve(self) -> AdvectionSolution:
        """Run the solver and return ``(x, u, t)`` with ``u`` of shape (nx+1, nt+1)."""
        state = build_grid_state(self.grid, self.params)
        u = state.u

        logger.debug(
            "Running %s: space_steps=%d time_steps=%d cfl=%.6g factor=%.6g",
            self.scheme.value,
            self.grid.space_steps,
            self.grid.time_steps,
            self.cfl,
            state.factor,
        )
        if self.warn_unstable and self.scheme is Scheme.LAX_FRIEDRICHS and not self.is_stable:
            logger.warning(
                "Lax-Friedrichs run violates the CFL condition (|c| dt/dx = %.6g > 1); "
                "the solution will grow without bound.",
                self.cfl,
            )

        # Level k + 1 depends on level k only; boundary rows stay fixed.
        interior = np.arange(1, self.grid.space_steps)
        for k in range(self.grid.time_steps):
            advance(self.scheme, u, interior, k, state.factor)

        if is_debug_enabled():
            assert_boundary_conditions(u, left=INFLOW_VALUE, right=OUTFLOW_VALUE)
            # Unstable runs may overflow.
            if self.is_stable:
                assert_finite(u)

        return AdvectionSolution(x=state.x, u=u, t=state.t)


def simulate(
    scheme: Union[Scheme, str],
    max_length: float,
    max_time: float,
    velocity: float,
    time_steps: int,
    space_steps: int,
    front_size: int,
    *,
    warn_unstable: bool = True,
) -> AdvectionSolution:
    """
    Propagate the square wave with ``scheme`` and return ``(x, u, t)``.

    Parameters
    ----------
    scheme:
        ``Scheme.FTCS`` or ``Scheme.LAX_FRIEDRICHS`` (or their names).
    max_length / max_time:
        Extent of the spatial domain and simulation horizon.
    velocity:
        Signed advection speed.
    time_steps / space_steps:
        Number of time and space intervals.
    front_size:
        1-based width threshold of the initial square wave.
    warn_unstable:
        Log a warning when a Lax-Friedrichs run violates the CFL condition.

    Raises
    ------
    InvalidGridError
        If the grid is degenerate.
    ValueError
        If the scheme is unknown.

    Example
    -------
    >>> x, u, t = simulate("lax-friedrichs", 1.0, 1.0, 1.0, 350, 300, 50)
    >>> u.shape
    (301, 351)
    """
    grid = Grid(
        max_length=max_length,
        max_time=max_time,
        space_steps=space_steps,
        time_steps=time_steps,
    )
    params = AdvectionParameters(velocity=velocity, front_size=front_size)
    return AdvectionSolver1D(grid, params, scheme, warn_unstable=warn_unstable).solve()
