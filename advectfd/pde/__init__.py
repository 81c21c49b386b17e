"""
Explicit finite-difference solvers for the 1D linear advection equation
``u_t + c u_x = 0``.

The module provides:

* `initialize_grid` – axes, Courant factor and the solution field with the
  square-wave initial profile and Dirichlet boundary rows.
* `Scheme` – FTCS and Lax–Friedrichs update rules dispatched by `advance`.
* `AdvectionSolver1D` / `simulate` – full space-time runs.
* CFL utilities to reason about stability of the explicit schemes.

Limitations: grids are uniform, the domain is 1D, the boundary rows are
fixed at 1 (inflow) and 0 (outflow) and computations run on CPU with NumPy
only. All solvers are deterministic and reproducible.

Example
-------
>>> from advectfd.pde import Scheme, simulate, is_cfl_satisfied
>>> x, u, t = simulate(Scheme.LAX_FRIEDRICHS, 1.0, 1.0, 1.0, 350, 300, 50)
>>> u.shape
(301, 351)
>>> is_cfl_satisfied(1.0, t[1], x[1])
True
"""

from .boundary import INFLOW_VALUE, OUTFLOW_VALUE, apply_boundary_values, square_wave_profile
from .grid import AdvectionParameters, Grid, GridState, build_grid_state, initialize_grid
from .schemes import Scheme, advance, ftcs_step, lax_friedrichs_step, resolve_scheme
from .solver import AdvectionSolution, AdvectionSolver1D, simulate
from .utils import compute_cfl, is_cfl_satisfied, is_stable_explicit, uniform_axis

__all__ = [
    "INFLOW_VALUE",
    "OUTFLOW_VALUE",
    "AdvectionParameters",
    "AdvectionSolution",
    "AdvectionSolver1D",
    "Grid",
    "GridState",
    "Scheme",
    "advance",
    "apply_boundary_values",
    "build_grid_state",
    "compute_cfl",
    "ftcs_step",
    "initialize_grid",
    "is_cfl_satisfied",
    "is_stable_explicit",
    "lax_friedrichs_step",
    "resolve_scheme",
    "simulate",
    "square_wave_profile",
    "uniform_axis",
]
