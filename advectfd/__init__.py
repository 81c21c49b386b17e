"""advectfd - explicit finite-difference schemes for 1D linear advection."""

__version__ = "0.1.0"

# Error analysis
from .analysis import (
    ErrorSurfaceResult,
    ErrorSweepResult,
    error_at_timestep,
    error_surface,
    fitted_order,
    observed_orders,
    reference_solution,
)

# Diagnostics
from .diagnostics import (
    assert_boundary_conditions,
    assert_finite,
    debug_context,
    is_binary_field,
    is_debug_enabled,
    set_debug_enabled,
    sup_norm,
)
from .errors import DegradedResolutionExhaustedError, InvalidGridError

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Solvers
from .pde import (
    AdvectionParameters,
    AdvectionSolution,
    AdvectionSolver1D,
    Grid,
    GridState,
    Scheme,
    advance,
    compute_cfl,
    initialize_grid,
    is_cfl_satisfied,
    simulate,
)

__all__ = [
    "__version__",
    "AdvectionParameters",
    "AdvectionSolution",
    "AdvectionSolver1D",
    "DegradedResolutionExhaustedError",
    "ErrorSurfaceResult",
    "ErrorSweepResult",
    "Grid",
    "GridState",
    "InvalidGridError",
    "Scheme",
    "advance",
    "assert_boundary_conditions",
    "assert_finite",
    "compute_cfl",
    "configure_logging",
    "debug_context",
    "error_at_timestep",
    "error_surface",
    "fitted_order",
    "get_logger",
    "initialize_grid",
    "is_binary_field",
    "is_cfl_satisfied",
    "is_debug_enabled",
    "observed_orders",
    "reference_solution",
    "set_debug_enabled",
    "set_log_level",
    "simulate",
    "sup_norm",
]
