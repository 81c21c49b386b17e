"""Error analysis of the advection schemes."""

from .convergence import fitted_order, observed_orders
from .error import (
    DEFAULT_SWEEP_LENGTH,
    ErrorSurfaceResult,
    ErrorSweepResult,
    error_at_timestep,
    error_surface,
    reference_solution,
)

__all__ = [
    "DEFAULT_SWEEP_LENGTH",
    "ErrorSurfaceResult",
    "ErrorSweepResult",
    "error_at_timestep",
    "error_surface",
    "fitted_order",
    "observed_orders",
    "reference_solution",
]
