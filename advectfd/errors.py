"""Exception types raised by the advection solvers and error sweeps."""

from __future__ import annotations

from typing import Sequence


class InvalidGridError(ValueError):
    """Raised when a grid has a non-positive step count or extent."""


class DegradedResolutionExhaustedError(RuntimeError):
    """
    Raised when an error sweep runs out of valid degraded resolutions.

    The sweep is aborted at the first invalid resolution. The errors and step
    sizes computed before that point are kept on the exception so callers can
    truncate the sweep and report the valid prefix.

    Attributes
    ----------
    step:
        1-based sweep index ``j`` that could not be run.
    errors:
        Sup-norm errors for ``j = 1 .. step - 1``. A list of floats for a
        single time level; ``error_surface`` attaches a 2D array with one row
        per requested time level instead.
    delta_xs:
        Step sizes matching ``errors``.
    """

    def __init__(
        self,
        message: str,
        step: int,
        errors: Sequence = (),
        delta_xs: Sequence[float] = (),
    ) -> None:
        super().__init__(message)
        self.step = step
        self.errors = list(errors)
        self.delta_xs = list(delta_xs)
