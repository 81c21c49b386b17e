"""
Error analysis of the Lax–Friedrichs scheme against a matched-ratio reference.

With ``c = 1`` and ``dt = dx`` the Lax–Friedrichs update reduces to
``u[i, k+1] = u[i-1, k]``: the 0/1 square wave moves exactly one cell per
step and the run reproduces the true solution. Degrading the step ratio away
from this point introduces numerical dissipation, and the sup-norm gap to the
reference at a fixed time level measures it.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence

import numpy as np

from ..errors import DegradedResolutionExhaustedError
from ..logging import get_logger
from ..pde.grid import _as_step_count
from ..pde.schemes import Scheme
from ..pde.solver import AdvectionSolution, simulate
from ..pde.utils import is_cfl_satisfied

logger = get_logger(__name__)

DEFAULT_SWEEP_LENGTH = 100


@dataclass(frozen=True)
class ErrorSweepResult:
    """
    Error curve at one observation time level.

    ``errors[j - 1]`` is the sup-norm gap between the reference and the run
    degraded by ``j`` steps, and ``delta_xs[j - 1]`` its step size. The result
    unpacks as ``errors, delta_xs``.

    Attributes:
        errors: 1D array of shape (sweep_length,).
        delta_xs: 1D array of shape (sweep_length,).
        time_index: 0-based time level the errors were measured at.
        metadata: Free-form metadata (scheme, reference step counts).
    """

    errors: np.ndarray
    delta_xs: np.ndarray
    time_index: int
    metadata: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate ErrorSweepResult invariants."""
        if self.errors.ndim != 1:
            raise ValueError(f"errors must be 1D, got shape {self.errors.shape}")
        if self.delta_xs.shape != self.errors.shape:
            raise ValueError(
                f"errors and delta_xs must have the same shape, "
                f"got {self.errors.shape} and {self.delta_xs.shape}"
            )
        object.__setattr__(self, "metadata", dict(self.metadata))

    def __iter__(self) -> Iterator[np.ndarray]:
        yield self.errors
        yield self.delta_xs

    def __len__(self) -> int:
        return int(self.errors.shape[0])


@dataclass(frozen=True)
class ErrorSurfaceResult:
    """
    Error curves for several observation time levels.

    ``errors[m, j - 1]`` corresponds to ``time_indices[m]`` and
    ``delta_xs[j - 1]``.
    """

    time_indices: np.ndarray
    delta_xs: np.ndarray
    errors: np.ndarray
    metadata: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate ErrorSurfaceResult invariants."""
        expected_shape = (self.time_indices.shape[0], self.delta_xs.shape[0])
        if self.errors.shape != expected_shape:
            raise ValueError(
                f"errors must have shape (n_times, sweep_length) = {expected_shape}, "
                f"got {self.errors.shape}"
            )
        object.__setattr__(self, "metadata", dict(self.metadata))

    def at(self, time_index: int) -> ErrorSweepResult:
        """Return the error curve measured at ``time_index``."""
        rows = np.flatnonzero(self.time_indices == time_index)
        if rows.size == 0:
            raise KeyError(f"time_index {time_index} was not part of the sweep.")
        return ErrorSweepResult(
            errors=self.errors[rows[0]].copy(),
            delta_xs=self.delta_xs.copy(),
            time_index=int(time_index),
            metadata=self.metadata,
        )


def reference_solution(
    max_length: float,
    max_time: float,
    velocity: float,
    steps: int,
    front_size: int,
) -> AdvectionSolution:
    """
    Lax–Friedrichs run with equal space and time step counts.

    For ``velocity * max_time == max_length`` the Courant number is exactly 1
    and the square wave is transported without dissipation.
    """
    return simulate(
        Scheme.LAX_FRIEDRICHS,
        max_length,
        max_time,
        velocity,
        time_steps=steps,
        space_steps=steps,
        front_size=front_size,
    )


def _check_time_indices(time_indices: Sequence[int], last: int) -> np.ndarray:
    values = []
    for value in np.asarray(time_indices, dtype=object).reshape(-1):
        if isinstance(value, (bool, np.bool_)):
            raise ValueError(f"time indices must be integers, got {value!r}.")
        try:
            values.append(operator.index(value))
        except TypeError:
            raise ValueError(f"time indices must be integers, got {value!r}.") from None
    if not values:
        raise ValueError("At least one time index is required.")
    indices = np.asarray(values, dtype=np.intp)
    if indices.min() < 0 or indices.max() > last:
        raise ValueError(f"time indices must lie in [0, {last}], got {indices.tolist()}.")
    return indices


def _sweep_errors(
    u_true: np.ndarray,
    time_indices: np.ndarray,
    max_length: float,
    max_time: float,
    velocity: float,
    reference_time_steps: int,
    reference_space_steps: int,
    front_size: int,
    sweep_length: int,
) -> tuple[np.ndarray, np.ndarray]:
    """Compare degraded runs against ``u_true``; returns (errors[n_times, n], delta_xs[n])."""
    reference_columns = u_true[:, time_indices]
    dx = max_length / reference_time_steps
    errors: List[np.ndarray] = []
    delta_xs: List[float] = []
    reported_unstable = False

    for j in range(1, sweep_length + 1):
        swept_steps = reference_space_steps - j
        denominator = reference_time_steps - j
        reason = None
        if swept_steps <= 0:
            reason = f"degraded step count {swept_steps} is not positive"
        elif denominator <= 0:
            reason = f"step size denominator {denominator} is not positive"
        elif time_indices.max() > swept_steps:
            reason = (
                f"degraded run has {swept_steps} time steps, fewer than "
                f"time index {int(time_indices.max())}"
            )
        if reason is not None:
            raise DegradedResolutionExhaustedError(
                f"Error sweep exhausted at j={j}: {reason}.",
                step=j,
                errors=errors,
                delta_xs=delta_xs,
            )

        if not reported_unstable and not is_cfl_satisfied(velocity, max_time / swept_steps, dx):
            logger.info("Degraded runs violate the CFL condition from j=%d on.", j)
            reported_unstable = True

        degraded = simulate(
            Scheme.LAX_FRIEDRICHS,
            max_length,
            max_time,
            velocity,
            time_steps=swept_steps,
            space_steps=reference_time_steps,
            front_size=front_size,
            warn_unstable=False,
        )
        gap = np.abs(reference_columns - degraded.u[:, time_indices])
        errors.append(np.max(gap, axis=0))
        delta_xs.append(max_time / denominator)
        logger.debug("j=%d steps=%d max error=%.6g", j, swept_steps, float(errors[-1].max()))

    return np.stack(errors, axis=1), np.asarray(delta_xs, dtype=float)


def _metadata(reference_time_steps: int, reference_space_steps: int) -> Dict[str, str]:
    return {
        "scheme": Scheme.LAX_FRIEDRICHS.value,
        "reference_time_steps": str(reference_time_steps),
        "reference_space_steps": str(reference_space_steps),
        "x_label": "dx",
        "y_label": "max |u_true - u|",
    }


def error_at_timestep(
    time_index: int,
    max_length: float,
    max_time: float,
    velocity: float,
    reference_time_steps: int,
    reference_space_steps: int,
    front_size: int,
    *,
    sweep_length: int = DEFAULT_SWEEP_LENGTH,
) -> ErrorSweepResult:
    """
    Measure the Lax–Friedrichs error at ``time_index`` as the step ratio degrades.

    The reference ``u_true`` is computed once, with ``reference_space_steps``
    time steps on ``reference_time_steps`` spatial intervals. For
    ``j = 1 .. sweep_length`` the run is repeated with
    ``reference_space_steps - j`` time steps on the same spatial grid, and

    * ``errors[j - 1] = max_i |u_true[i, time_index] - u_j[i, time_index]|``
    * ``delta_xs[j - 1] = max_time / (reference_time_steps - j)``

    Pass equal step counts (e.g. 350 and 350) with ``velocity = 1`` and
    ``max_length == max_time`` to compare against the exact square wave.

    Parameters
    ----------
    time_index:
        0-based time level to observe.
    max_length / max_time / velocity / front_size:
        Problem definition shared by every run.
    reference_time_steps / reference_space_steps:
        Step counts of the reference run.
    sweep_length:
        Number of degraded runs (default 100).

    Raises
    ------
    ValueError
        If ``time_index`` is not an integer or lies outside the reference
        time axis. Checked before any run is computed.
    DegradedResolutionExhaustedError
        If the sweep needs a non-positive step count or a degraded run too
        short to contain ``time_index``. The valid prefix is attached.
    InvalidGridError
        If the reference grid itself is degenerate.
    """
    if sweep_length < 1:
        raise ValueError(f"sweep_length must be >= 1, got {sweep_length}.")
    # The reference run has reference_space_steps time steps.
    last = _as_step_count("reference_space_steps", reference_space_steps)
    indices = _check_time_indices([time_index], last)

    logger.info(
        "Error sweep at time index %d: reference %dx%d, %d degraded runs",
        int(indices[0]),
        reference_time_steps,
        reference_space_steps,
        sweep_length,
    )
    u_true = simulate(
        Scheme.LAX_FRIEDRICHS,
        max_length,
        max_time,
        velocity,
        time_steps=reference_space_steps,
        space_steps=reference_time_steps,
        front_size=front_size,
    ).u

    try:
        errors, delta_xs = _sweep_errors(
            u_true,
            indices,
            max_length,
            max_time,
            velocity,
            reference_time_steps,
            reference_space_steps,
            front_size,
            sweep_length,
        )
    except DegradedResolutionExhaustedError as exc:
        exc.errors = [float(row[0]) for row in exc.errors]
        raise

    return ErrorSweepResult(
        errors=errors[0],
        delta_xs=delta_xs,
        time_index=int(indices[0]),
        metadata=_metadata(reference_time_steps, reference_space_steps),
    )


def error_surface(
    time_indices: Sequence[int],
    max_length: float,
    max_time: float,
    velocity: float,
    reference_time_steps: int,
    reference_space_steps: int,
    front_size: int,
    *,
    sweep_length: int = DEFAULT_SWEEP_LENGTH,
) -> ErrorSurfaceResult:
    """
    Error curves of :func:`error_at_timestep` for several time levels at once.

    The reference and each degraded run are computed a single time and sliced
    at every requested time level, so row ``m`` equals
    ``error_at_timestep(time_indices[m], ...).errors``.

    On :class:`~advectfd.errors.DegradedResolutionExhaustedError` the attached
    ``errors`` prefix is a 2D array of shape ``(len(time_indices), step - 1)``.
    """
    if sweep_length < 1:
        raise ValueError(f"sweep_length must be >= 1, got {sweep_length}.")
    last = _as_step_count("reference_space_steps", reference_space_steps)
    indices = _check_time_indices(time_indices, last)

    u_true = simulate(
        Scheme.LAX_FRIEDRICHS,
        max_length,
        max_time,
        velocity,
        time_steps=reference_space_steps,
        space_steps=reference_time_steps,
        front_size=front_size,
    ).u
    logger.info(
        "Error surface over %d time levels, %d degraded runs", indices.size, sweep_length
    )

    try:
        errors, delta_xs = _sweep_errors(
            u_true,
            indices,
            max_length,
            max_time,
            velocity,
            reference_time_steps,
            reference_space_steps,
            front_size,
            sweep_length,
        )
    except DegradedResolutionExhaustedError as exc:
        # Same layout as ErrorSurfaceResult.errors: one row per time index.
        if exc.errors:
            exc.errors = np.stack(exc.errors, axis=1)
        else:
            exc.errors = np.empty((indices.size, 0))
        raise

    return ErrorSurfaceResult(
        time_indices=indices,
        delta_xs=delta_xs,
        errors=errors,
        metadata=_metadata(reference_time_steps, reference_space_steps),
    )
