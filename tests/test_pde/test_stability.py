from __future__ import annotations

import numpy as np
import pytest

from advectfd.diagnostics import sup_norm
from advectfd.pde.schemes import Scheme
from advectfd.pde.solver import simulate
from advectfd.pde.utils import (
    compute_cfl,
    is_cfl_satisfied,
    is_stable_explicit,
    uniform_axis,
)


def test_compute_cfl_and_stability_helpers() -> None:
    cfl = compute_cfl(dx=0.1, dt=0.02, wave_speed=2.0)
    assert cfl == pytest.approx(0.4)
    assert is_stable_explicit(cfl)
    assert not is_stable_explicit(1.1)


def test_is_cfl_satisfied_predicate() -> None:
    assert is_cfl_satisfied(1.0, 0.01, 0.01)
    assert is_cfl_satisfied(-1.0, 0.005, 0.01)
    assert is_cfl_satisfied(0.0, 10.0, 0.01)
    assert not is_cfl_satisfied(1.0, 0.011, 0.01)
    assert not is_cfl_satisfied(-3.0, 0.01, 0.01)


def test_utils_validation_helpers() -> None:
    with pytest.raises(ValueError):
        compute_cfl(dx=0.0, dt=0.1, wave_speed=1.0)
    with pytest.raises(ValueError):
        is_cfl_satisfied(1.0, -0.1, 0.1)
    with pytest.raises(ValueError):
        uniform_axis(0.1, 0)


@pytest.mark.parametrize(
    "velocity, time_steps, space_steps",
    [(1.0, 350, 300), (1.0, 100, 100), (0.5, 100, 100), (-1.0, 200, 150), (-0.3, 50, 120)],
)
def test_lax_friedrichs_bounded_under_cfl(
    velocity: float, time_steps: int, space_steps: int
) -> None:
    x, u, t = simulate(Scheme.LAX_FRIEDRICHS, 1.0, 1.0, velocity, time_steps, space_steps, 20)

    assert is_cfl_satisfied(velocity, t[1], x[1])
    assert u.max() <= 1.0 + 1e-12
    assert u.min() >= -1e-12
    assert np.all(sup_norm(u) <= 1.0 + 1e-12)


@pytest.mark.parametrize(
    "velocity, time_steps, space_steps",
    [(1.0, 200, 300), (1.0, 100, 300), (-2.0, 150, 120)],
)
def test_lax_friedrichs_explodes_beyond_cfl(
    velocity: float, time_steps: int, space_steps: int
) -> None:
    x, u, t = simulate(Scheme.LAX_FRIEDRICHS, 1.0, 1.0, velocity, time_steps, space_steps, 20)

    assert not is_cfl_satisfied(velocity, t[1], x[1])
    assert sup_norm(u).max() > 10.0


@pytest.mark.parametrize(
    "velocity, time_steps, space_steps",
    [(15.0, 3000, 30), (10.0, 3000, 30), (1.0, 350, 300), (-1.0, 350, 300)],
)
def test_ftcs_grows_without_bound(velocity: float, time_steps: int, space_steps: int) -> None:
    _, u, _ = simulate(Scheme.FTCS, 1.0, 1.0, velocity, time_steps, space_steps, 15)
    norms = sup_norm(u)

    assert norms[0] == 1.0
    assert norms[-1] > 1e3
    assert norms[-1] > norms[time_steps // 2]


def test_ftcs_unstable_even_when_cfl_holds() -> None:
    x, u, t = simulate(Scheme.FTCS, 1.0, 1.0, 15.0, 3000, 30, 15)

    assert is_cfl_satisfied(15.0, t[1], x[1])
    assert sup_norm(u[:, -1]) > 1e3
