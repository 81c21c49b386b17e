from __future__ import annotations

import numpy as np
import pytest

from advectfd.pde.schemes import (
    Scheme,
    advance,
    ftcs_step,
    lax_friedrichs_step,
    resolve_scheme,
)


def _field() -> np.ndarray:
    u = np.zeros((5, 3))
    u[:, 0] = [1.0, 0.8, 0.4, 0.1, 0.0]
    return u


def test_ftcs_update_formula() -> None:
    u = _field()
    ftcs_step(u, 2, 0, 0.1)
    assert u[2, 1] == pytest.approx(0.4 - 0.1 * (0.1 - 0.8))


def test_lax_friedrichs_update_formula() -> None:
    u = _field()
    lax_friedrichs_step(u, 2, 0, 0.1)
    assert u[2, 1] == pytest.approx(0.5 * (0.1 + 0.8) - 0.1 * (0.1 - 0.8))


@pytest.mark.parametrize("scheme", list(Scheme))
def test_step_writes_only_target_cell(scheme: Scheme) -> None:
    u = _field()
    before = u.copy()
    advance(scheme, u, 2, 0, 0.25)

    changed = np.argwhere(u != before)
    assert changed.tolist() == [[2, 1]]


@pytest.mark.parametrize("scheme", list(Scheme))
def test_vectorised_level_matches_index_by_index(
    scheme: Scheme, rng: np.random.Generator
) -> None:
    column = rng.uniform(-1.0, 1.0, size=12)
    u_loop = np.zeros((12, 4))
    u_loop[:, 0] = column
    u_vec = u_loop.copy()
    u_slice = u_loop.copy()

    for i in range(1, 11):
        advance(scheme, u_loop, i, 0, 0.37)
    advance(scheme, u_vec, np.arange(1, 11), 0, 0.37)
    advance(scheme, u_slice, slice(1, 11), 0, 0.37)

    assert np.array_equal(u_loop, u_vec)
    assert np.array_equal(u_loop, u_slice)


def test_in_level_writes_do_not_feed_reads() -> None:
    # Level k + 1 must only see level k, so a zero column stays zero next to
    # freshly written neighbours.
    u = np.zeros((6, 3))
    u[:, 0] = [1.0, 1.0, 0.0, 0.0, 0.0, 0.0]
    advance(Scheme.LAX_FRIEDRICHS, u, np.arange(1, 5), 0, 0.5)
    assert u[:, 1].tolist() == [0.0, 1.0, 1.0, 0.0, 0.0, 0.0]


def test_matched_ratio_lax_friedrichs_is_a_pure_shift() -> None:
    u = np.zeros((6, 2))
    u[:, 0] = [1.0, 0.0, 1.0, 1.0, 0.0, 0.0]
    lax_friedrichs_step(u, np.arange(1, 5), 0, 0.5)
    assert u[1:5, 1].tolist() == u[0:4, 0].tolist()


@pytest.mark.parametrize("i", [0, 4, [1, 4], [0, 2]])
def test_boundary_indices_are_rejected(i) -> None:
    u = _field()
    with pytest.raises(IndexError):
        advance(Scheme.FTCS, u, i, 0, 0.1)


@pytest.mark.parametrize("k", [-1, 2, 5])
def test_time_level_out_of_range(k: int) -> None:
    u = _field()
    with pytest.raises(IndexError):
        advance(Scheme.LAX_FRIEDRICHS, u, 2, k, 0.1)


def test_empty_interior_is_a_no_op() -> None:
    u = np.zeros((2, 3))
    u[0, :] = 1.0
    before = u.copy()
    advance(Scheme.FTCS, u, np.arange(1, 1), 0, 0.1)
    assert np.array_equal(u, before)


def test_resolve_scheme_names() -> None:
    assert resolve_scheme(Scheme.FTCS) is Scheme.FTCS
    assert resolve_scheme("ftcs") is Scheme.FTCS
    assert resolve_scheme("FTCS") is Scheme.FTCS
    assert resolve_scheme("lax") is Scheme.LAX_FRIEDRICHS
    assert resolve_scheme("lax-friedrichs") is Scheme.LAX_FRIEDRICHS
    assert resolve_scheme("LAX_FRIEDRICHS") is Scheme.LAX_FRIEDRICHS

    with pytest.raises(ValueError):
        resolve_scheme("upwind")
    with pytest.raises(ValueError):
        resolve_scheme(3)
