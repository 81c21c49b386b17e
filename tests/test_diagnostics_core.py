"""Tests for solution-field diagnostics."""

import numpy as np
import pytest

from advectfd.diagnostics import (
    assert_boundary_conditions,
    assert_finite,
    is_binary_field,
    sup_norm,
)


def test_sup_norm_per_time_level() -> None:
    u = np.array([[1.0, -3.0], [0.5, 2.0], [0.0, 0.0]])
    assert sup_norm(u).tolist() == [1.0, 3.0]
    assert sup_norm(u, axis=1).tolist() == [3.0, 2.0, 0.0]
    assert sup_norm(np.array([-2.0, 1.0])) == 2.0


def test_sup_norm_rejects_empty() -> None:
    with pytest.raises(ValueError):
        sup_norm(np.array([]))
    with pytest.raises(ValueError):
        sup_norm(np.float64(1.0))


def test_is_binary_field() -> None:
    assert is_binary_field(np.array([[0.0, 1.0], [1.0, 1.0]]))
    assert not is_binary_field(np.array([0.0, 0.5]))
    assert not is_binary_field(np.array([1.0 + 1e-15]))


def test_assert_boundary_conditions() -> None:
    u = np.zeros((4, 5))
    u[0, :] = 1.0
    assert_boundary_conditions(u)

    u[0, 3] = 0.9
    with pytest.raises(ValueError, match="Left boundary"):
        assert_boundary_conditions(u)

    u[0, 3] = 1.0
    u[-1, 2] = 1e-3
    with pytest.raises(ValueError, match="Right boundary"):
        assert_boundary_conditions(u)

    with pytest.raises(ValueError):
        assert_boundary_conditions(np.zeros(4))


def test_assert_finite() -> None:
    u = np.ones((3, 4))
    assert_finite(u)

    u[1, 2] = np.nan
    u[2, 3] = np.inf
    with pytest.raises(ValueError, match=r"2 non-finite values; first at index \(1, 2\)"):
        assert_finite(u)
