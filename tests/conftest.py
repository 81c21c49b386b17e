"""Pytest configuration and shared fixtures for advectfd tests.

This module provides:
- A deterministic numpy RNG fixture
- An autouse fixture restoring debug mode and log levels after each test
- The reference Lax-Friedrichs run used by several test modules
"""

import logging
import os

import numpy as np
import pytest

from advectfd.diagnostics import is_debug_enabled, set_debug_enabled
from advectfd.logging import configure_logging
from advectfd.pde import AdvectionSolution, Scheme, simulate


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_global_state():
    """Reset debug mode and logging configuration changed by a test."""
    debug = is_debug_enabled()
    yield
    set_debug_enabled(debug)
    configure_logging(level=logging.WARNING)


@pytest.fixture(scope="module")
def lax_run() -> AdvectionSolution:
    """Lax-Friedrichs run with maxL = maxT = c = 1, 350 time steps, 300 space steps."""
    return simulate(Scheme.LAX_FRIEDRICHS, 1.0, 1.0, 1.0, 350, 300, 50)
