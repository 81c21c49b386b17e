"""
Observed convergence orders of an error-versus-step-size curve.

For an error behaving like ``C * h**p`` the log-log slope is ``p``. The
Lax–Friedrichs dissipation term scales like ``h**3`` near the wavefront, so
sweeps close to the matched ratio are expected to show orders near 3.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def _as_curve(delta_xs: Sequence[float], errors: Sequence[float]) -> tuple[np.ndarray, np.ndarray]:
    h = np.asarray(delta_xs, dtype=float)
    e = np.asarray(errors, dtype=float)
    if h.ndim != 1 or e.ndim != 1:
        raise ValueError("delta_xs and errors must be 1D sequences.")
    if h.shape != e.shape:
        raise ValueError(
            f"delta_xs and errors must have the same length, got {h.size} and {e.size}."
        )
    return h, e


def observed_orders(delta_xs: Sequence[float], errors: Sequence[float]) -> np.ndarray:
    """
    Per-step orders ``log(e[n+1] / e[n]) / log(h[n+1] / h[n])``.

    Pairs with a non-positive or non-finite error, or equal step sizes, have
    no defined order and are reported as NaN.

    Returns
    -------
    np.ndarray
        Array of length ``len(errors) - 1``.
    """
    h, e = _as_curve(delta_xs, errors)
    orders = np.full(max(h.size - 1, 0), np.nan)
    for n in range(h.size - 1):
        e1, e2 = e[n], e[n + 1]
        h1, h2 = h[n], h[n + 1]
        if not (np.isfinite(e1) and np.isfinite(e2)) or e1 <= 0.0 or e2 <= 0.0:
            continue
        if h1 <= 0.0 or h2 <= 0.0 or h1 == h2:
            continue
        orders[n] = np.log(e2 / e1) / np.log(h2 / h1)
    return orders


def fitted_order(delta_xs: Sequence[float], errors: Sequence[float]) -> float:
    """
    Least-squares slope of ``log(error)`` against ``log(delta_x)``.

    Only points with positive, finite error and step size take part.

    Raises
    ------
    ValueError
        If fewer than two distinct usable step sizes remain.
    """
    h, e = _as_curve(delta_xs, errors)
    mask = np.isfinite(e) & (e > 0.0) & np.isfinite(h) & (h > 0.0)
    if np.unique(h[mask]).size < 2:
        raise ValueError("fitted_order needs at least two points with distinct step sizes.")
    slope, _intercept = np.polyfit(np.log(h[mask]), np.log(e[mask]), 1)
    return float(slope)
