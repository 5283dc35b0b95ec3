"""Ordinary least squares over an evenly spaced daily series."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class RegressionResult:
    """Fitted line y = intercept + slope × x with goodness of fit."""

    slope: float
    intercept: float
    r2: float


def linear_regression(values: Sequence[float]) -> RegressionResult:
    """
    Fit a straight line to values over x = 0..n-1.

    Degenerate inputs never raise: an empty series gives a zero line, a
    single value gives a flat line through it, and a constant series gives
    zero slope with r2 = 0.

    Args:
        values: Observations in order, one per day

    Returns:
        RegressionResult with slope per step, intercept at x=0 and r2 in [0, 1]
    """
    y = np.asarray(values, dtype=float)
    n = y.size
    if n == 0:
        return RegressionResult(slope=0.0, intercept=0.0, r2=0.0)
    if n == 1:
        return RegressionResult(slope=0.0, intercept=float(y[0]), r2=0.0)

    x = np.arange(n, dtype=float)
    x_mean = x.mean()
    y_mean = y.mean()

    sxx = float(np.sum((x - x_mean) ** 2))
    sxy = float(np.sum((x - x_mean) * (y - y_mean)))
    slope = sxy / sxx
    intercept = y_mean - slope * x_mean

    ss_tot = float(np.sum((y - y_mean) ** 2))
    # Relative tolerance so float noise in a constant series doesn't produce a fit
    if ss_tot <= 1e-12 * max(1.0, float(np.sum(y**2))):
        return RegressionResult(slope=0.0, intercept=float(y_mean), r2=0.0)

    predicted = intercept + slope * x
    ss_res = float(np.sum((y - predicted) ** 2))
    r2 = min(1.0, max(0.0, 1.0 - ss_res / ss_tot))

    return RegressionResult(slope=float(slope), intercept=float(intercept), r2=r2)
