"""Bayesian-style blending of formula and observed TDEE.

The formula estimate acts as the prior and the observed estimate as the
evidence. The weight given to the evidence is a deterministic function of
how much data there is and how cleanly a line explains the weight
trajectory:

    data_weight = clamp((n - n_min) / (n_full - n_min), 0, 1)
    fit_factor  = clamp(2 × r2, 0.1, 1)
    w           = data_weight × fit_factor × max_weight

    blended = w × observed + (1 - w) × formula

An r2 of 0.5 or better is already a decent fit for a body-weight series,
hence the factor of two. max_weight < 1 keeps a little of the prior no
matter how much data accumulates.
"""

from __future__ import annotations

from tdeetrack.tracking.constants import (
    FULL_CONFIDENCE_DATA_POINTS,
    MAX_OBSERVED_WEIGHT,
    MIN_DATA_POINTS,
)
from tdeetrack.tracking.models import BlendResult

MIN_FIT_FACTOR = 0.1


def observed_weight(
    data_points: int,
    r2: float,
    min_data_points: int = MIN_DATA_POINTS,
    full_confidence_data_points: int = FULL_CONFIDENCE_DATA_POINTS,
    max_weight: float = MAX_OBSERVED_WEIGHT,
) -> float:
    """
    Weight (0-1) given to the observed estimate.

    Non-decreasing in both data_points and r2.
    """
    span = max(1, full_confidence_data_points - min_data_points)
    data_weight = min(1.0, max(0.0, (data_points - min_data_points) / span))
    fit_factor = min(1.0, max(MIN_FIT_FACTOR, r2 * 2))
    return min(1.0, max(0.0, data_weight * fit_factor * max_weight))


def bayesian_blend(
    formula_tdee: float,
    observed_tdee: float,
    data_points: int,
    r2: float,
    min_data_points: int = MIN_DATA_POINTS,
    full_confidence_data_points: int = FULL_CONFIDENCE_DATA_POINTS,
    max_weight: float = MAX_OBSERVED_WEIGHT,
) -> BlendResult:
    """
    Blend formula and observed TDEE by evidence strength.

    Args:
        formula_tdee: Prior from Mifflin-St Jeor × activity
        observed_tdee: Back-calculated TDEE from logs
        data_points: Paired days behind the observed estimate
        r2: Fit of the weight regression

    Returns:
        BlendResult with the rounded blended TDEE and the observed weight

    Example:
        >>> bayesian_blend(2500, 2200, data_points=7, r2=0.5).weight
        0.0
    """
    w = observed_weight(
        data_points,
        r2,
        min_data_points=min_data_points,
        full_confidence_data_points=full_confidence_data_points,
        max_weight=max_weight,
    )
    blended = round(w * observed_tdee + (1 - w) * formula_tdee)
    return BlendResult(blended_tdee=blended, weight=w)
