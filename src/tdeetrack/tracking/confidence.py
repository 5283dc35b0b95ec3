"""Confidence scoring for TDEE estimates."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from tdeetrack.tracking.constants import FULL_CONFIDENCE_DATA_POINTS

# Maximum contribution of each factor (sums to 1.0)
DENSITY_WEIGHT = 0.4
INTAKE_WEIGHT = 0.2
WEIGHT_WEIGHT = 0.2
FIT_WEIGHT = 0.2

# Coefficient of variation at which a factor scores zero
INTAKE_CV_CEILING = 0.4
WEIGHT_CV_CEILING = 0.05


def coefficient_of_variation(values: Sequence[float]) -> float:
    """Sample standard deviation over mean.

    Fewer than two values have no spread (0.0). A non-positive mean gives 1.0,
    which scores as maximally inconsistent.
    """
    arr = np.asarray(values, dtype=float)
    if arr.size < 2:
        return 0.0
    mean = float(arr.mean())
    if mean <= 0:
        return 1.0
    return float(np.std(arr, ddof=1)) / mean


def compute_confidence(
    data_points: int,
    intake_values: Sequence[float],
    weight_values: Sequence[float],
    r2: float,
    full_confidence_data_points: int = FULL_CONFIDENCE_DATA_POINTS,
) -> float:
    """
    Compute a 0-1 confidence score for a TDEE estimate.

    Factors:
        - Data density (0-0.4): grows linearly, saturates at
          full_confidence_data_points
        - Intake consistency (0-0.2): CV under ~0.15 is good, 0.4+ scores zero
        - Weight consistency (0-0.2): CV around 0.01 is normal, 0.05+ is noise
        - Regression fit (0-0.2): proportional to r2

    With no data at all the consistency factors are full, so the score is
    0.4: moderate trust in a population formula for an unknown individual.

    Args:
        data_points: Number of paired days behind the estimate
        intake_values: Raw daily intakes
        weight_values: Raw daily weights
        r2: Fit of the weight regression

    Returns:
        Confidence in [0, 1]
    """
    density = DENSITY_WEIGHT * min(1.0, max(0, data_points) / full_confidence_data_points)

    intake_cv = coefficient_of_variation(intake_values)
    intake_score = INTAKE_WEIGHT * (1 - min(1.0, intake_cv / INTAKE_CV_CEILING))

    weight_cv = coefficient_of_variation(weight_values)
    weight_score = WEIGHT_WEIGHT * (1 - min(1.0, weight_cv / WEIGHT_CV_CEILING))

    fit_score = FIT_WEIGHT * min(1.0, max(0.0, r2))

    return min(1.0, max(0.0, density + intake_score + weight_score + fit_score))
