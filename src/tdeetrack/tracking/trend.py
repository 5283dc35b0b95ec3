"""Rolling TDEE reconstruction for trend charts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

import numpy as np

from tdeetrack.tracking.blend import bayesian_blend
from tdeetrack.tracking.confidence import compute_confidence
from tdeetrack.tracking.constants import clamp_tdee
from tdeetrack.tracking.ema import calculate_trend_from_scratch
from tdeetrack.tracking.models import EngineConfig, IntakeEntry, TrendPoint, WeightEntry
from tdeetrack.tracking.observed import align_logs, estimate_window


def compute_tdee_trend(
    weights: Sequence[WeightEntry],
    intakes: Sequence[IntakeEntry],
    baseline_tdee: float,
    config: Optional[EngineConfig] = None,
) -> list[TrendPoint]:
    """
    Calculate rolling TDEE estimates, one per day.

    The weight series is smoothed once; each point then looks at the
    trailing `trend_window` days ending on that date, back-calculates TDEE
    for the window, blends it with the baseline using all data seen so far,
    and scores confidence for the same window. Windows are numpy views into
    the aligned arrays, so no per-day copies are made.

    Args:
        weights: Weight log ascending by date
        intakes: Intake log ascending by date
        baseline_tdee: Formula TDEE used as the blend prior
        config: Engine parameters (defaults if None)

    Returns:
        TrendPoints in date order; empty if fewer than trend_window paired days
    """
    cfg = config or EngineConfig()
    aligned = align_logs(weights, intakes)
    window = cfg.trend_window
    if len(aligned) < max(window, 1):
        return []

    smoothed = np.array(calculate_trend_from_scratch(aligned.weights, cfg.ewma_alpha))
    points: list[TrendPoint] = []

    for end in range(window, len(aligned) + 1):
        start = end - window
        est = estimate_window(
            smoothed[start:end], aligned.intakes[start:end], cfg.kcal_per_kg
        )

        blend = bayesian_blend(
            baseline_tdee,
            round(est.tdee),
            data_points=end,
            r2=est.r2,
            min_data_points=cfg.min_data_points,
            full_confidence_data_points=cfg.full_confidence_data_points,
            max_weight=cfg.max_observed_weight,
        )
        confidence = compute_confidence(
            end,
            aligned.intakes[start:end],
            aligned.weights[start:end],
            est.r2,
            full_confidence_data_points=cfg.full_confidence_data_points,
        )

        points.append(
            TrendPoint(
                date=aligned.dates[end - 1],
                tdee=clamp_tdee(blend.blended_tdee, cfg.tdee_min, cfg.tdee_max),
                smoothed_weight=float(smoothed[end - 1]),
                confidence=confidence,
            )
        )

    return points
