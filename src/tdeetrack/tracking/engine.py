"""Adaptive TDEE: the public entry point.

Sequences the formula prior, the observed estimate, confidence scoring,
blending, the adaptation and plateau checks and the trend chart, and
assembles everything into an AdaptiveTDEEResult.

Nothing here raises for well-shaped input. Missing or thin data degrades
to the formula estimate with low confidence and an explanatory insight.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, timedelta
from typing import Optional

from tdeetrack.profiles.body_calc import calculate_bmr, formula_tdee, recommended_intake
from tdeetrack.tracking.blend import bayesian_blend
from tdeetrack.tracking.confidence import compute_confidence
from tdeetrack.tracking.constants import clamp_tdee
from tdeetrack.tracking.detectors import detect_metabolic_adaptation, detect_plateau
from tdeetrack.tracking.models import (
    AdaptiveEstimate,
    AdaptiveTDEEResult,
    EngineConfig,
    EstimateSource,
    InsightType,
    IntakeEntry,
    TDEEInsight,
    UserBiometrics,
    WeightEntry,
    WeightTrend,
)
from tdeetrack.tracking.observed import align_logs, compute_observed_tdee
from tdeetrack.tracking.trend import compute_tdee_trend

logger = logging.getLogger(__name__)

# Blend weight boundaries for labelling the estimate source
FORMULA_SOURCE_MAX_WEIGHT = 0.2
OBSERVED_SOURCE_MIN_WEIGHT = 0.8


def classify_source(blend_weight: float) -> EstimateSource:
    """Label the estimate by how much the observed data contributed."""
    if blend_weight < FORMULA_SOURCE_MAX_WEIGHT:
        return EstimateSource.FORMULA
    if blend_weight > OBSERVED_SOURCE_MIN_WEIGHT:
        return EstimateSource.OBSERVED
    return EstimateSource.HYBRID


def classify_trend(weekly_weight_change: float, dead_zone: float) -> WeightTrend:
    """Direction of weight change outside a small dead zone (kg/week)."""
    if weekly_weight_change > dead_zone:
        return WeightTrend.INCREASING
    if weekly_weight_change < -dead_zone:
        return WeightTrend.DECREASING
    return WeightTrend.STABLE


def count_days_logged_this_week(
    intakes: Sequence[IntakeEntry],
    today: Optional[date] = None,
) -> int:
    """Distinct intake days from the most recent Sunday through today (0-7)."""
    if today is None:
        today = date.today()
    week_start = today - timedelta(days=(today.weekday() + 1) % 7)
    logged = {e.date for e in intakes if week_start <= e.date <= today}
    return min(7, len(logged))


def _consistency_insight(days_logged: int) -> Optional[TDEEInsight]:
    if days_logged >= 6:
        return TDEEInsight(
            type=InsightType.SUCCESS,
            title="Excellent tracking consistency",
            message="Your data quality is high, giving the most accurate TDEE estimate possible.",
        )
    if days_logged >= 4:
        return TDEEInsight(
            type=InsightType.INFO,
            title="Good tracking this week",
            message=f"You've logged {days_logged} days this week. Log daily for the most accurate results.",
        )
    if days_logged > 0:
        return TDEEInsight(
            type=InsightType.WARNING,
            title="Inconsistent logging",
            message=f"Only {days_logged} days logged this week. Gaps reduce the accuracy of your TDEE estimate.",
        )
    return None


def compute_adaptive_tdee(
    weights: Sequence[WeightEntry],
    intakes: Sequence[IntakeEntry],
    biometrics: UserBiometrics,
    config: Optional[EngineConfig] = None,
    today: Optional[date] = None,
) -> AdaptiveTDEEResult:
    """
    Compute the full adaptive TDEE estimate.

    Args:
        weights: Daily weight log (kg), ascending by date
        intakes: Daily intake log (kcal), ascending by date
        biometrics: Body metrics and goal for the formula prior
        config: Engine parameters (defaults if None)
        today: Reference date for the weekly logging count (default: today)

    Returns:
        AdaptiveTDEEResult with estimate, trend data and insights
    """
    cfg = config or EngineConfig()
    insights: list[TDEEInsight] = []

    formula = formula_tdee(biometrics)
    days_logged = count_days_logged_this_week(intakes, today)

    observed = compute_observed_tdee(
        weights,
        intakes,
        smoothing=cfg.ewma_alpha,
        kcal_per_kg=cfg.kcal_per_kg,
        min_data_points=cfg.min_data_points,
        regression_window=cfg.regression_window,
        tdee_min=cfg.tdee_min,
        tdee_max=cfg.tdee_max,
    )

    if observed is None:
        data_points = len(align_logs(weights, intakes))
        logger.debug("Formula-only estimate: %d paired days", data_points)

        if data_points == 0:
            insights.append(
                TDEEInsight(
                    type=InsightType.INFO,
                    title="Building your metabolic profile",
                    message="Log your food and weight daily to get a personalized metabolic estimate.",
                )
            )
        else:
            remaining = cfg.min_data_points - data_points
            insights.append(
                TDEEInsight(
                    type=InsightType.INFO,
                    title="Not enough data to personalize yet",
                    message=f"{remaining} more days of logging needed for adaptive estimates. Keep tracking!",
                )
            )

        tdee = clamp_tdee(formula.tdee, cfg.tdee_min, cfg.tdee_max)
        estimate = AdaptiveEstimate(
            tdee=tdee,
            bmr=round(formula.bmr),
            activity_multiplier=formula.multiplier,
            confidence=cfg.formula_only_confidence,
            estimate_source=EstimateSource.FORMULA,
            data_points=data_points,
            trend=WeightTrend.STABLE,
            weekly_weight_change=0.0,
            recommended_intake=recommended_intake(
                tdee, biometrics.weekly_goal, cfg.kcal_per_kg, cfg.min_recommended_intake
            ),
        )
        return AdaptiveTDEEResult(
            estimate=estimate,
            trend_data=[],
            insights=insights,
            days_logged_this_week=days_logged,
            total_days_with_data=data_points,
        )

    blend = bayesian_blend(
        formula.tdee,
        observed.observed_tdee,
        observed.data_points,
        observed.r2,
        min_data_points=cfg.min_data_points,
        full_confidence_data_points=cfg.full_confidence_data_points,
        max_weight=cfg.max_observed_weight,
    )

    aligned = align_logs(weights, intakes)
    confidence = compute_confidence(
        observed.data_points,
        aligned.intakes,
        aligned.weights,
        observed.r2,
        full_confidence_data_points=cfg.full_confidence_data_points,
    )

    source = classify_source(blend.weight)
    logger.debug(
        "Observed TDEE %d over %d days (r2=%.2f), blend weight %.2f -> %s",
        observed.observed_tdee,
        observed.data_points,
        observed.r2,
        blend.weight,
        source.value,
    )

    # Re-derive BMR at the current trend weight; the multiplier is whatever
    # makes that BMR reach the blended TDEE
    current_weight = observed.smoothed_weights[-1] if observed.smoothed_weights else biometrics.weight_kg
    current_bmr = calculate_bmr(
        current_weight, biometrics.height_cm, biometrics.age, biometrics.gender
    )
    if current_bmr > 0:
        derived_multiplier = blend.blended_tdee / current_bmr
    else:
        derived_multiplier = formula.multiplier

    metabolic_adaptation = detect_metabolic_adaptation(
        formula.tdee,
        blend.blended_tdee,
        confidence,
        threshold=cfg.adaptation_threshold,
        min_confidence=cfg.adaptation_min_confidence,
    )
    if metabolic_adaptation:
        insights.append(
            TDEEInsight(
                type=InsightType.WARNING,
                title="Metabolic adaptation detected",
                message=(
                    "Your metabolism appears to be running below expected. "
                    "Consider a diet break or reverse diet to restore metabolic rate."
                ),
            )
        )

    plateau_detected = detect_plateau(
        observed.smoothed_weights,
        observed.weekly_weight_change,
        biometrics.goal_type,
        observed.avg_intake,
        blend.blended_tdee,
        threshold_kg_per_week=cfg.plateau_threshold_kg_per_week,
        min_days=cfg.plateau_min_days,
    )
    if plateau_detected:
        insights.append(
            TDEEInsight(
                type=InsightType.ALERT,
                title="Weight loss plateau detected",
                message=(
                    "Your weight has stalled despite being in a deficit. Consider adjusting "
                    "your calorie target, increasing activity, or taking a planned diet break."
                ),
            )
        )

    trend = classify_trend(observed.weekly_weight_change, cfg.trend_dead_zone_kg_per_week)
    trend_data = compute_tdee_trend(weights, intakes, formula.tdee, cfg)

    consistency = _consistency_insight(days_logged)
    if consistency is not None:
        insights.append(consistency)

    tdee = clamp_tdee(blend.blended_tdee, cfg.tdee_min, cfg.tdee_max)
    estimate = AdaptiveEstimate(
        tdee=tdee,
        bmr=round(current_bmr),
        activity_multiplier=round(derived_multiplier, 2),
        confidence=confidence,
        estimate_source=source,
        data_points=observed.data_points,
        trend=trend,
        weekly_weight_change=round(observed.weekly_weight_change, 2),
        recommended_intake=recommended_intake(
            tdee, biometrics.weekly_goal, cfg.kcal_per_kg, cfg.min_recommended_intake
        ),
        metabolic_adaptation=metabolic_adaptation,
        plateau_detected=plateau_detected,
    )

    return AdaptiveTDEEResult(
        estimate=estimate,
        trend_data=trend_data,
        insights=insights,
        days_logged_this_week=days_logged,
        total_days_with_data=observed.data_points,
        observed=observed,
    )
