"""Data models for adaptive TDEE estimation."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Optional

import numpy as np

from tdeetrack.tracking import constants


class EstimateSource(Enum):
    """Which estimate dominates the reported TDEE."""

    FORMULA = "formula"
    HYBRID = "hybrid"
    OBSERVED = "observed"


class WeightTrend(Enum):
    """Direction of the smoothed weight trend."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class InsightType(Enum):
    """Severity of a textual insight."""

    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    ALERT = "alert"


@dataclass(frozen=True)
class WeightEntry:
    """A single daily weigh-in (kg)."""

    date: date
    weight: float


@dataclass(frozen=True)
class IntakeEntry:
    """Total logged calories for one day."""

    date: date
    calories: float


@dataclass(frozen=True)
class UserBiometrics:
    """Body metrics and goal used for the formula prior.

    Validity (positive weight, height and age) is the caller's contract.
    """

    weight_kg: float
    height_cm: float
    age: int
    gender: str = "male"  # 'male', 'female' or 'other'
    activity_level: str = "moderate"  # 'sedentary', 'light', 'moderate', 'active', 'extreme'
    goal_type: str = "maintain"  # 'cut', 'maintain' or 'bulk'
    weekly_goal: str = "maintain"  # e.g. 'lose1', 'maintain', 'gain05'


@dataclass(frozen=True)
class EngineConfig:
    """Tunable parameters for the estimation pipeline."""

    ewma_alpha: float = constants.DEFAULT_SMOOTHING
    kcal_per_kg: float = constants.KCAL_PER_KG
    regression_window: int = constants.REGRESSION_WINDOW
    min_data_points: int = constants.MIN_DATA_POINTS
    full_confidence_data_points: int = constants.FULL_CONFIDENCE_DATA_POINTS
    trend_window: int = constants.TREND_WINDOW
    max_observed_weight: float = constants.MAX_OBSERVED_WEIGHT
    adaptation_threshold: float = constants.METABOLIC_ADAPTATION_THRESHOLD
    adaptation_min_confidence: float = constants.ADAPTATION_MIN_CONFIDENCE
    plateau_threshold_kg_per_week: float = constants.PLATEAU_THRESHOLD_KG_PER_WEEK
    plateau_min_days: int = constants.PLATEAU_MIN_DAYS
    trend_dead_zone_kg_per_week: float = constants.TREND_DEAD_ZONE_KG_PER_WEEK
    tdee_min: float = constants.TDEE_MIN
    tdee_max: float = constants.TDEE_MAX
    min_recommended_intake: float = constants.MIN_RECOMMENDED_INTAKE
    formula_only_confidence: float = constants.FORMULA_ONLY_CONFIDENCE

    def __post_init__(self) -> None:
        """Reject values the pipeline can't work with.

        Raises:
            ValueError: If a parameter is out of range
        """
        if not 0 <= self.ewma_alpha <= 1:
            raise ValueError(f"ewma_alpha must be between 0 and 1, got {self.ewma_alpha}")
        if self.kcal_per_kg <= 0:
            raise ValueError(f"kcal_per_kg must be positive, got {self.kcal_per_kg}")
        for name in (
            "regression_window",
            "min_data_points",
            "full_confidence_data_points",
            "trend_window",
            "plateau_min_days",
        ):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1, got {getattr(self, name)}")
        if self.tdee_min > self.tdee_max:
            raise ValueError(
                f"tdee_min ({self.tdee_min}) must not exceed tdee_max ({self.tdee_max})"
            )


@dataclass(frozen=True)
class FormulaResult:
    """Population-formula estimate (Mifflin-St Jeor × activity)."""

    bmr: float
    tdee: int
    multiplier: float


@dataclass
class AlignedSeries:
    """Weight and intake logs restricted to days present in both.

    weights and intakes are numpy arrays so that window slices are views.
    """

    dates: list[date]
    weights: np.ndarray
    intakes: np.ndarray

    def __len__(self) -> int:
        return len(self.dates)


@dataclass
class ObservedResult:
    """TDEE back-calculated from intake and weight change."""

    observed_tdee: int
    avg_intake: int
    data_points: int
    smoothed_weights: list[float]
    regression_slope: float  # kg/day
    r2: float
    weekly_weight_change: float  # kg/week
    dates: list[date] = field(default_factory=list)


@dataclass(frozen=True)
class BlendResult:
    """Formula and observed TDEE merged by evidence strength."""

    blended_tdee: int
    weight: float  # weight given to the observed estimate, 0-1


@dataclass(frozen=True)
class TDEEInsight:
    """Short user-facing note about the estimate."""

    type: InsightType
    title: str
    message: str


@dataclass(frozen=True)
class TrendPoint:
    """One day of the rolling TDEE reconstruction."""

    date: date
    tdee: float
    smoothed_weight: float
    confidence: float


@dataclass
class AdaptiveEstimate:
    """Top-level TDEE estimate for one invocation."""

    tdee: float
    bmr: int
    activity_multiplier: float
    confidence: float
    estimate_source: EstimateSource
    data_points: int
    trend: WeightTrend
    weekly_weight_change: float  # kg/week
    recommended_intake: int
    metabolic_adaptation: bool = False
    plateau_detected: bool = False


@dataclass
class AdaptiveTDEEResult:
    """Estimate plus chart data and insights."""

    estimate: AdaptiveEstimate
    trend_data: list[TrendPoint]
    insights: list[TDEEInsight]
    days_logged_this_week: int
    total_days_with_data: int
    observed: Optional[ObservedResult] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        estimate = asdict(self.estimate)
        estimate["estimate_source"] = self.estimate.estimate_source.value
        estimate["trend"] = self.estimate.trend.value

        return {
            "estimate": estimate,
            "trend_data": [
                {
                    "date": p.date.isoformat(),
                    "tdee": p.tdee,
                    "smoothed_weight": round(p.smoothed_weight, 2),
                    "confidence": round(p.confidence, 3),
                }
                for p in self.trend_data
            ],
            "insights": [
                {"type": i.type.value, "title": i.title, "message": i.message}
                for i in self.insights
            ],
            "days_logged_this_week": self.days_logged_this_week,
            "total_days_with_data": self.total_days_with_data,
        }
