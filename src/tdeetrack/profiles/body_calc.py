"""Formula-based energy expenditure and calorie targets.

Uses the Mifflin-St Jeor equation for BMR as it's widely validated for
estimating resting metabolic rate, scaled by a Harris-Benedict style
activity factor. This is the population prior the adaptive engine starts
from before any logs exist.
"""

from __future__ import annotations

from enum import Enum

from tdeetrack.tracking.constants import KCAL_PER_KG, MIN_RECOMMENDED_INTAKE
from tdeetrack.tracking.models import FormulaResult, UserBiometrics

LBS_PER_KG_FACTOR = 0.453592
CM_PER_INCH = 2.54


class ActivityLevel(Enum):
    """Activity level for TDEE calculation."""
    SEDENTARY = "sedentary"          # Little or no exercise
    LIGHT = "light"                  # Light exercise 1-3 days/week
    MODERATE = "moderate"            # Moderate exercise 3-5 days/week
    ACTIVE = "active"                # Hard exercise 6-7 days/week
    EXTREME = "extreme"              # Very hard exercise, physical job


# Activity level multipliers (Harris-Benedict activity factors)
ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY.value: 1.2,
    ActivityLevel.LIGHT.value: 1.375,
    ActivityLevel.MODERATE.value: 1.55,
    ActivityLevel.ACTIVE.value: 1.725,
    ActivityLevel.EXTREME.value: 1.9,
}

DEFAULT_ACTIVITY_MULTIPLIER = 1.55

# Weekly goal -> target change in lbs/week
WEEKLY_GOAL_RATES = {
    "lose2": -2.0,
    "lose1": -1.0,
    "lose05": -0.5,
    "maintain": 0.0,
    "gain05": 0.5,
    "gain1": 1.0,
}


def lbs_to_kg(lbs: float) -> float:
    """Convert pounds to kilograms."""
    return lbs * LBS_PER_KG_FACTOR


def kg_to_lbs(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg / LBS_PER_KG_FACTOR


def inches_to_cm(inches: float) -> float:
    """Convert inches to centimeters."""
    return inches * CM_PER_INCH


def cm_to_inches(cm: float) -> float:
    """Convert centimeters to inches."""
    return cm / CM_PER_INCH


def calculate_bmr(
    weight_kg: float,
    height_cm: float,
    age: float,
    gender: str,
) -> float:
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Args:
        weight_kg: Weight in kilograms
        height_cm: Height in centimeters
        age: Age in years
        gender: 'male', 'female' or 'other' (anything but male uses the
            female constant)

    Returns:
        BMR in calories per day
    """
    base = (10 * weight_kg) + (6.25 * height_cm) - (5 * age)
    if gender == "male":
        return base + 5
    return base - 161


def activity_multiplier(activity_level: str) -> float:
    """Look up the activity multiplier, defaulting to moderate."""
    return ACTIVITY_MULTIPLIERS.get(activity_level, DEFAULT_ACTIVITY_MULTIPLIER)


def formula_tdee(biometrics: UserBiometrics) -> FormulaResult:
    """Formula-based TDEE = BMR × activity multiplier.

    Never raises; biometric validity is the caller's responsibility.
    """
    bmr = calculate_bmr(
        biometrics.weight_kg,
        biometrics.height_cm,
        biometrics.age,
        biometrics.gender,
    )
    multiplier = activity_multiplier(biometrics.activity_level)
    return FormulaResult(bmr=bmr, tdee=round(bmr * multiplier), multiplier=multiplier)


def goal_adjustment(weekly_goal: str, kcal_per_kg: float = KCAL_PER_KG) -> int:
    """Daily calorie delta needed to hit a weekly weight goal.

    'lose1' means one pound per week, so the delta is
    lbs_to_kg(-1) × kcal_per_kg / 7 ≈ -499 kcal/day. Unknown goals map to 0.
    """
    rate_lbs = WEEKLY_GOAL_RATES.get(weekly_goal, 0.0)
    return round(lbs_to_kg(rate_lbs) * kcal_per_kg / 7)


def recommended_intake(
    tdee: float,
    weekly_goal: str,
    kcal_per_kg: float = KCAL_PER_KG,
    floor: float = MIN_RECOMMENDED_INTAKE,
) -> int:
    """Daily calorie target for a weekly goal, never below the safety floor."""
    return int(max(floor, round(tdee + goal_adjustment(weekly_goal, kcal_per_kg))))
