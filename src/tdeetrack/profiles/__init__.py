"""Formula estimates and unit conversions."""

from __future__ import annotations

from tdeetrack.profiles.body_calc import (
    calculate_bmr,
    formula_tdee,
    inches_to_cm,
    lbs_to_kg,
    recommended_intake,
)

__all__ = [
    "calculate_bmr",
    "formula_tdee",
    "inches_to_cm",
    "lbs_to_kg",
    "recommended_intake",
]
