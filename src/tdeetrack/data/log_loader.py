"""Load weight and intake logs from CSV and biometrics from YAML."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd
import yaml

from tdeetrack.profiles.body_calc import inches_to_cm, lbs_to_kg
from tdeetrack.tracking.models import IntakeEntry, UserBiometrics, WeightEntry

logger = logging.getLogger(__name__)

VALID_UNITS = ("metric", "imperial")
VALID_GENDERS = ("male", "female", "other")
VALID_GOAL_TYPES = ("cut", "maintain", "bulk")


def _read_log(csv_path: Path, value_column: str) -> pd.DataFrame:
    """Read a date/value CSV, validate it and normalize it.

    Returns a frame sorted by date with one row per date (last row wins).

    Raises:
        ValueError: If required columns are missing or a date can't be parsed
    """
    required = ["date", value_column]
    df = pd.read_csv(csv_path)

    missing = set(required) - set(df.columns)
    if missing:
        raise ValueError(
            f"{csv_path}: missing required columns: {sorted(missing)}. "
            f"Required columns are: {required}"
        )

    df = df[required]
    incomplete = df.isna().any(axis=1)
    if incomplete.any():
        logger.warning("%s: skipping %d incomplete rows", csv_path, int(incomplete.sum()))
        df = df[~incomplete]

    try:
        df = df.assign(date=pd.to_datetime(df["date"], format="%Y-%m-%d").dt.date)
    except ValueError as e:
        raise ValueError(f"{csv_path}: dates must be YYYY-MM-DD ({e})") from e

    duplicated = df["date"].duplicated(keep="last")
    if duplicated.any():
        logger.warning(
            "%s: %d duplicate dates, keeping the last entry for each",
            csv_path,
            int(duplicated.sum()),
        )
        df = df[~duplicated]

    return df.sort_values("date").reset_index(drop=True)


def load_weight_log(csv_path: Path, units: str = "metric") -> list[WeightEntry]:
    """Load a weight log.

    CSV format:
        date,weight
        2025-01-15,82.4

    Args:
        csv_path: Path to the CSV file
        units: 'metric' (kg) or 'imperial' (lbs, converted to kg)

    Returns:
        WeightEntry list ascending by date

    Raises:
        ValueError: If columns are missing, dates are malformed or units unknown
    """
    if units not in VALID_UNITS:
        raise ValueError(f"units must be one of {VALID_UNITS}, got '{units}'")

    df = _read_log(csv_path, "weight")
    entries = []
    for row in df.itertuples(index=False):
        weight = float(row.weight)
        if units == "imperial":
            weight = lbs_to_kg(weight)
        entries.append(WeightEntry(date=row.date, weight=weight))
    return entries


def load_intake_log(csv_path: Path) -> list[IntakeEntry]:
    """Load a calorie intake log.

    CSV format:
        date,calories
        2025-01-15,2150

    Raises:
        ValueError: If columns are missing or dates are malformed
    """
    df = _read_log(csv_path, "calories")
    return [IntakeEntry(date=row.date, calories=float(row.calories)) for row in df.itertuples(index=False)]


def biometrics_from_dict(data: dict) -> UserBiometrics:
    """Build UserBiometrics from a profile mapping.

    Body metrics may be metric (weight_kg, height_cm) or imperial
    (weight_lbs, height_inches).

    Raises:
        ValueError: If a body metric is missing or not positive, or gender/goal
            is not recognized
    """
    if "weight_kg" in data:
        weight_kg = float(data["weight_kg"])
    elif "weight_lbs" in data:
        weight_kg = lbs_to_kg(float(data["weight_lbs"]))
    else:
        raise ValueError("profile needs weight_kg or weight_lbs")

    if "height_cm" in data:
        height_cm = float(data["height_cm"])
    elif "height_inches" in data:
        height_cm = inches_to_cm(float(data["height_inches"]))
    else:
        raise ValueError("profile needs height_cm or height_inches")

    if "age" not in data:
        raise ValueError("profile needs age")
    age = int(data["age"])

    for name, value in (("weight", weight_kg), ("height", height_cm), ("age", age)):
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")

    gender = str(data.get("gender", "male")).lower()
    if gender not in VALID_GENDERS:
        raise ValueError(f"gender must be one of {VALID_GENDERS}, got '{gender}'")

    goal_type = str(data.get("goal_type", "maintain")).lower()
    if goal_type not in VALID_GOAL_TYPES:
        raise ValueError(f"goal_type must be one of {VALID_GOAL_TYPES}, got '{goal_type}'")

    return UserBiometrics(
        weight_kg=weight_kg,
        height_cm=height_cm,
        age=age,
        gender=gender,
        activity_level=str(data.get("activity_level", "moderate")).lower(),
        goal_type=goal_type,
        weekly_goal=str(data.get("weekly_goal", "maintain")).lower(),
    )


def load_biometrics(yaml_path: Path) -> UserBiometrics:
    """Load a user profile from YAML.

    Example:
        weight_kg: 80
        height_cm: 175
        age: 30
        gender: male
        activity_level: moderate
        goal_type: cut
        weekly_goal: lose1
    """
    with open(yaml_path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{yaml_path}: expected a mapping of profile fields")
    return biometrics_from_dict(data)
