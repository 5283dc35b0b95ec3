"""Pytest fixtures for tdeetrack tests."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from tdeetrack.config import settings as settings_module
from tdeetrack.tracking.models import IntakeEntry, UserBiometrics, WeightEntry

START_DATE = date(2024, 1, 1)


def make_weights(
    start_weight: float,
    daily_change: float,
    days: int,
    start: date = START_DATE,
) -> list[WeightEntry]:
    """Linear weight history, one entry per day."""
    return [
        WeightEntry(date=start + timedelta(days=i), weight=start_weight + daily_change * i)
        for i in range(days)
    ]


def make_intakes(calories: float, days: int, start: date = START_DATE) -> list[IntakeEntry]:
    """Constant intake history, one entry per day."""
    return [
        IntakeEntry(date=start + timedelta(days=i), calories=calories)
        for i in range(days)
    ]


@pytest.fixture
def base_biometrics() -> UserBiometrics:
    """80 kg, 175 cm, 30 year old moderately active male."""
    return UserBiometrics(
        weight_kg=80,
        height_cm=175,
        age=30,
        gender="male",
        activity_level="moderate",
        goal_type="maintain",
        weekly_goal="maintain",
    )


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.tdeetrack/config.yaml."""
    monkeypatch.setattr(settings_module, "_default_config_dir", lambda: tmp_path / ".tdeetrack")
    monkeypatch.setattr(settings_module, "_settings", None)


@pytest.fixture
def weight_history():
    """Factory for linear weight histories."""
    return make_weights


@pytest.fixture
def intake_history():
    """Factory for constant intake histories."""
    return make_intakes
