"""Tests for CSV log and YAML profile loading."""

from __future__ import annotations

from datetime import date

import pytest

from tdeetrack.data.log_loader import (
    biometrics_from_dict,
    load_biometrics,
    load_intake_log,
    load_weight_log,
)


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path."""

    def _write(name: str, content: str):
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write


class TestLoadWeightLog:
    """Tests for load_weight_log."""

    def test_basic(self, write_file) -> None:
        path = write_file("weights.csv", "date,weight\n2025-01-15,82.4\n2025-01-16,82.1\n")
        entries = load_weight_log(path)

        assert [e.date for e in entries] == [date(2025, 1, 15), date(2025, 1, 16)]
        assert entries[0].weight == pytest.approx(82.4)

    def test_sorted_by_date(self, write_file) -> None:
        path = write_file("weights.csv", "date,weight\n2025-01-16,82.1\n2025-01-15,82.4\n")
        entries = load_weight_log(path)
        assert entries[0].date == date(2025, 1, 15)

    def test_extra_columns_ignored(self, write_file) -> None:
        path = write_file("weights.csv", "date,weight,note\n2025-01-15,82.4,after gym\n")
        assert len(load_weight_log(path)) == 1

    def test_imperial_converted(self, write_file) -> None:
        path = write_file("weights.csv", "date,weight\n2025-01-15,200\n")
        entries = load_weight_log(path, units="imperial")
        assert entries[0].weight == pytest.approx(90.7184)

    def test_unknown_units(self, write_file) -> None:
        path = write_file("weights.csv", "date,weight\n2025-01-15,82.4\n")
        with pytest.raises(ValueError, match="units"):
            load_weight_log(path, units="stone")

    def test_missing_column(self, write_file) -> None:
        path = write_file("weights.csv", "day,kg\n2025-01-15,82.4\n")
        with pytest.raises(ValueError, match="missing required columns"):
            load_weight_log(path)

    def test_bad_date(self, write_file) -> None:
        path = write_file("weights.csv", "date,weight\n15/01/2025,82.4\n")
        with pytest.raises(ValueError, match="YYYY-MM-DD"):
            load_weight_log(path)

    def test_duplicate_dates_keep_last(self, write_file) -> None:
        path = write_file(
            "weights.csv", "date,weight\n2025-01-15,82.4\n2025-01-15,81.9\n2025-01-16,82.0\n"
        )
        entries = load_weight_log(path)

        assert len(entries) == 2
        assert entries[0].weight == pytest.approx(81.9)

    def test_incomplete_rows_skipped(self, write_file) -> None:
        path = write_file("weights.csv", "date,weight\n2025-01-15,82.4\n2025-01-16,\n")
        entries = load_weight_log(path)
        assert [e.date for e in entries] == [date(2025, 1, 15)]

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(OSError):
            load_weight_log(tmp_path / "nope.csv")


class TestLoadIntakeLog:
    """Tests for load_intake_log."""

    def test_basic(self, write_file) -> None:
        path = write_file("intake.csv", "date,calories\n2025-01-15,2150\n2025-01-16,1980\n")
        entries = load_intake_log(path)

        assert len(entries) == 2
        assert entries[1].calories == 1980.0

    def test_missing_column(self, write_file) -> None:
        path = write_file("intake.csv", "date,kcal\n2025-01-15,2150\n")
        with pytest.raises(ValueError, match="calories"):
            load_intake_log(path)


class TestBiometrics:
    """Tests for biometrics_from_dict and load_biometrics."""

    def test_metric(self) -> None:
        bio = biometrics_from_dict(
            {"weight_kg": 80, "height_cm": 175, "age": 30, "goal_type": "cut", "weekly_goal": "lose1"}
        )
        assert bio.weight_kg == 80
        assert bio.goal_type == "cut"
        assert bio.weekly_goal == "lose1"
        assert bio.gender == "male"
        assert bio.activity_level == "moderate"

    def test_imperial(self) -> None:
        bio = biometrics_from_dict({"weight_lbs": 200, "height_inches": 70, "age": 40})
        assert bio.weight_kg == pytest.approx(90.7184)
        assert bio.height_cm == pytest.approx(177.8)

    def test_case_insensitive(self) -> None:
        bio = biometrics_from_dict(
            {"weight_kg": 60, "height_cm": 165, "age": 28, "gender": "Female", "activity_level": "Active"}
        )
        assert bio.gender == "female"
        assert bio.activity_level == "active"

    @pytest.mark.parametrize(
        "data,match",
        [
            ({"height_cm": 175, "age": 30}, "weight"),
            ({"weight_kg": 80, "age": 30}, "height"),
            ({"weight_kg": 80, "height_cm": 175}, "age"),
            ({"weight_kg": 0, "height_cm": 175, "age": 30}, "positive"),
            ({"weight_kg": 80, "height_cm": -1, "age": 30}, "positive"),
            ({"weight_kg": 80, "height_cm": 175, "age": 30, "gender": "robot"}, "gender"),
            ({"weight_kg": 80, "height_cm": 175, "age": 30, "goal_type": "shred"}, "goal_type"),
        ],
    )
    def test_invalid(self, data: dict, match: str) -> None:
        with pytest.raises(ValueError, match=match):
            biometrics_from_dict(data)

    def test_load_yaml(self, write_file) -> None:
        path = write_file(
            "profile.yaml",
            "weight_kg: 80\nheight_cm: 175\nage: 30\nactivity_level: light\n",
        )
        bio = load_biometrics(path)
        assert bio.age == 30
        assert bio.activity_level == "light"

    def test_yaml_not_mapping(self, write_file) -> None:
        path = write_file("profile.yaml", "- 80\n- 175\n")
        with pytest.raises(ValueError, match="mapping"):
            load_biometrics(path)
