"""Tests for the text report."""

from __future__ import annotations

from dataclasses import replace

from tdeetrack.tracking.diagnostics import format_estimate_report
from tdeetrack.tracking.engine import compute_adaptive_tdee


class TestFormatEstimateReport:
    """Tests for format_estimate_report."""

    def test_formula_only(self, base_biometrics) -> None:
        report = format_estimate_report(compute_adaptive_tdee([], [], base_biometrics))

        assert "Estimated TDEE:      2711 kcal/day" in report
        assert "formula (Mifflin-St Jeor)" in report
        assert "Observed TDEE" not in report
        assert "Building your metabolic profile" in report

    def test_with_history(self, base_biometrics, weight_history, intake_history) -> None:
        result = compute_adaptive_tdee(
            weight_history(80, -0.03, 28), intake_history(2200, 28), base_biometrics
        )
        report = format_estimate_report(result)

        assert "Observed TDEE" in report
        assert "Average intake:      2200 kcal/day" in report
        assert "decreasing" in report

    def test_flags_listed(self, base_biometrics, weight_history, intake_history) -> None:
        cutting = replace(base_biometrics, goal_type="cut", weekly_goal="lose1")
        result = compute_adaptive_tdee(weight_history(80, 0, 28), intake_history(1500, 28), cutting)
        assert "Flags:               plateau" in format_estimate_report(result)
