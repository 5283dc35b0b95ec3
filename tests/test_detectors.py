"""Tests for metabolic adaptation and plateau detection."""

from __future__ import annotations

from tdeetrack.tracking.detectors import detect_metabolic_adaptation, detect_plateau


class TestDetectMetabolicAdaptation:
    """Tests for detect_metabolic_adaptation."""

    def test_fires_beyond_ten_percent(self) -> None:
        assert detect_metabolic_adaptation(2500, 2249, 0.5) is True

    def test_exactly_ten_percent_does_not_fire(self) -> None:
        assert detect_metabolic_adaptation(2500, 2250, 0.5) is False

    def test_low_confidence_never_fires(self) -> None:
        assert detect_metabolic_adaptation(2500, 1500, 0.29) is False

    def test_confidence_boundary_inclusive(self) -> None:
        assert detect_metabolic_adaptation(2500, 2000, 0.3) is True

    def test_observed_above_formula(self) -> None:
        assert detect_metabolic_adaptation(2500, 2500, 0.9) is False
        assert detect_metabolic_adaptation(2500, 3000, 0.9) is False

    def test_custom_threshold(self) -> None:
        assert detect_metabolic_adaptation(2500, 2300, 0.5, threshold=0.05) is True


class TestDetectPlateau:
    """Tests for detect_plateau."""

    def test_flat_weight_on_cut(self) -> None:
        assert detect_plateau([80.0] * 20, 0.0, "cut", 1800, 2200) is True

    def test_not_for_maintain_or_bulk(self) -> None:
        assert detect_plateau([80.0] * 20, 0.0, "maintain", 1800, 2200) is False
        assert detect_plateau([80.0] * 20, 0.0, "bulk", 1800, 2200) is False

    def test_requires_deficit(self) -> None:
        assert detect_plateau([80.0] * 20, 0.0, "cut", 2200, 2200) is False
        assert detect_plateau([80.0] * 20, 0.0, "cut", 2500, 2200) is False

    def test_requires_minimum_history(self) -> None:
        assert detect_plateau([80.0] * 10, 0.0, "cut", 1800, 2200) is False
        assert detect_plateau([80.0] * 13, 0.0, "cut", 1800, 2200) is False
        assert detect_plateau([80.0] * 14, 0.0, "cut", 1800, 2200) is True

    def test_losing_weight_is_not_plateau(self) -> None:
        weights = [80 - 0.05 * i for i in range(20)]
        assert detect_plateau(weights, -0.35, "cut", 1800, 2200) is False

    def test_recent_slope_checked(self) -> None:
        """A small reported weekly change doesn't hide a steep recent slope."""
        weights = [80 - 0.05 * i for i in range(20)]
        assert detect_plateau(weights, 0.0, "cut", 1800, 2200) is False

    def test_stall_after_loss(self) -> None:
        """Earlier loss followed by a flat fortnight is a plateau."""
        weights = [85 - 0.1 * i for i in range(10)] + [84.0] * 14
        assert detect_plateau(weights, 0.0, "cut", 1800, 2200) is True
