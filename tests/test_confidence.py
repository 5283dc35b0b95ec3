"""Tests for confidence scoring."""

from __future__ import annotations

import pytest

from tdeetrack.tracking.confidence import coefficient_of_variation, compute_confidence


class TestCoefficientOfVariation:
    """Tests for coefficient_of_variation."""

    def test_short_series_has_no_spread(self) -> None:
        assert coefficient_of_variation([]) == 0.0
        assert coefficient_of_variation([2000]) == 0.0

    def test_constant(self) -> None:
        assert coefficient_of_variation([2000, 2000, 2000]) == 0.0

    def test_zero_mean_is_maximal(self) -> None:
        assert coefficient_of_variation([0, 0, 0]) == 1.0


class TestComputeConfidence:
    """Tests for compute_confidence."""

    def test_no_data_baseline(self) -> None:
        """Formula-only case scores 0.4."""
        assert compute_confidence(0, [], [], 0) == pytest.approx(0.4)

    def test_increases_with_data_points(self) -> None:
        intakes = [2000] * 10
        weights = [80] * 10
        scores = [compute_confidence(n, intakes, weights, 0.5) for n in (0, 7, 14, 21, 28)]
        assert scores == sorted(scores)
        assert scores[-1] > scores[0]

    def test_saturates(self) -> None:
        intakes = [2000] * 10
        weights = [80] * 10
        assert compute_confidence(28, intakes, weights, 0.5) == pytest.approx(
            compute_confidence(90, intakes, weights, 0.5)
        )

    def test_decreases_with_intake_variance(self) -> None:
        weights = [80] * 6
        steady = compute_confidence(14, [2000, 2000, 2000, 2000, 2000, 2000], weights, 0.5)
        wobbly = compute_confidence(14, [1800, 2200, 1900, 2100, 1850, 2150], weights, 0.5)
        chaotic = compute_confidence(14, [800, 3200, 1000, 3000, 900, 3100], weights, 0.5)
        assert steady > wobbly > chaotic

    def test_increases_with_r2(self) -> None:
        intakes = [2000] * 10
        weights = [80] * 10
        assert compute_confidence(14, intakes, weights, 0.9) > compute_confidence(
            14, intakes, weights, 0.1
        )

    def test_never_exceeds_one(self) -> None:
        score = compute_confidence(1000, [2000] * 30, [80] * 30, 1.0)
        assert score == pytest.approx(1.0)
        assert score <= 1.0

    def test_out_of_range_inputs_clamped(self) -> None:
        assert 0.0 <= compute_confidence(-5, [0, 0], [0, 0], -1.0) <= 1.0
        assert compute_confidence(5000, [2000] * 3, [80] * 3, 5.0) <= 1.0
