"""Exponentially weighted moving average for daily weigh-ins.

The trend line is the classic recursive EWMA:
    T_0 = W_0
    T_n = α × W_n + (1 - α) × T_{n-1}

Seeding with the first weigh-in avoids warm-up bias. With α=0.15 the
filter has a time constant of roughly a week, which removes most of the
daily noise from water retention, sodium and gut contents while still
following the underlying tissue change.

Reference: https://www.fourmilab.ch/hackdiet/
"""

from __future__ import annotations

from collections.abc import Sequence

from tdeetrack.tracking.constants import DEFAULT_SMOOTHING


def update_trend(
    prev_trend: float,
    today_weight: float,
    smoothing: float = DEFAULT_SMOOTHING,
) -> float:
    """
    Calculate the next trend value.

    Args:
        prev_trend: Previous trend value (T_{n-1})
        today_weight: Today's scale weight (W_n)
        smoothing: Smoothing factor α in [0, 1]
                   Higher values = more responsive, more noise
                   Lower values = smoother, more lag

    Returns:
        Today's trend value (T_n)

    Example:
        >>> update_trend(80.0, 81.0)
        80.15
    """
    return smoothing * today_weight + (1 - smoothing) * prev_trend


def calculate_trend_from_scratch(
    weights: Sequence[float],
    smoothing: float = DEFAULT_SMOOTHING,
) -> list[float]:
    """
    Calculate trend values for a series of daily weights.

    The first weight is used as the initial trend value. α=1 reproduces the
    input and α=0 repeats the first value.

    Args:
        weights: Weight measurements in chronological order
        smoothing: Smoothing factor α in [0, 1]

    Returns:
        List of trend values, same length as weights

    Example:
        >>> calculate_trend_from_scratch([80.0, 81.0, 79.0], smoothing=0.5)
        [80.0, 80.5, 79.75]
    """
    if len(weights) == 0:
        return []

    trends = [float(weights[0])]
    for weight in weights[1:]:
        trends.append(update_trend(trends[-1], float(weight), smoothing))
    return trends
