"""Text output for adaptive TDEE results."""

from __future__ import annotations

from tdeetrack.tracking.models import AdaptiveTDEEResult, EstimateSource

_SOURCE_LABELS = {
    EstimateSource.FORMULA: "formula (Mifflin-St Jeor)",
    EstimateSource.HYBRID: "hybrid (formula + your data)",
    EstimateSource.OBSERVED: "observed (your data)",
}


def format_estimate_report(result: AdaptiveTDEEResult) -> str:
    """Format the estimate and its insights as text."""
    est = result.estimate

    lines = [
        "Total Daily Energy Expenditure (TDEE) Analysis",
        "=" * 50,
        f"Estimated TDEE:      {est.tdee:.0f} kcal/day",
        f"BMR:                 {est.bmr} kcal/day",
        f"Activity multiplier: {est.activity_multiplier:.2f}",
        f"Source:              {_SOURCE_LABELS[est.estimate_source]}",
        f"Confidence:          {est.confidence:.0%} ({est.data_points} days of data)",
        "",
        f"Weight trend:        {est.trend.value} ({est.weekly_weight_change:+.2f} kg/week)",
        f"Recommended intake:  {est.recommended_intake} kcal/day",
        f"Days logged this week: {result.days_logged_this_week}/7",
    ]

    if result.observed is not None:
        lines.append("")
        lines.append(f"Average intake:      {result.observed.avg_intake} kcal/day")
        lines.append(f"Observed TDEE:       {result.observed.observed_tdee} kcal/day (from trend)")

    flags = []
    if est.metabolic_adaptation:
        flags.append("metabolic adaptation")
    if est.plateau_detected:
        flags.append("plateau")
    if flags:
        lines.append(f"Flags:               {', '.join(flags)}")

    if result.insights:
        lines.append("")
        lines.append("Notes:")
        for insight in result.insights:
            lines.append(f"  - [{insight.type.value}] {insight.title}: {insight.message}")

    return "\n".join(lines)
