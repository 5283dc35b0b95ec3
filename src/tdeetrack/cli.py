"""CLI interface using Typer."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from datetime import date
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from tdeetrack.config import get_settings, reload_settings
from tdeetrack.config.settings import Settings
from tdeetrack.tracking.models import AdaptiveTDEEResult

app = typer.Typer(
    help="Adaptive TDEE estimation from weight and calorie logs",
    no_args_is_help=True,
)
console = Console()

config_app = typer.Typer(help="Show configuration")
app.add_typer(config_app, name="config")


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict, file=None) -> None:
    """Output JSON response to stdout or file."""
    json_str = json.dumps(response, indent=2)
    if file:
        file.write(json_str)
    else:
        print(json_str)


def fail(command: str, message: str, json_output: bool) -> NoReturn:
    """Report an error and exit with status 1."""
    if json_output:
        output_json({"success": False, "command": command, "errors": [message]})
    else:
        console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


def load_settings(config_path: Optional[Path]) -> Settings:
    """Settings from an explicit file, or the default location."""
    if config_path is not None:
        return reload_settings(config_path)
    return get_settings()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Adaptive TDEE estimation from weight and calorie logs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _run_engine(
    command: str,
    weights_csv: Path,
    intake_csv: Path,
    profile_yaml: Path,
    units: Optional[str],
    today_str: Optional[str],
    config_path: Optional[Path],
    json_output: bool,
) -> tuple[AdaptiveTDEEResult, bool]:
    """Load settings, logs and profile, then run the engine.

    Returns:
        The result and whether to print JSON (flag or configured default)
    """
    from tdeetrack.data.log_loader import load_biometrics, load_intake_log, load_weight_log
    from tdeetrack.tracking.engine import compute_adaptive_tdee

    try:
        settings = load_settings(config_path)
        today = date.fromisoformat(today_str) if today_str else None
        weights = load_weight_log(weights_csv, units or settings.defaults.units)
        intakes = load_intake_log(intake_csv)
        biometrics = load_biometrics(profile_yaml)
    except (OSError, ValueError, yaml.YAMLError) as e:
        fail(command, str(e), json_output)

    result = compute_adaptive_tdee(
        weights, intakes, biometrics, config=settings.engine, today=today
    )
    return result, json_output or settings.defaults.output_format == "json"


# ============================================================================
# Commands
# ============================================================================


@app.command()
def estimate(
    weights_csv: Path = typer.Option(..., "--weights", "-w", help="Weight log CSV (date,weight)"),
    intake_csv: Path = typer.Option(..., "--intake", "-i", help="Intake log CSV (date,calories)"),
    profile_yaml: Path = typer.Option(..., "--profile", "-p", help="Profile YAML"),
    units: Optional[str] = typer.Option(None, "--units", help="Weight units: metric or imperial"),
    today_str: Optional[str] = typer.Option(
        None, "--today", help="Reference date (YYYY-MM-DD, default: today)"
    ),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Config YAML"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Estimate TDEE from logged weight and intake."""
    from tdeetrack.tracking.diagnostics import format_estimate_report

    result, json_output = _run_engine(
        "estimate", weights_csv, intake_csv, profile_yaml, units, today_str, config_path, json_output
    )
    est = result.estimate

    if json_output:
        output_json({
            "success": True,
            "command": "estimate",
            "data": result.to_dict(),
            "human_summary": (
                f"TDEE {est.tdee:.0f} kcal/day ({est.estimate_source.value}, "
                f"{est.confidence:.0%} confidence), eat {est.recommended_intake} kcal/day"
            ),
        })
    else:
        console.print(format_estimate_report(result), markup=False, highlight=False)


@app.command()
def trend(
    weights_csv: Path = typer.Option(..., "--weights", "-w", help="Weight log CSV (date,weight)"),
    intake_csv: Path = typer.Option(..., "--intake", "-i", help="Intake log CSV (date,calories)"),
    profile_yaml: Path = typer.Option(..., "--profile", "-p", help="Profile YAML"),
    units: Optional[str] = typer.Option(None, "--units", help="Weight units: metric or imperial"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Config YAML"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the rolling TDEE trend."""
    result, json_output = _run_engine(
        "trend", weights_csv, intake_csv, profile_yaml, units, None, config_path, json_output
    )
    points = result.trend_data

    if json_output:
        output_json({
            "success": True,
            "command": "trend",
            "data": {"points": result.to_dict()["trend_data"]},
            "human_summary": f"{len(points)} trend points",
        })
        return

    if not points:
        console.print("[yellow]Not enough data for a TDEE trend (need 7 days of weight and intake)[/yellow]")
        return

    table = Table(title="TDEE Trend")
    table.add_column("Date", style="cyan")
    table.add_column("TDEE", justify="right")
    table.add_column("Trend weight", justify="right", style="blue")
    table.add_column("Confidence", justify="right")

    for point in points:
        table.add_row(
            point.date.isoformat(),
            f"{point.tdee:.0f}",
            f"{point.smoothed_weight:.1f}",
            f"{point.confidence:.0%}",
        )

    console.print(table)


@app.command()
def formula(
    weight: float = typer.Option(..., "--weight", help="Body weight (kg, or lbs with --imperial)"),
    height: float = typer.Option(..., "--height", help="Height (cm, or inches with --imperial)"),
    age: int = typer.Option(..., "--age", help="Age in years"),
    gender: str = typer.Option("male", "--gender", help="male, female or other"),
    activity: str = typer.Option("moderate", "--activity", help="sedentary, light, moderate, active, extreme"),
    imperial: bool = typer.Option(False, "--imperial", help="Weight in lbs, height in inches"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Formula-only TDEE (Mifflin-St Jeor × activity)."""
    from tdeetrack.profiles.body_calc import formula_tdee, inches_to_cm, lbs_to_kg
    from tdeetrack.tracking.models import UserBiometrics

    weight_kg = lbs_to_kg(weight) if imperial else weight
    height_cm = inches_to_cm(height) if imperial else height

    result = formula_tdee(
        UserBiometrics(
            weight_kg=weight_kg,
            height_cm=height_cm,
            age=age,
            gender=gender.lower(),
            activity_level=activity.lower(),
        )
    )

    if json_output:
        output_json({
            "success": True,
            "command": "formula",
            "data": {
                "bmr": round(result.bmr, 2),
                "tdee": result.tdee,
                "multiplier": result.multiplier,
            },
            "human_summary": f"BMR {result.bmr:.0f}, TDEE {result.tdee} kcal/day",
        })
    else:
        console.print(f"[blue]BMR:[/blue]  {result.bmr:.0f} kcal/day")
        console.print(f"[blue]TDEE:[/blue] {result.tdee} kcal/day (× {result.multiplier})")


@config_app.command("show")
def config_show(
    config_path: Optional[Path] = typer.Option(None, "--config", help="Config YAML"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the effective engine configuration."""
    try:
        settings = load_settings(config_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        fail("config show", str(e), json_output)

    if json_output:
        output_json({"success": True, "command": "config show", "data": settings.to_dict()})
        return

    table = Table(title="Engine settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", justify="right")
    for name, value in asdict(settings.engine).items():
        table.add_row(name, str(value))
    console.print(table)
    console.print(f"Units: {settings.defaults.units}, output: {settings.defaults.output_format}")


if __name__ == "__main__":
    app()
