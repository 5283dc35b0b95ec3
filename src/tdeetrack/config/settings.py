"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Optional

import yaml

from tdeetrack.tracking.models import EngineConfig

VALID_UNITS = ("metric", "imperial")
VALID_OUTPUT_FORMATS = ("table", "json")


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".tdeetrack"


@dataclass
class DefaultsConfig:
    """Default values for CLI operations."""

    units: str = "metric"  # "metric" or "imperial"
    output_format: str = "table"  # "table" or "json"


@dataclass
class Settings:
    """Main application settings."""

    engine: EngineConfig = field(default_factory=EngineConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.tdeetrack/config.yaml

        Returns:
            Settings instance

        Raises:
            ValueError: If a value has the wrong type or range, or an unknown option is used
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        # Parse engine config; every field is numeric
        if "engine" in data:
            engine_data = data["engine"] or {}
            known = {f.name: f for f in fields(EngineConfig)}
            unknown = set(engine_data) - set(known)
            if unknown:
                raise ValueError(f"Unknown engine settings: {sorted(unknown)}")

            overrides = {}
            for name, value in engine_data.items():
                cast = int if known[name].type in ("int", int) else float
                try:
                    overrides[name] = cast(value)
                except (TypeError, ValueError) as e:
                    raise ValueError(f"engine.{name} must be a number, got {value!r}") from e
            try:
                settings.engine = replace(settings.engine, **overrides)
            except ValueError as e:
                raise ValueError(f"Invalid engine settings in {config_path}: {e}") from e

        # Parse defaults
        if "defaults" in data:
            def_data = data["defaults"] or {}
            if "units" in def_data:
                if def_data["units"] not in VALID_UNITS:
                    raise ValueError(
                        f"defaults.units must be one of {VALID_UNITS}, got '{def_data['units']}'"
                    )
                settings.defaults.units = def_data["units"]
            if "output_format" in def_data:
                if def_data["output_format"] not in VALID_OUTPUT_FORMATS:
                    raise ValueError(
                        f"defaults.output_format must be one of {VALID_OUTPUT_FORMATS}, "
                        f"got '{def_data['output_format']}'"
                    )
                settings.defaults.output_format = def_data["output_format"]

        return settings

    def to_dict(self) -> dict:
        """Return settings as a plain dict."""
        return {
            "engine": asdict(self.engine),
            "defaults": {
                "units": self.defaults.units,
                "output_format": self.defaults.output_format,
            },
        }

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.tdeetrack/config.yaml
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings(config_path: Optional[Path] = None) -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load(config_path)
    return _settings
