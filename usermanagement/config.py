"""Configuration management for the user service."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

import yaml

DEFAULT_MINIMUM_AGE = 18


@dataclass(frozen=True)
class ServiceSettings:
    """Tunable validation rules for :class:`~usermanagement.service.UserService`."""

    minimum_age: int = DEFAULT_MINIMUM_AGE

    @staticmethod
    def from_dict(data: Dict[str, object]) -> "ServiceSettings":
        """Create :class:`ServiceSettings` from raw dictionary data."""
        raw_age = data.get("minimum_age", DEFAULT_MINIMUM_AGE)
        if isinstance(raw_age, bool) or (isinstance(raw_age, float) and not raw_age.is_integer()):
            raise ValueError(f"Invalid minimum_age value {raw_age!r}")
        try:
            minimum_age = int(raw_age)  # type: ignore[arg-type]
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid minimum_age value {raw_age!r}") from exc
        if minimum_age <= 0:
            raise ValueError("minimum_age must be a positive integer")
        return ServiceSettings(minimum_age=minimum_age)


def load_settings(config_path: Path) -> ServiceSettings:
    """Load service settings from a YAML file, falling back to defaults."""
    if not config_path.is_file():
        return ServiceSettings()

    with config_path.open("r", encoding="utf-8") as handle:
        try:
            raw = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid configuration file {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ValueError("Configuration file must contain a mapping at the top level")

    section = raw.get("users") or {}
    if not isinstance(section, dict):
        raise ValueError("The 'users' configuration section must be a mapping")
    return ServiceSettings.from_dict(section)


def resolve_config_path(env_value: Optional[str]) -> Path:
    """Resolve the path to the configuration file."""
    if env_value:
        candidate = Path(env_value).expanduser().resolve(strict=False)
    else:
        candidate = (Path(__file__).resolve().parent.parent / "config" / "settings.yaml").resolve(strict=False)
    return candidate


__all__ = ["DEFAULT_MINIMUM_AGE", "ServiceSettings", "load_settings", "resolve_config_path"]
