"""
auteur.config - YAML config loading, map profile merging, validation.

Handles loading auteur.yaml, applying map profile defaults, and validating
all parameters.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from auteur.exceptions import ConfigError

CONFIG_FILENAME = "auteur.yaml"

NESTED_SECTIONS = ("geometry", "viewport", "blend", "matching")


class MapGeometry(BaseModel):
    """Logical plane of the constellation map."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(default=600.0, gt=0)
    height: float = Field(default=380.0, gt=0)
    pad: float = Field(default=40.0, ge=0)

    @model_validator(mode="after")
    def validate_pad(self) -> MapGeometry:
        if self.pad * 2 >= min(self.width, self.height):
            raise ValueError("pad must leave a drawable area inside the plane")
        return self


class ViewportSettings(BaseModel):
    """Zoom limits and gesture step sizes."""

    model_config = ConfigDict(frozen=True)

    min_zoom: float = Field(default=1.0, gt=0)
    max_zoom: float = Field(default=5.0, gt=0)
    default_zoom: float = Field(default=1.0, gt=0)
    zoom_step: float = Field(default=0.5, gt=0)
    wheel_sensitivity: float = Field(default=0.0015, gt=0)

    @model_validator(mode="after")
    def validate_range(self) -> ViewportSettings:
        if self.max_zoom < self.min_zoom:
            raise ValueError("max_zoom must be >= min_zoom")
        return self


class BlendSettings(BaseModel):
    """Blend slider defaults."""

    default_weight: float = Field(default=0.7, ge=0.0, le=1.0)
    ui_min: float = Field(default=0.10, ge=0.0, le=1.0)
    ui_max: float = Field(default=0.90, ge=0.0, le=1.0)
    ui_step: float = Field(default=0.05, gt=0.0, le=1.0)


class MatchSettings(BaseModel):
    """Ranking defaults."""

    top_n: int = Field(default=5, gt=0)
    shortlist: int = Field(default=3, gt=0)
    use_genres: bool = True


class AuteurConfig(BaseModel):
    """Resolved configuration."""

    project_name: str = "untitled"
    map_profile: str = "panel"

    geometry: MapGeometry = Field(default_factory=MapGeometry)
    viewport: ViewportSettings = Field(default_factory=ViewportSettings)
    blend: BlendSettings = Field(default_factory=BlendSettings)
    matching: MatchSettings = Field(default_factory=MatchSettings)

    catalog_path: Path | None = None
    config_path: Path | None = None

    @field_validator("map_profile")
    @classmethod
    def validate_profile(cls, v: str) -> str:
        if v not in BUILTIN_PROFILES:
            raise ValueError(f"map_profile must be one of: {set(BUILTIN_PROFILES)}")
        return v

    def resolve_catalog_path(self) -> Path | None:
        """Catalog path, relative paths resolved against the config file."""
        if self.catalog_path is None:
            return None
        if self.catalog_path.is_absolute() or self.config_path is None:
            return self.catalog_path
        return self.config_path.parent / self.catalog_path


BUILTIN_PROFILES: dict[str, dict[str, Any]] = {
    "panel": {
        "geometry": {"width": 600.0, "height": 380.0, "pad": 40.0},
        "viewport": {"default_zoom": 1.0},
    },
    "wide": {
        "geometry": {"width": 720.0, "height": 420.0, "pad": 50.0},
        "viewport": {"default_zoom": 1.0},
    },
}


def load_profile(name: str) -> dict[str, Any]:
    """Return a copy of a built-in map profile."""
    if name not in BUILTIN_PROFILES:
        raise ConfigError(f"Unknown map profile: {name}")
    return {k: dict(v) for k, v in BUILTIN_PROFILES[name].items()}


def merge_config(project_config: dict[str, Any], profile: dict[str, Any]) -> dict[str, Any]:
    """Merge project config with profile defaults. Project config takes precedence."""
    merged = {k: dict(v) if isinstance(v, dict) else v for k, v in profile.items()}
    for key, value in project_config.items():
        if key in NESTED_SECTIONS and isinstance(value, dict):
            merged.setdefault(key, {})
            merged[key].update(value)
        elif value is not None:
            merged[key] = value
    return merged


def find_config(start: Path | None = None) -> Path | None:
    """Find auteur.yaml in ``start`` or any parent directory."""
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.exists():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def load_config(path: Path) -> AuteurConfig:
    """Load and validate configuration from a file or a directory holding auteur.yaml."""
    config_file = path / CONFIG_FILENAME if path.is_dir() else path
    if not config_file.exists():
        raise FileNotFoundError(f"No {CONFIG_FILENAME} found at {path}")

    with open(config_file, encoding="utf-8") as f:
        raw_config = yaml.safe_load(f) or {}

    if not isinstance(raw_config, dict):
        raise ConfigError(f"{config_file}: expected a mapping at top level")

    profile = load_profile(raw_config.get("map_profile", "panel"))
    merged = merge_config(raw_config, profile)
    merged["config_path"] = config_file

    try:
        return AuteurConfig(**merged)
    except ValidationError as e:
        raise ConfigError(f"{config_file}: {e}") from e


def create_default_config(project_name: str, profile: str = "panel") -> dict[str, Any]:
    """Create a default config for a new project."""
    defaults: dict[str, Any] = {
        "project_name": project_name,
        "map_profile": profile,
        "blend": {"default_weight": 0.7},
        "matching": {"top_n": 5, "shortlist": 3, "use_genres": True},
    }
    return merge_config(defaults, load_profile(profile))


def write_config(config: dict[str, Any], path: Path) -> None:
    """Write configuration to a YAML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)
