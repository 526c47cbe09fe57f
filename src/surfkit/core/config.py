"""
Configuration management for SurfKit.

Handles loading, validation, and access to surface settings profiles.
A profile is a YAML file under ``<config_dir>/profiles`` with a top-level
``surfaces`` mapping, for example::

    surfaces:
      simplify_tolerance: 0.05
      default_thickness_layers: 1
      log_level: DEBUG
      log_file: logs/surfkit.log
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from surfkit.core.exceptions import ConfigurationError

UNSET_THICKNESS = -1.0
UNSET_BRIDGE_ANGLE = -1.0


class SurfaceSettings(BaseModel):
    """Defaults applied by a SurfaceCollection."""

    name: str = "default"
    simplify_tolerance: float = Field(default=0.0125, ge=0.0)
    default_thickness: float = UNSET_THICKNESS
    default_thickness_layers: int = Field(default=1, ge=0)
    default_bridge_angle: float = UNSET_BRIDGE_ANGLE
    log_level: str = "INFO"
    json_logs: bool = False
    log_file: Optional[str] = None


def _read_surfaces_section(config_file: Path) -> dict | None:
    try:
        with open(config_file) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(
            f"Failed to read settings file: {config_file}",
            details={"error": str(e)},
        )
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Settings file must contain a mapping: {config_file}",
            details={"type": type(data).__name__},
        )
    if "surfaces" not in data:
        return None

    section = data["surfaces"]
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"'surfaces' section must be a mapping: {config_file}",
            details={"type": type(section).__name__},
        )
    return dict(section)


def load_settings(path: Path) -> SurfaceSettings:
    """
    Load a single settings file.

    Args:
        path: YAML file with a top-level ``surfaces`` mapping

    Returns:
        Validated SurfaceSettings; the profile name defaults to the file stem

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Settings file not found: {path}")

    section = _read_surfaces_section(path)
    if section is None:
        raise ConfigurationError(
            f"Settings file has no 'surfaces' section: {path}",
        )
    section.setdefault("name", path.stem)
    try:
        return SurfaceSettings(**section)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid settings in {path}",
            details={"error": str(e)},
        )


@dataclass
class ConfigManager:
    """
    Central configuration manager for SurfKit.

    Loads and validates settings profiles from YAML files.

    Example:
        >>> config = ConfigManager(config_dir=Path("config"))
        >>> settings = config.get_profile("fine")
    """

    config_dir: Path
    _profiles: dict[str, SurfaceSettings] = field(default_factory=dict, init=False)
    _loaded: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        """Initialize configuration manager."""
        self.config_dir = Path(self.config_dir)
        if not self.config_dir.exists():
            raise ConfigurationError(
                f"Configuration directory not found: {self.config_dir}"
            )

    def load(self) -> None:
        """Load all profiles from disk."""
        profiles_dir = self.config_dir / "profiles"
        if profiles_dir.exists():
            for config_file in sorted(profiles_dir.glob("*.yaml")):
                section = _read_surfaces_section(config_file)
                if section is None:
                    continue
                section.setdefault("name", config_file.stem)
                try:
                    self._profiles[config_file.stem] = SurfaceSettings(**section)
                except ValidationError as e:
                    raise ConfigurationError(
                        f"Failed to load settings profile: {config_file}",
                        details={"error": str(e)},
                    )
        self._loaded = True

    def get_profile(self, name: str) -> SurfaceSettings:
        """
        Get a settings profile by name.

        Args:
            name: Profile name (without .yaml extension)

        Returns:
            SurfaceSettings instance

        Raises:
            ConfigurationError: If profile not found
        """
        if not self._loaded:
            self.load()

        if name not in self._profiles:
            available = list(self._profiles.keys())
            raise ConfigurationError(
                f"Settings profile not found: {name}",
                details={"available": available},
            )
        return self._profiles[name]

    def list_profiles(self) -> list[str]:
        """List available settings profiles."""
        if not self._loaded:
            self.load()
        return list(self._profiles.keys())
