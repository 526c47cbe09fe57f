"""
Core module - Shared configuration, logging and exceptions.
"""

from surfkit.core.config import (
    UNSET_BRIDGE_ANGLE,
    UNSET_THICKNESS,
    ConfigManager,
    SurfaceSettings,
    load_settings,
)
from surfkit.core.exceptions import (
    ConfigurationError,
    GeometryError,
    SurfKitError,
)
from surfkit.core.logging import (
    configure_from_settings,
    configure_logging,
    get_logger,
    render_surface_types,
)

__all__ = [
    # Config
    "ConfigManager",
    "SurfaceSettings",
    "load_settings",
    "UNSET_THICKNESS",
    "UNSET_BRIDGE_ANGLE",
    # Exceptions
    "SurfKitError",
    "ConfigurationError",
    "GeometryError",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "render_surface_types",
]
