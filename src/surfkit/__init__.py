"""
SurfKit - Classified layer surfaces for additive manufacturing slicers.

Holds the top/bottom/internal/bridge regions produced while slicing a model
into layers and lets path planning filter, group and simplify them.
"""

__version__ = "0.1.0"
__author__ = "SurfKit Contributors"

from surfkit.core.config import ConfigManager, SurfaceSettings
from surfkit.geometry.expolygon import ExPolygon
from surfkit.surfaces.collection import SurfaceCollection
from surfkit.surfaces.surface import Surface, surfaces_could_merge
from surfkit.surfaces.surface_type import SurfaceType

__all__ = [
    "__version__",
    "ConfigManager",
    "SurfaceSettings",
    "ExPolygon",
    "Surface",
    "SurfaceCollection",
    "SurfaceType",
    "surfaces_could_merge",
]
