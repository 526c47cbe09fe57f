"""
Surfaces module - Classified layer regions and the collection that holds them.

- SurfaceType: bit-flag classification (position, density, modifiers)
- Surface: one classified region with thickness / layers / bridge angle
- SurfaceCollection: filtering, grouping and bulk reshaping of surfaces
"""

from surfkit.surfaces.collection import MergePredicate, SurfaceCollection
from surfkit.surfaces.surface import Surface, SurfaceProperties, surfaces_could_merge
from surfkit.surfaces.surface_type import BITS, ROLES, SurfaceType, role_name

__all__ = [
    "SurfaceType",
    "ROLES",
    "BITS",
    "role_name",
    "Surface",
    "SurfaceProperties",
    "surfaces_could_merge",
    "SurfaceCollection",
    "MergePredicate",
]
