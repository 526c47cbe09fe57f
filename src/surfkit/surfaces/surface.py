"""
Surface record: a classified region plus its print parameters.
"""

from dataclasses import dataclass, replace
from typing import List, Tuple

from surfkit.core.config import UNSET_BRIDGE_ANGLE, UNSET_THICKNESS
from surfkit.geometry.expolygon import ExPolygon, Polygon
from surfkit.surfaces import surface_type as st
from surfkit.surfaces.surface_type import SurfaceType

SurfaceProperties = Tuple[SurfaceType, float, int, float]


@dataclass
class Surface:
    """
    A classified region of one layer.

    Attributes:
        expolygon: Region geometry (contour + holes)
        surface_type: Classification flags
        thickness: Extrusion thickness (mm), -1 when unset
        thickness_layers: Number of layers this surface spans
        bridge_angle: Bridging direction (radians), -1 when not a bridge
        extra_perimeters: Additional perimeters requested for this region
    """

    expolygon: ExPolygon
    surface_type: SurfaceType = SurfaceType.INTERNAL
    thickness: float = UNSET_THICKNESS
    thickness_layers: int = 1
    bridge_angle: float = UNSET_BRIDGE_ANGLE
    extra_perimeters: int = 0

    def __post_init__(self):
        if self.thickness_layers < 0:
            raise ValueError(
                f"thickness_layers must be >= 0, got {self.thickness_layers}"
            )
        self.surface_type = SurfaceType(self.surface_type)

    def copy(self) -> "Surface":
        """Independent copy (geometry is immutable and shared)."""
        return replace(self)

    def with_expolygon(self, expolygon: ExPolygon) -> "Surface":
        """Copy of this surface carrying different geometry."""
        return replace(self, expolygon=expolygon)

    def properties(self) -> SurfaceProperties:
        """The tuple compared when grouping surfaces."""
        return (self.surface_type, self.thickness, self.thickness_layers, self.bridge_angle)

    def to_polygons(self) -> List[Polygon]:
        return self.expolygon.to_polygons()

    def polygons_count(self) -> int:
        return 1 + len(self.expolygon.holes)

    def area(self) -> float:
        return self.expolygon.area()

    @property
    def has_thickness(self) -> bool:
        return self.thickness != UNSET_THICKNESS

    @property
    def has_bridge_angle(self) -> bool:
        return self.bridge_angle >= 0

    def is_top(self) -> bool:
        return st.is_top(self.surface_type)

    def is_bottom(self) -> bool:
        return st.is_bottom(self.surface_type)

    def is_internal(self) -> bool:
        return st.is_internal(self.surface_type)

    def is_perimeter(self) -> bool:
        return st.is_perimeter(self.surface_type)

    def is_external(self) -> bool:
        return st.is_external(self.surface_type)

    def is_solid(self) -> bool:
        return st.is_solid(self.surface_type)

    def is_sparse(self) -> bool:
        return st.is_sparse(self.surface_type)

    def is_void(self) -> bool:
        return st.is_void(self.surface_type)

    def is_bridge(self) -> bool:
        return st.is_bridge(self.surface_type)

    def is_over_bridge(self) -> bool:
        return st.is_over_bridge(self.surface_type)


def surfaces_could_merge(a: Surface, b: Surface) -> bool:
    """
    Default mergeability predicate.

    Two surfaces can share one fill pass when their type, thickness,
    layer count and bridge angle are identical.
    """
    return a.properties() == b.properties()
