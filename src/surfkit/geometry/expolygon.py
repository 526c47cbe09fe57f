"""
ExPolygon - polygon-with-holes geometry for classified surfaces.

An ExPolygon is one outer contour plus zero or more hole contours. This
module is the geometry kernel the surface collection delegates to:

- ``contains``   - point / polyline containment via **shapely**
- ``simplify``   - Douglas-Peucker per ring (shapely) followed by a
                   non-zero union through **pyclipper**, which repairs
                   self-intersections and may split one region into several
- ``to_polygons`` - flattening into contour + hole polygons

Coordinates are floating-point mm. pyclipper works on integers, so rings
are scaled by ``_CLIPPER_SCALE`` on the way in and back on the way out.

References:
- shapely: https://shapely.readthedocs.io/
- pyclipper: https://github.com/fonttools/pyclipper
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from numbers import Real
from typing import List, Optional, Sequence, Tuple, Union

import pyclipper
from shapely.errors import GEOSException
from shapely.geometry import LineString
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry
from shapely.validation import make_valid

from surfkit.core.exceptions import GeometryError

logger = logging.getLogger(__name__)

Point2D = Tuple[float, float]
Polygon = List[Point2D]
Polyline = List[Point2D]
PointOrPolyline = Union[Point2D, Sequence[Point2D]]

# 1 mm -> 1000 clipper units -> 0.001 mm resolution
_CLIPPER_SCALE = 1000


def _to_clipper(polygon: Sequence[Point2D]) -> List[Tuple[int, int]]:
    """Scale floating-point polygon to pyclipper integer coordinates."""
    return [(int(round(x * _CLIPPER_SCALE)), int(round(y * _CLIPPER_SCALE)))
            for x, y in polygon]


def _from_clipper(path: list) -> Polygon:
    """Scale pyclipper integer coordinates back to floating-point mm."""
    return [(x / _CLIPPER_SCALE, y / _CLIPPER_SCALE) for x, y in path]


def _polygon_area_signed(polygon: Sequence[Point2D]) -> float:
    """Compute signed area (positive = CCW, negative = CW)."""
    area = 0.0
    n = len(polygon)
    for i in range(n):
        j = (i + 1) % n
        area += polygon[i][0] * polygon[j][1]
        area -= polygon[j][0] * polygon[i][1]
    return area / 2.0


def _ensure_ccw(polygon: Sequence[Point2D]) -> Polygon:
    if _polygon_area_signed(polygon) < 0:
        return list(reversed(polygon))
    return list(polygon)


def _ensure_cw(polygon: Sequence[Point2D]) -> Polygon:
    if _polygon_area_signed(polygon) > 0:
        return list(reversed(polygon))
    return list(polygon)


def _is_point(item: PointOrPolyline) -> bool:
    return len(item) == 2 and isinstance(item[0], Real)


def _simplify_ring(ring: Sequence[Point2D], tolerance: float) -> Optional[Polygon]:
    """
    Douglas-Peucker simplification of a closed ring.

    Returns None when fewer than three vertices survive.
    """
    if len(ring) < 3:
        return None
    if tolerance == 0:
        return list(ring)

    closed = list(ring) + [ring[0]]
    simplified = LineString(closed).simplify(tolerance, preserve_topology=False)
    if simplified.is_empty:
        return None

    coords = [(float(c[0]), float(c[1])) for c in simplified.coords]
    if len(coords) > 1 and coords[0] == coords[-1]:
        coords.pop()
    if len(coords) < 3:
        return None
    return coords


def _collect_expolygons(node, out: List["ExPolygon"]) -> None:
    """Walk a pyclipper PolyTree: outers hold holes, holes hold nested outers."""
    for outer in node.Childs:
        holes = [_from_clipper(hole.Contour) for hole in outer.Childs]
        out.append(ExPolygon(_from_clipper(outer.Contour), holes))
        for hole in outer.Childs:
            _collect_expolygons(hole, out)


def union_ex(rings: Sequence[Sequence[Point2D]]) -> List["ExPolygon"]:
    """
    Union closed rings with the non-zero fill rule and return ExPolygons.

    Contours should be CCW and holes CW so that holes cancel their contour.
    Rings that collapse at clipper resolution are dropped; if nothing is
    left an empty list is returned.
    """
    if not rings:
        return []

    pc = pyclipper.Pyclipper()
    try:
        pc.AddPaths([_to_clipper(r) for r in rings], pyclipper.PT_SUBJECT, True)
    except pyclipper.ClipperException:
        logger.debug("union_ex: all %d rings degenerate", len(rings))
        return []

    tree = pc.Execute2(pyclipper.CT_UNION, pyclipper.PFT_NONZERO, pyclipper.PFT_NONZERO)
    result: List[ExPolygon] = []
    _collect_expolygons(tree, result)
    return result


@dataclass(frozen=True)
class ExPolygon:
    """
    Polygon with holes.

    Attributes:
        contour: Outer boundary as (x, y) points, not closed (first != last)
        holes: Hole boundaries, same convention as the contour
    """

    contour: Tuple[Point2D, ...]
    holes: Tuple[Tuple[Point2D, ...], ...] = ()

    def __post_init__(self):
        object.__setattr__(
            self, "contour", tuple((float(x), float(y)) for x, y in self.contour)
        )
        object.__setattr__(
            self,
            "holes",
            tuple(tuple((float(x), float(y)) for x, y in hole) for hole in self.holes),
        )

    @classmethod
    def from_shapely(cls, polygon: ShapelyPolygon) -> "ExPolygon":
        """Build from a shapely Polygon, dropping the closing vertices."""
        contour = list(polygon.exterior.coords)[:-1]
        holes = [list(interior.coords)[:-1] for interior in polygon.interiors]
        return cls(contour, holes)

    def to_polygons(self) -> List[Polygon]:
        """Contour followed by every hole, each as its own polygon."""
        polygons = [list(self.contour)]
        polygons.extend(list(hole) for hole in self.holes)
        return polygons

    def area(self) -> float:
        """Contour area minus hole areas."""
        total = abs(_polygon_area_signed(self.contour))
        for hole in self.holes:
            total -= abs(_polygon_area_signed(hole))
        return total

    def is_degenerate(self) -> bool:
        """Fewer than three vertices, or no enclosed area at all."""
        return self._shapely is None

    @cached_property
    def _shapely(self) -> Optional[BaseGeometry]:
        if len(self.contour) < 3:
            return None
        holes = [hole for hole in self.holes if len(hole) >= 3]
        try:
            poly = ShapelyPolygon(self.contour, holes)
            if not poly.is_valid:
                poly = make_valid(poly)  # self-intersections become multi-part
        except (ValueError, GEOSException):
            return None
        if poly.is_empty or poly.area == 0:
            return None
        return poly

    def to_shapely(self) -> Optional[BaseGeometry]:
        """
        Shapely view of this region, repaired with ``make_valid`` when invalid.

        Returns None for degenerate regions.
        """
        return self._shapely

    def contains_point(self, point: Point2D) -> bool:
        """True if the point is strictly inside the contour and outside all holes."""
        poly = self._shapely
        if poly is None:
            return False
        return poly.contains(ShapelyPoint(point[0], point[1]))

    def contains_polyline(self, polyline: Sequence[Point2D]) -> bool:
        """True if the whole polyline lies within the region (touching allowed)."""
        if not polyline:
            return False
        if len(polyline) == 1:
            return self.contains_point(polyline[0])
        poly = self._shapely
        if poly is None:
            return False
        return poly.covers(LineString(polyline))

    def contains(self, item: PointOrPolyline) -> bool:
        """
        Containment test for a point ``(x, y)`` or a polyline ``[(x, y), ...]``.

        Never raises on degenerate geometry; a degenerate region contains nothing.
        """
        if _is_point(item):
            return self.contains_point(item)
        return self.contains_polyline(item)

    def simplify(self, tolerance: float) -> List["ExPolygon"]:
        """
        Simplify every ring within ``tolerance`` and re-union the result.

        The union may split the region into several pieces (for example when
        simplification makes the contour self-intersect) or collapse it to
        nothing, in which case an empty list is returned.

        Parameters:
            tolerance: Maximum deviation (mm); 0 keeps every vertex.

        Returns:
            Simplified pieces in union-tree order.

        Raises:
            GeometryError: If tolerance is negative.
        """
        if tolerance < 0:
            raise GeometryError(
                "Simplify tolerance must be non-negative",
                operation="simplify",
                details={"tolerance": tolerance},
            )

        contour = _simplify_ring(self.contour, tolerance)
        if contour is None:
            return []

        rings = [_ensure_ccw(contour)]
        for hole in self.holes:
            simplified = _simplify_ring(hole, tolerance)
            if simplified is not None:
                rings.append(_ensure_cw(simplified))

        return union_ex(rings)
