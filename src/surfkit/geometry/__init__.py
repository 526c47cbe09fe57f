"""
Geometry module - Polygon-with-holes kernel used by surface collections.
"""

from surfkit.geometry.expolygon import (
    ExPolygon,
    Point2D,
    Polygon,
    Polyline,
    union_ex,
)

__all__ = [
    "ExPolygon",
    "Point2D",
    "Polygon",
    "Polyline",
    "union_ex",
]
