"""
Surface collection for one layer (or one region of a layer).

The collection is an ordered list of Surface records with no index beyond a
linear scan. Slicing stages append classified surfaces to it; path planning
filters, groups and reshapes it.

Ownership:
    The collection owns its Surface records. Surfaces passed to the
    constructor, ``append`` or ``extend`` are copied on the way in, so two
    collections never share a record and appending a collection to itself
    yields distinct records.

Aliasing contract:
    ``filter_by_type``, ``filter_by_predicate``, ``group`` and
    ``group_by_properties`` return references to the Surface objects the
    collection owns, not copies. Those references are only meaningful until
    the next structural mutation (append, extend, remove, keep, simplify,
    clear). Callers can compare ``generation`` before and after to detect
    that a result has gone stale. Mutating the fields of a returned Surface
    (e.g. setting ``bridge_angle``) is allowed and visible in the collection.

Not thread-safe: callers must serialize writers or work on a copy.
"""

from typing import Callable, Iterable, Iterator, List, Optional, Union

from surfkit.core.config import SurfaceSettings
from surfkit.core.logging import get_logger
from surfkit.geometry.expolygon import ExPolygon, PointOrPolyline, Polygon
from surfkit.surfaces.surface import Surface, surfaces_could_merge
from surfkit.surfaces.surface_type import SurfaceType

_logger = get_logger(__name__)

MergePredicate = Callable[[Surface, Surface], bool]
TypeArg = Union[SurfaceType, Iterable[SurfaceType]]


def _as_types(types: TypeArg) -> List[SurfaceType]:
    """Normalize a single type or an iterable of types to a list."""
    if isinstance(types, int):
        return [SurfaceType(types)]
    return [SurfaceType(t) for t in types]


class SurfaceCollection:
    """
    Ordered, mutable set of surfaces.

    Insertion order is preserved by appends but carries no meaning for
    consumers; grouping and simplification may reorder.

    Example:
        >>> coll = SurfaceCollection()
        >>> coll.append_expolygons(bottom_regions, SurfaceType.BOTTOM)
        >>> coll.append_expolygons(infill_regions, SurfaceType.INTERNAL)
        >>> bottoms = coll.filter_by_type(SurfaceType.BOTTOM)
        >>> for group in coll.group():
        ...     fill(group)
    """

    def __init__(
        self,
        surfaces: Optional[Iterable[Surface]] = None,
        settings: Optional[SurfaceSettings] = None,
    ):
        """
        Initialize the collection.

        Args:
            surfaces: Initial surfaces, kept in order
            settings: Defaults for fresh surfaces and simplify (uses defaults if None)
        """
        self.surfaces: List[Surface] = (
            [surface.copy() for surface in surfaces] if surfaces is not None else []
        )
        self.settings = settings or SurfaceSettings()
        self._generation = 0

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.surfaces)

    def __iter__(self) -> Iterator[Surface]:
        return iter(self.surfaces)

    def __getitem__(self, index: int) -> Surface:
        return self.surfaces[index]

    def __bool__(self) -> bool:
        return bool(self.surfaces)

    def __repr__(self) -> str:
        return f"SurfaceCollection({len(self.surfaces)} surfaces)"

    @property
    def generation(self) -> int:
        """Counter bumped by every structural mutation."""
        return self._generation

    def _touch(self) -> None:
        self._generation += 1

    def empty(self) -> bool:
        return not self.surfaces

    def clear(self) -> None:
        self.surfaces.clear()
        self._touch()

    def copy(self) -> "SurfaceCollection":
        """Private copy with independent Surface records."""
        return SurfaceCollection(self.surfaces, settings=self.settings)

    # ------------------------------------------------------------------
    # Bulk mutation
    # ------------------------------------------------------------------

    def append(self, item: Union[Surface, "SurfaceCollection", Iterable[Surface]]) -> None:
        """
        Append one surface, or every surface of another collection/sequence.

        Relative order of both the existing and the appended surfaces is kept.
        Appended surfaces are copies; the caller keeps its own records.
        """
        if isinstance(item, Surface):
            self.surfaces.append(item.copy())
            self._touch()
        else:
            self.extend(item)

    def extend(self, surfaces: Union["SurfaceCollection", Iterable[Surface]]) -> None:
        if isinstance(surfaces, SurfaceCollection):
            surfaces = surfaces.surfaces
        # copies are built before extending, so a collection may extend itself
        copies = [surface.copy() for surface in surfaces]
        self.surfaces.extend(copies)
        self._touch()

    def append_expolygons(
        self,
        expolygons: Iterable[ExPolygon],
        template: Union[Surface, SurfaceType],
    ) -> None:
        """
        Append one surface per region.

        Args:
            expolygons: Regions to add, in order
            template: Either a Surface whose classification and parameters are
                cloned onto every region, or a SurfaceType for fresh surfaces
                using the collection's default thickness, layers and bridge angle
        """
        if isinstance(template, Surface):
            new = [template.with_expolygon(expolygon) for expolygon in expolygons]
        else:
            surface_type = SurfaceType(template)
            new = [
                Surface(
                    expolygon,
                    surface_type,
                    thickness=self.settings.default_thickness,
                    thickness_layers=self.settings.default_thickness_layers,
                    bridge_angle=self.settings.default_bridge_angle,
                )
                for expolygon in expolygons
            ]
        self.surfaces.extend(new)
        self._touch()

    def simplify(self, tolerance: Optional[float] = None) -> None:
        """
        Replace every surface's geometry by its simplified pieces.

        Each piece becomes its own surface carrying a copy of the original's
        classification. Pieces of one surface keep the kernel's order. A
        surface whose geometry simplifies to nothing contributes no output.

        Args:
            tolerance: Maximum deviation (mm); defaults to
                ``settings.simplify_tolerance``

        Raises:
            GeometryError: If tolerance is negative
        """
        if tolerance is None:
            tolerance = self.settings.simplify_tolerance

        simplified: List[Surface] = []
        for surface in self.surfaces:
            pieces = surface.expolygon.simplify(tolerance)
            if not pieces:
                _logger.debug(
                    "surface_simplified_away",
                    surface_type=surface.surface_type,
                    area=surface.area(),
                    tolerance=tolerance,
                )
            simplified.extend(surface.with_expolygon(piece) for piece in pieces)

        _logger.debug(
            "surfaces_simplified",
            before=len(self.surfaces),
            after=len(simplified),
            tolerance=tolerance,
        )
        self.surfaces[:] = simplified
        self._touch()

    def remove_type(self, surface_type: SurfaceType) -> None:
        """Delete every surface of exactly this type, keeping survivor order."""
        self.remove_types([surface_type])

    def remove_types(self, types: TypeArg) -> None:
        """Delete every surface whose type equals any of ``types``."""
        types = _as_types(types)
        self.surfaces[:] = [s for s in self.surfaces if s.surface_type not in types]
        self._touch()

    def keep_type(self, surface_type: SurfaceType) -> None:
        """Delete every surface not of exactly this type, keeping survivor order."""
        self.keep_types([surface_type])

    def keep_types(self, types: TypeArg) -> None:
        """
        Delete every surface whose type equals none of ``types``.

        Survivors are compacted to the front in place, then the tail is cut,
        so a single pass handles any number of types.
        """
        types = _as_types(types)
        surfaces = self.surfaces
        j = 0
        for i in range(len(surfaces)):
            if surfaces[i].surface_type in types:
                if j < i:
                    surfaces[i], surfaces[j] = surfaces[j], surfaces[i]
                j += 1
        del surfaces[j:]
        self._touch()

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def polygons_count(self) -> int:
        """Number of polygons ``to_polygons`` would return (contours + holes)."""
        return sum(1 + len(s.expolygon.holes) for s in self.surfaces)

    def to_polygons(self) -> List[Polygon]:
        """Flatten every surface into its contour and hole polygons, in order."""
        polygons: List[Polygon] = []
        for surface in self.surfaces:
            polygons.extend(surface.to_polygons())
        return polygons

    def to_expolygons(self) -> List[ExPolygon]:
        """One region per surface, in collection order."""
        return [surface.expolygon for surface in self.surfaces]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def any_internal_contains(self, item: PointOrPolyline) -> bool:
        """True if some internal surface contains the point or whole polyline."""
        for surface in self.surfaces:
            if surface.is_internal() and surface.expolygon.contains(item):
                return True
        return False

    def any_bottom_contains(self, item: PointOrPolyline) -> bool:
        """True if some bottom surface contains the point or whole polyline."""
        for surface in self.surfaces:
            if surface.is_bottom() and surface.expolygon.contains(item):
                return True
        return False

    def filter_by_type(self, types: TypeArg) -> List[Surface]:
        """
        References to every surface whose type equals one of ``types``.

        Collection order is kept and each surface appears at most once.
        """
        types = _as_types(types)
        return [s for s in self.surfaces if any(s.surface_type == t for t in types)]

    def filter_by_predicate(self, predicate: Callable[[Surface], bool]) -> List[Surface]:
        return [s for s in self.surfaces if predicate(s)]

    def filter_by_type_polygons(
        self,
        surface_type: SurfaceType,
        polygons: Optional[List[Polygon]] = None,
    ) -> List[Polygon]:
        """
        Append the flattened polygons of every surface of this type.

        Args:
            surface_type: Exact type to match
            polygons: Accumulator to extend (a new list if None)

        Returns:
            The accumulator
        """
        if polygons is None:
            polygons = []
        for surface in self.surfaces:
            if surface.surface_type == surface_type:
                polygons.extend(surface.to_polygons())
        return polygons

    def filter_by_incl_type(
        self,
        flags: SurfaceType,
        polygons: Optional[List[Polygon]] = None,
    ) -> List[Polygon]:
        """
        Append the flattened polygons of every surface sharing a bit with ``flags``.

        ``filter_by_incl_type(SurfaceType.MOD_BRIDGE)`` collects every bridge,
        internal or bottom alike.
        """
        if polygons is None:
            polygons = []
        for surface in self.surfaces:
            if surface.surface_type & flags:
                polygons.extend(surface.to_polygons())
        return polygons

    def count_by_type(self) -> dict[SurfaceType, int]:
        """Number of surfaces per type, in first-appearance order."""
        counts: dict[SurfaceType, int] = {}
        for surface in self.surfaces:
            counts[surface.surface_type] = counts.get(surface.surface_type, 0) + 1
        return counts

    # ------------------------------------------------------------------
    # Grouping
    # ------------------------------------------------------------------

    def group_by_properties(self) -> List[List[Surface]]:
        """
        Group surfaces with identical type, thickness, layers and bridge angle.

        Groups appear in order of first appearance, members in encounter order.
        """
        return self._group(lambda key, surface: key.properties() == surface.properties())

    def group(self, could_merge: MergePredicate = surfaces_could_merge) -> List[List[Surface]]:
        """
        Group surfaces that may be processed in one pass.

        Each surface is tested against the first member of every existing
        group and joins the first group that accepts it, otherwise it opens
        a new group. Only the first member is consulted, so with a
        non-transitive predicate two members of a group need not be
        mergeable with each other.

        Args:
            could_merge: Mergeability predicate ``(group_first, candidate) -> bool``

        Returns:
            Groups of references into this collection
        """
        return self._group(could_merge)

    def _group(self, could_merge: MergePredicate) -> List[List[Surface]]:
        groups: List[List[Surface]] = []
        for surface in self.surfaces:
            for group in groups:
                if could_merge(group[0], surface):
                    group.append(surface)
                    break
            else:
                groups.append([surface])
        return groups
