"""
Surface classification flags.

A surface type is a combination of one position bit, one density bit and
optional modifier bits. Named roles (TOP, INTERNAL_BRIDGE, ...) are the
combinations the slicing stages actually produce, so a type can be used both
as a tag (exact equality) and as a mask (bitwise tests).
"""

from enum import IntFlag


class SurfaceType(IntFlag):
    """Classification of a surface within its layer."""

    NONE = 0

    # Position
    POS_TOP = 1 << 0
    POS_BOTTOM = 1 << 1
    POS_INTERNAL = 1 << 2
    POS_PERIMETER = 1 << 3
    # Density
    DENS_SOLID = 1 << 4
    DENS_SPARSE = 1 << 5
    DENS_VOID = 1 << 6
    # Modifiers
    MOD_BRIDGE = 1 << 7
    MOD_OVERBRIDGE = 1 << 8

    # Roles
    TOP = POS_TOP | DENS_SOLID  # Visible top skin
    BOTTOM = POS_BOTTOM | DENS_SOLID  # Bottom skin resting on the layer below
    BOTTOM_BRIDGE = POS_BOTTOM | DENS_SOLID | MOD_BRIDGE  # Bottom skin over air
    INTERNAL = POS_INTERNAL | DENS_SPARSE  # Sparse infill
    INTERNAL_SOLID = POS_INTERNAL | DENS_SOLID
    INTERNAL_BRIDGE = POS_INTERNAL | DENS_SOLID | MOD_BRIDGE
    INTERNAL_OVER_BRIDGE = POS_INTERNAL | DENS_SOLID | MOD_OVERBRIDGE
    INTERNAL_VOID = POS_INTERNAL | DENS_VOID  # Not filled at all
    PERIMETER = POS_PERIMETER | DENS_SOLID


ROLES = (
    SurfaceType.TOP,
    SurfaceType.BOTTOM,
    SurfaceType.BOTTOM_BRIDGE,
    SurfaceType.INTERNAL,
    SurfaceType.INTERNAL_SOLID,
    SurfaceType.INTERNAL_BRIDGE,
    SurfaceType.INTERNAL_OVER_BRIDGE,
    SurfaceType.INTERNAL_VOID,
    SurfaceType.PERIMETER,
)

BITS = (
    SurfaceType.POS_TOP,
    SurfaceType.POS_BOTTOM,
    SurfaceType.POS_INTERNAL,
    SurfaceType.POS_PERIMETER,
    SurfaceType.DENS_SOLID,
    SurfaceType.DENS_SPARSE,
    SurfaceType.DENS_VOID,
    SurfaceType.MOD_BRIDGE,
    SurfaceType.MOD_OVERBRIDGE,
)

_ROLE_NAMES = {int(role): role.name for role in ROLES}


def role_name(surface_type: int) -> str:
    """
    Human-readable name of a type value.

    Named roles return their role name; other combinations are spelled out
    bit by bit, e.g. ``"POS_TOP|MOD_BRIDGE"``.
    """
    value = int(surface_type)
    if value == 0:
        return "NONE"
    if value in _ROLE_NAMES:
        return _ROLE_NAMES[value]
    return "|".join(bit.name for bit in BITS if value & bit)


def is_top(surface_type: int) -> bool:
    return bool(surface_type & SurfaceType.POS_TOP)


def is_bottom(surface_type: int) -> bool:
    return bool(surface_type & SurfaceType.POS_BOTTOM)


def is_internal(surface_type: int) -> bool:
    return bool(surface_type & SurfaceType.POS_INTERNAL)


def is_perimeter(surface_type: int) -> bool:
    return bool(surface_type & SurfaceType.POS_PERIMETER)


def is_external(surface_type: int) -> bool:
    """Top or bottom skin."""
    return bool(surface_type & (SurfaceType.POS_TOP | SurfaceType.POS_BOTTOM))


def is_solid(surface_type: int) -> bool:
    return bool(surface_type & SurfaceType.DENS_SOLID)


def is_sparse(surface_type: int) -> bool:
    return bool(surface_type & SurfaceType.DENS_SPARSE)


def is_void(surface_type: int) -> bool:
    return bool(surface_type & SurfaceType.DENS_VOID)


def is_bridge(surface_type: int) -> bool:
    return bool(surface_type & SurfaceType.MOD_BRIDGE)


def is_over_bridge(surface_type: int) -> bool:
    return bool(surface_type & SurfaceType.MOD_OVERBRIDGE)
