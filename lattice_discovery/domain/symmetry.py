"""Eight-fold dihedral symmetry of the digit-sum lattice.

Digit-sum cost is invariant under negating either coordinate and under
swapping the two coordinates, so a point of the canonical octant
``x >= y >= 0`` determines the classification of its whole orbit.

Orbit sizes: the origin is its own orbit (1 image), points on an axis of
symmetry (``y == 0`` or ``y == x``) have 4 images, all others have 8.
"""

from __future__ import annotations

from collections.abc import Iterable

from lattice_discovery.domain.snapshot import Point


def in_canonical_octant(point: Point) -> bool:
    x, y = point
    return x >= y >= 0


def _reflections(x: int, y: int) -> tuple[Point, ...]:
    """Images of ``(x, y)`` other than the point itself."""
    if x == 0 and y == 0:
        return ()
    if y == 0 or y == x:
        return ((-x, -y), (-y, x), (y, -x))
    return ((x, -y), (-x, y), (-x, -y), (y, x), (y, -x), (-y, x), (-y, -x))


def reflect_point(point: Point) -> tuple[Point, ...]:
    """Return the full orbit of a canonical-octant point, the point itself first."""
    if not in_canonical_octant(point):
        raise ValueError(f"point {point} is outside the canonical octant x >= y >= 0")
    x, y = point
    return ((x, y), *_reflections(x, y))


def expand_octant(points: Iterable[Point]) -> tuple[Point, ...]:
    """Expand canonical-octant points to full-plane coordinates.

    The originals come first, in input order, followed by the reflected
    images of each point in the same order.
    """
    originals = tuple(points)
    expanded: list[Point] = list(originals)
    for point in originals:
        if not in_canonical_octant(point):
            raise ValueError(f"point {point} is outside the canonical octant x >= y >= 0")
        expanded.extend(_reflections(*point))
    return tuple(expanded)
