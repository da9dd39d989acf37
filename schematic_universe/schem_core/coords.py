"""
8-connected neighborhoods on the (col, row) grid.

Provides:
- NEIGHBOR_OFFSETS: The eight (dc, dr) offsets around a cell
- neighbors: Neighborhood of one point, or union over many points

The union over many points does not remove the input points themselves: a
multi-digit number's interior digits are neighbors of its other digits.
"""

from typing import Iterable, Union

from .types import Point

NEIGHBOR_OFFSETS = tuple(
    (dc, dr)
    for dr in (-1, 0, 1)
    for dc in (-1, 0, 1)
    if not (dc == 0 and dr == 0)
)


def _point_neighbors(point: Point) -> set[Point]:
    c, r = point
    return {Point(c + dc, r + dr) for dc, dr in NEIGHBOR_OFFSETS}


def neighbors(target: Union[Point, Iterable[Point]]) -> set[Point]:
    """
    8-connected neighborhood of a point or a collection of points.

    Args:
        target: A single Point, or any iterable of Points

    Returns:
        For a Point: the eight surrounding cells (never the point itself).
        For an iterable: the union of each point's neighborhood.

    Examples:
        >>> len(neighbors(Point(5, 5)))
        8
        >>> len(neighbors([Point(1, 1), Point(2, 1)]))
        12
    """
    if isinstance(target, Point):
        return _point_neighbors(target)

    result: set[Point] = set()
    for point in target:
        result |= _point_neighbors(point)
    return result
