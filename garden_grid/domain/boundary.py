"""
Boundary model: the ordered outline a grower draws around a garden.
"""
from typing import Iterable, Iterator, List, Optional
import numpy as np
import shapely

from garden_grid.config import settings
from garden_grid.domain.models import GeoCoordinate
from garden_grid.utils.coordinate_transform import Bounds, bounds_of
from garden_grid.utils.spatial_helpers import (
    boundary_cell_mask,
    boundary_polygon,
    polygon_area_m2,
)

MIN_POLYGON_POINTS = 3


class Boundary:
    """
    Ordered polygon of geographic points.

    Points are only ever appended or removed from the end, so insertion
    order (the polygon winding) is preserved. Closing the ring is a
    rendering concern and never adds a point.
    """

    def __init__(self, points: Optional[Iterable[GeoCoordinate]] = None):
        self._points: List[GeoCoordinate] = list(points or [])

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[GeoCoordinate]:
        return iter(self._points)

    def __getitem__(self, index: int) -> GeoCoordinate:
        return self._points[index]

    def __repr__(self) -> str:
        return f"Boundary({len(self._points)} points)"

    @property
    def points(self) -> List[GeoCoordinate]:
        """Copy of the stored points."""
        return list(self._points)

    def append(self, point: GeoCoordinate) -> None:
        self._points.append(point)

    def undo_last(self) -> Optional[GeoCoordinate]:
        """Remove and return the last point; no-op on an empty boundary."""
        if not self._points:
            return None
        return self._points.pop()

    def clear(self) -> None:
        self._points.clear()

    def is_closable(self) -> bool:
        return len(self._points) >= MIN_POLYGON_POINTS

    def close(self) -> List[GeoCoordinate]:
        """
        Return the ring for rendering: the points followed by the first point.

        An open boundary is returned as-is, since it cannot be closed.
        """
        if not self.is_closable():
            return list(self._points)
        return self._points + [self._points[0]]

    def bounds(self) -> Bounds:
        return bounds_of(self._points)

    def to_polygon(self):
        return boundary_polygon(self._points)

    def contains(self, coord: GeoCoordinate) -> bool:
        """Whether a coordinate falls inside the closed boundary."""
        if not self.is_closable():
            return False
        return bool(shapely.contains_xy(self.to_polygon(), coord.lng, coord.lat))

    def area_m2(self) -> float:
        return polygon_area_m2(self._points)

    def cell_mask(self, width: int, height: int) -> np.ndarray:
        """Which cells of a width x height grid lie inside the boundary."""
        return boundary_cell_mask(self._points, width, height)


def square_boundary(
    width: int,
    height: int,
    center: Optional[GeoCoordinate] = None,
    unit: Optional[float] = None,
) -> Boundary:
    """
    Rectangular boundary for a grid-mode garden.

    Args:
        width: Garden width in meters
        height: Garden height in meters
        center: Rectangle centre (defaults to the configured centre)
        unit: Degrees per meter (defaults to `square_boundary_unit`)

    Returns:
        Boundary with corners in SW, NW, NE, SE order
    """
    if center is None:
        center = GeoCoordinate(lat=settings.default_center_lat, lng=settings.default_center_lng)
    if unit is None:
        unit = settings.square_boundary_unit

    half_width = (width / 2) * unit
    half_height = (height / 2) * unit
    return Boundary([
        GeoCoordinate(lat=center.lat - half_height, lng=center.lng - half_width),
        GeoCoordinate(lat=center.lat + half_height, lng=center.lng - half_width),
        GeoCoordinate(lat=center.lat + half_height, lng=center.lng + half_width),
        GeoCoordinate(lat=center.lat - half_height, lng=center.lng + half_width),
    ])
