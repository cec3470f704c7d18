"""
Spatial analysis helper functions.

Provides utilities for:
- Polygon construction and area from garden boundaries
- Rasterising a boundary onto a garden grid
- Bounding rectangles of integer cell sets
"""
from typing import Sequence
import numpy as np
import shapely
from shapely.geometry import Polygon
import logging

from garden_grid.domain.models import GeoCoordinate
from garden_grid.utils.geo_projection import project_to_meters

logger = logging.getLogger(__name__)


def boundary_polygon(coordinates: Sequence[GeoCoordinate]) -> Polygon:
    """
    Build a polygon from boundary coordinates in (lng, lat) axis order.

    Args:
        coordinates: At least 3 boundary points, in winding order

    Returns:
        Shapely Polygon (closed implicitly)
    """
    if len(coordinates) < 3:
        raise ValueError(
            f"A polygon needs at least 3 points, got {len(coordinates)}"
        )
    return Polygon([(c.lng, c.lat) for c in coordinates])


def polygon_area_m2(coordinates: Sequence[GeoCoordinate]) -> float:
    """
    Calculate the ground area enclosed by a boundary.

    Coordinates are projected to UTM first so the area is in square meters.
    Open boundaries (fewer than 3 points) enclose nothing.

    Args:
        coordinates: Boundary points in degrees

    Returns:
        Area in square meters
    """
    if len(coordinates) < 3:
        return 0.0

    projected = project_to_meters(coordinates)
    polygon = Polygon(projected)
    if not polygon.is_valid:
        # Self-intersecting drawings: measure the repaired shape
        logger.debug("Boundary polygon is self-intersecting, repairing before area")
        polygon = shapely.make_valid(polygon)
    return float(polygon.area)


def boundary_cell_mask(
    coordinates: Sequence[GeoCoordinate],
    width: int,
    height: int,
) -> np.ndarray:
    """
    Rasterise a boundary onto a width x height grid.

    The grid is stretched over the boundary's bounding box, row 0 at the
    north edge. A cell is inside when its centre lies inside the polygon.
    An open boundary (fewer than 3 points) does not constrain the grid.

    Args:
        coordinates: Boundary points in degrees
        width: Grid columns
        height: Grid rows

    Returns:
        Boolean array of shape (height, width)
    """
    if len(coordinates) < 3:
        return np.ones((height, width), dtype=bool)

    polygon = boundary_polygon(coordinates)
    min_lng, min_lat, max_lng, max_lat = polygon.bounds

    col_centres = min_lng + (np.arange(width) + 0.5) / width * (max_lng - min_lng)
    row_centres = max_lat - (np.arange(height) + 0.5) / height * (max_lat - min_lat)
    lngs, lats = np.meshgrid(col_centres, row_centres)

    mask = shapely.contains_xy(polygon, lngs, lats)
    logger.debug(f"Boundary mask: {int(mask.sum())}/{width * height} cells inside")
    return mask


def bounding_rect(
    positions: Sequence[tuple[int, int]]
) -> tuple[int, int, int, int]:
    """
    Axis-aligned bounding rectangle of a set of grid cells.

    Args:
        positions: Non-empty list of (x, y) cells

    Returns:
        Tuple of (min_x, max_x, min_y, max_y), inclusive
    """
    if len(positions) == 0:
        raise ValueError("Cannot bound an empty set of positions")

    cells = np.asarray(positions, dtype=int)
    min_x, min_y = cells.min(axis=0)
    max_x, max_y = cells.max(axis=0)
    return (int(min_x), int(max_x), int(min_y), int(max_y))
