"""
Geospatial projection utilities for garden boundaries.
"""
from typing import List, Sequence, Tuple
from pyproj import Transformer

from garden_grid.domain.models import GeoCoordinate


def get_utm_zone(longitude: float) -> int:
    """
    Calculate the UTM zone number from longitude.

    Args:
        longitude: Longitude in degrees

    Returns:
        UTM zone number (1-60)
    """
    # 180 degrees east belongs to zone 60, not a 61st zone
    return min(int((longitude + 180) / 6) + 1, 60)


def get_utm_crs(longitude: float, latitude: float) -> str:
    """
    Get the appropriate UTM CRS (Coordinate Reference System) for a location.

    Args:
        longitude: Longitude in degrees
        latitude: Latitude in degrees

    Returns:
        EPSG code for the UTM zone
    """
    zone = get_utm_zone(longitude)
    # Northern hemisphere: EPSG:326XX, Southern hemisphere: EPSG:327XX
    hemisphere = "6" if latitude >= 0 else "7"
    return f"EPSG:32{hemisphere}{zone:02d}"


def project_to_meters(
    coordinates: Sequence[GeoCoordinate],
) -> List[Tuple[float, float]]:
    """
    Project boundary coordinates to a planar coordinate system (UTM) in meters.

    The UTM zone is chosen from the first coordinate so the whole boundary
    shares one planar frame.

    Args:
        coordinates: Boundary points in degrees

    Returns:
        List of (x, y) coordinates in meters
    """
    if not coordinates:
        raise ValueError("Coordinates list cannot be empty")

    first = coordinates[0]
    utm_crs = get_utm_crs(first.lng, first.lat)

    transformer = Transformer.from_crs(
        "EPSG:4326",  # WGS84 (lat/lon)
        utm_crs,
        always_xy=True  # Ensure (lon, lat) -> (x, y) order
    )

    projected = []
    for coord in coordinates:
        x, y = transformer.transform(coord.lng, coord.lat)
        projected.append((x, y))

    return projected
