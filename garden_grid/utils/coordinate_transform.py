"""
Coordinate transforms between geographic coordinates and drawing-surface pixels.

Longitude maps linearly onto the horizontal axis. Latitude maps linearly onto
the vertical axis, inverted so that north is at the top (smaller y).
"""
from dataclasses import dataclass
from typing import NamedTuple, Optional, Sequence
import numpy as np

from garden_grid.config import settings
from garden_grid.domain.models import GeoCoordinate


class PixelPoint(NamedTuple):
    """Position on the drawing surface in pixels."""
    x: float
    y: float


@dataclass(frozen=True)
class Bounds:
    """Geographic bounding box in degrees."""
    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    def lat_range(self, min_range: Optional[float] = None) -> float:
        return _effective_range(self.max_lat - self.min_lat, min_range)

    def lng_range(self, min_range: Optional[float] = None) -> float:
        return _effective_range(self.max_lng - self.min_lng, min_range)


@dataclass(frozen=True)
class Viewport:
    """Drawing surface size and the padding inset on every side."""
    width: float
    height: float
    padding: float = 0.0

    def __post_init__(self):
        if self.usable_width <= 0 or self.usable_height <= 0:
            raise ValueError(
                f"Padding {self.padding} leaves no drawable area in "
                f"{self.width}x{self.height} viewport"
            )

    @property
    def usable_width(self) -> float:
        return self.width - self.padding * 2

    @property
    def usable_height(self) -> float:
        return self.height - self.padding * 2


def _effective_range(span: float, min_range: Optional[float]) -> float:
    # Zero extent (single point, or a straight N-S / E-W line) gets a floor
    if span == 0:
        return settings.min_coordinate_range if min_range is None else min_range
    return span


def bounds_of(
    coordinates: Sequence[GeoCoordinate],
    center: Optional[GeoCoordinate] = None,
) -> Bounds:
    """
    Compute the bounding box of a list of coordinates.

    An empty list yields a box of `drawing_scale` degrees around the centre,
    so callers can always render.

    Args:
        coordinates: Boundary points
        center: Fallback centre for an empty list (defaults to configured centre)

    Returns:
        Bounds instance
    """
    if not coordinates:
        if center is None:
            center = GeoCoordinate(
                lat=settings.default_center_lat,
                lng=settings.default_center_lng,
            )
        return drawing_bounds(center)

    lats = [c.lat for c in coordinates]
    lngs = [c.lng for c in coordinates]
    return Bounds(
        min_lat=min(lats),
        max_lat=max(lats),
        min_lng=min(lngs),
        max_lng=max(lngs),
    )


def drawing_bounds(center: Optional[GeoCoordinate] = None, scale: Optional[float] = None) -> Bounds:
    """
    Bounds of the fixed boundary-drawing canvas: centre +/- scale degrees.

    Args:
        center: Canvas centre (defaults to configured centre)
        scale: Half-extent in degrees (defaults to `drawing_scale`)

    Returns:
        Bounds instance
    """
    if center is None:
        center = GeoCoordinate(
            lat=settings.default_center_lat,
            lng=settings.default_center_lng,
        )
    if scale is None:
        scale = settings.drawing_scale
    return Bounds(
        min_lat=center.lat - scale,
        max_lat=center.lat + scale,
        min_lng=center.lng - scale,
        max_lng=center.lng + scale,
    )


def default_viewport(padding: Optional[float] = None) -> Viewport:
    """Viewport with the configured canvas size (and padding, unless overridden)."""
    return Viewport(
        width=settings.canvas_width,
        height=settings.canvas_height,
        padding=settings.canvas_padding if padding is None else padding,
    )


def to_pixel(
    coord: GeoCoordinate,
    bounds: Bounds,
    viewport: Viewport,
    min_range: Optional[float] = None,
) -> PixelPoint:
    """
    Convert a geographic coordinate to a drawing-surface position.

    Args:
        coord: Coordinate to convert
        bounds: Geographic box mapped onto the drawable area
        viewport: Surface size and padding
        min_range: Override for the degenerate-range floor

    Returns:
        PixelPoint with x to the right and y downwards
    """
    lat_range = bounds.lat_range(min_range)
    lng_range = bounds.lng_range(min_range)

    x = viewport.padding + ((coord.lng - bounds.min_lng) / lng_range) * viewport.usable_width
    y = viewport.padding + ((bounds.max_lat - coord.lat) / lat_range) * viewport.usable_height
    return PixelPoint(x, y)


def to_coordinate(
    pixel: PixelPoint,
    bounds: Bounds,
    viewport: Viewport,
    min_range: Optional[float] = None,
) -> GeoCoordinate:
    """
    Convert a drawing-surface position back to a geographic coordinate.

    Inverse of `to_pixel` for the same bounds and viewport.

    Args:
        pixel: (x, y) surface position
        bounds: Geographic box mapped onto the drawable area
        viewport: Surface size and padding
        min_range: Override for the degenerate-range floor

    Returns:
        GeoCoordinate instance
    """
    px, py = pixel
    lat_range = bounds.lat_range(min_range)
    lng_range = bounds.lng_range(min_range)

    lng = bounds.min_lng + ((px - viewport.padding) / viewport.usable_width) * lng_range
    lat = bounds.max_lat - ((py - viewport.padding) / viewport.usable_height) * lat_range
    return GeoCoordinate(lat=lat, lng=lng)


def to_pixels(
    coordinates: Sequence[GeoCoordinate],
    bounds: Bounds,
    viewport: Viewport,
    min_range: Optional[float] = None,
) -> np.ndarray:
    """
    Vectorised `to_pixel` for a whole boundary.

    Args:
        coordinates: Points to convert
        bounds: Geographic box mapped onto the drawable area
        viewport: Surface size and padding
        min_range: Override for the degenerate-range floor

    Returns:
        Array of shape (n, 2) with pixel x, y columns
    """
    if not coordinates:
        return np.empty((0, 2))

    lats = np.array([c.lat for c in coordinates], dtype=float)
    lngs = np.array([c.lng for c in coordinates], dtype=float)

    xs = viewport.padding + ((lngs - bounds.min_lng) / bounds.lng_range(min_range)) * viewport.usable_width
    ys = viewport.padding + ((bounds.max_lat - lats) / bounds.lat_range(min_range)) * viewport.usable_height
    return np.column_stack((xs, ys))
