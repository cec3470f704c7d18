"""
Domain service: render model for a garden's boundary map.
"""
from dataclasses import dataclass
from typing import Optional
import numpy as np

from garden_grid.domain.boundary import Boundary
from garden_grid.utils.coordinate_transform import (
    Bounds,
    Viewport,
    default_viewport,
    to_pixels,
)


@dataclass(frozen=True)
class BoundaryView:
    """Pixel geometry of a boundary ready for a 2-D canvas."""
    vertices: np.ndarray
    ring: np.ndarray
    closed: bool
    caption: str

    @property
    def point_count(self) -> int:
        return len(self.vertices)


def render_boundary(
    boundary: Boundary,
    viewport: Optional[Viewport] = None,
    bounds: Optional[Bounds] = None,
) -> BoundaryView:
    """
    Project a boundary onto a drawing surface.

    `vertices` holds one pixel row per stored point (for the point markers),
    `ring` repeats the first vertex at the end once the boundary is closable
    (for the outline and fill). Empty and single-point boundaries render
    without raising.

    Args:
        boundary: Boundary to draw
        viewport: Surface (defaults to the configured padded canvas)
        bounds: Geographic box to fit (defaults to the boundary's own bounds)

    Returns:
        BoundaryView instance
    """
    if viewport is None:
        viewport = default_viewport()
    if bounds is None:
        bounds = boundary.bounds()

    vertices = to_pixels(boundary.points, bounds, viewport)
    ring = to_pixels(boundary.close(), bounds, viewport)
    return BoundaryView(
        vertices=vertices,
        ring=ring,
        closed=boundary.is_closable(),
        caption=f"{len(boundary)} boundary points",
    )
