"""
Application service: garden creation flow.

Map mode lets the grower click a boundary onto a fixed drawing canvas; grid
mode generates a rectangular boundary from typed dimensions. Either way the
session ends with a `CreateGardenRequest`.
"""
from enum import Enum
from typing import Optional, Union
import logging

from garden_grid.config import settings
from garden_grid.domain.boundary import Boundary, square_boundary
from garden_grid.domain.errors import DraftValidationError
from garden_grid.domain.models import GardenType, GeoCoordinate
from garden_grid.domain.requests import CreateGardenRequest
from garden_grid.services.domain.map_renderer import BoundaryView, render_boundary
from garden_grid.utils.coordinate_transform import (
    PixelPoint,
    default_viewport,
    drawing_bounds,
    to_coordinate,
)

logger = logging.getLogger(__name__)


class DrawingMode(str, Enum):
    MAP = "map"
    GRID = "grid"


def _parse_dimension(value: Union[int, str]) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class GardenDrawingSession:
    """
    Draft of a new garden.

    Dimension fields accept raw form input (strings) and are only parsed on
    submit, so half-typed values never raise while drawing.
    """

    def __init__(self, center: Optional[GeoCoordinate] = None):
        if center is None:
            center = GeoCoordinate(lat=settings.default_center_lat, lng=settings.default_center_lng)
        self.center = center
        self.bounds = drawing_bounds(center)
        # The drawing canvas maps edge to edge, no padding
        self.viewport = default_viewport(padding=0)
        self.boundary = Boundary()
        self._reset_form()

    def _reset_form(self) -> None:
        self.name = ""
        self.mode = DrawingMode.GRID
        self.map_grid_size: Union[int, str] = settings.default_map_grid_size
        self.grid_width: Union[int, str] = settings.default_grid_width
        self.grid_height: Union[int, str] = settings.default_grid_height
        self.boundary.clear()

    # Canvas

    def click(self, x: float, y: float) -> GeoCoordinate:
        """Append the coordinate under a canvas click and return it."""
        point = to_coordinate(PixelPoint(x, y), self.bounds, self.viewport)
        self.boundary.append(point)
        logger.debug(f"Boundary point {len(self.boundary)} at ({point.lat:.6f}, {point.lng:.6f})")
        return point

    def remove_last(self) -> Optional[GeoCoordinate]:
        return self.boundary.undo_last()

    def clear_drawing(self) -> None:
        self.boundary.clear()

    def render(self) -> BoundaryView:
        return render_boundary(self.boundary, viewport=self.viewport, bounds=self.bounds)

    def status(self) -> str:
        if not self.boundary:
            return "Click on the canvas to draw your garden boundary"
        return f"{len(self.boundary)} points drawn"

    # Submission

    def can_submit(self) -> bool:
        return self.mode != DrawingMode.MAP or self.boundary.is_closable()

    def _check_dimension(self, value: Union[int, str], message: str) -> int:
        parsed = _parse_dimension(value)
        if parsed is None or not (
            settings.min_grid_dimension <= parsed <= settings.max_grid_dimension
        ):
            raise DraftValidationError(message)
        return parsed

    def submit(self) -> CreateGardenRequest:
        """
        Validate the draft and build the garden-creation request.

        The draft is reset afterwards.

        Returns:
            CreateGardenRequest for the backend

        Raises:
            DraftValidationError: With the message to show the grower
        """
        if not self.name.strip():
            raise DraftValidationError("Please enter a garden name")

        low, high = settings.min_grid_dimension, settings.max_grid_dimension
        if self.mode == DrawingMode.MAP:
            if not self.boundary.is_closable():
                raise DraftValidationError(
                    "Please draw at least 3 points to create a garden boundary"
                )
            size = self._check_dimension(
                self.map_grid_size, f"Grid size must be between {low} and {high}"
            )
            boundary = self.boundary.points
            width = height = size
            garden_type = GardenType.MAP_BASED
        else:
            width = self._check_dimension(
                self.grid_width, f"Width must be between {low} and {high} meters"
            )
            height = self._check_dimension(
                self.grid_height, f"Height must be between {low} and {high} meters"
            )
            boundary = square_boundary(width, height, center=self.center).points
            garden_type = GardenType.GRID_BASED

        request = CreateGardenRequest(
            name=self.name.strip(),
            boundary=boundary,
            width=width,
            height=height,
            grid_size=width * height,
            garden_type=garden_type,
        )
        logger.info(
            f"Built garden request '{request.name}' ({garden_type.value}, "
            f"{width}x{height}, {len(boundary)} boundary points)"
        )
        self._reset_form()
        return request

    def cancel(self) -> None:
        self._reset_form()
