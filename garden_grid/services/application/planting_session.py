"""
Application service: planting flow for one garden.

Owns the selection and the drag gesture for a single interactive session and
turns pointer events into a crop-creation request.
"""
from datetime import date
from typing import Optional, Sequence
import logging

from garden_grid.config import settings
from garden_grid.domain.errors import DraftValidationError
from garden_grid.domain.models import Crop, Garden, GridPosition
from garden_grid.domain.requests import CreateCropRequest
from garden_grid.services.domain.display_window import DisplayWindow
from garden_grid.services.domain.drag_selection import (
    IDLE,
    DragState,
    apply_toggles,
    begin_drag,
    end_drag,
    update_drag,
)
from garden_grid.services.domain.footprint import Footprint, resolve_footprints
from garden_grid.services.domain.grid_renderer import CellView, grid_caption, render_grid
from garden_grid.services.domain.occupancy_index import OccupancyIndex

logger = logging.getLogger(__name__)


class PlantingSession:
    """
    Application service for placing a crop on a garden grid.

    Coordinates the occupancy index, footprints, display window and drag
    gesture. No business rules live here beyond form validation.
    """

    def __init__(
        self,
        garden: Garden,
        crops: Sequence[Crop] = (),
        max_display: Optional[int] = None,
    ):
        """
        Initialize the session for a garden snapshot.

        Args:
            garden: Garden being planted
            crops: Current crops (crops of other gardens are ignored)
            max_display: Display window limit (defaults to `grid_max_display`)
        """
        self.garden = garden
        self.window = DisplayWindow(
            logical_width=garden.width,
            logical_height=garden.height,
            max_display=settings.grid_max_display if max_display is None else max_display,
        )
        self.selected: list[GridPosition] = []
        self.drag_state: DragState = IDLE
        self.index: OccupancyIndex
        self.footprints: dict[int, Footprint]
        self.update_crops(crops)

    def update_crops(self, crops: Sequence[Crop]) -> None:
        """Rebuild the index and footprints after the crop list changed."""
        self.index = OccupancyIndex.for_garden(self.garden, crops)
        self.footprints = resolve_footprints(self.index.crops)
        # A cell planted in the meantime can no longer be part of the selection
        self.selected = [p for p in self.selected if not self.index.is_occupied(p.x, p.y)]

    # Pointer events

    def pointer_down(self, x: int, y: int) -> None:
        if not self.window.contains(x, y):
            logger.debug(f"Pointer-down on hidden cell ({x}, {y}) ignored")
            return
        self.drag_state = begin_drag(self.drag_state, x, y, self.index)

    def pointer_enter(self, x: int, y: int) -> None:
        if not self.window.contains(x, y):
            return
        self.drag_state = update_drag(self.drag_state, x, y, self.index)

    def pointer_up(self) -> list[GridPosition]:
        """Commit the gesture and return the cells that were toggled."""
        self.drag_state, cells = end_drag(self.drag_state)
        self.selected = apply_toggles(self.selected, cells, self.index)
        return cells

    def pointer_leave(self) -> list[GridPosition]:
        return self.pointer_up()

    def click(self, x: int, y: int) -> None:
        """Pointer-down immediately followed by pointer-up on one cell."""
        self.pointer_down(x, y)
        self.pointer_up()

    # Selection

    def is_selected(self, x: int, y: int) -> bool:
        return GridPosition(x, y) in self.selected

    def clear_selection(self) -> None:
        self.selected = []

    # Rendering

    def render(self) -> list[CellView]:
        return render_grid(
            index=self.index,
            footprints=self.footprints,
            selected=self.selected,
            window=self.window,
            drag_state=self.drag_state,
        )

    def caption(self) -> str:
        return grid_caption(self.window)

    def selection_summary(self) -> Optional[str]:
        if not self.selected:
            return None
        return f"{len(self.selected)} cell(s) selected"

    # Crop creation

    def build_crop_request(
        self,
        name: str,
        species: str,
        planting_date: Optional[date],
        harvest_date: Optional[date],
        stage: str = "Planted",
        sensor_link: Optional[str] = None,
    ) -> CreateCropRequest:
        """
        Validate the crop form and build the creation request.

        The selection is cleared once the request is built.

        Args:
            name: Crop name
            species: Crop species
            planting_date: Planting date
            harvest_date: Expected harvest date
            stage: Growth stage
            sensor_link: Optional link to sensor data

        Returns:
            CreateCropRequest for the backend

        Raises:
            DraftValidationError: If required fields or positions are missing
        """
        if not name.strip() or not species.strip() or not planting_date or not harvest_date:
            raise DraftValidationError("Please fill in all required fields")

        if not self.selected:
            raise DraftValidationError("Please select at least one grid position")

        request = CreateCropRequest(
            garden_id=self.garden.id,
            name=name.strip(),
            species=species.strip(),
            stage=stage,
            planting_date=planting_date,
            harvest_date=harvest_date,
            grid_positions=list(self.selected),
            sensor_link=(sensor_link or "").strip() or None,
        )
        logger.info(
            f"Built crop request '{request.name}' for garden {self.garden.id} "
            f"covering {len(request.grid_positions)} cells"
        )
        self.clear_selection()
        return request
