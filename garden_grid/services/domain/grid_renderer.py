"""
Domain service: render model for the garden grid view.

Produces one `CellView` per displayed cell. The UI shell only has to paint
them; all occupancy, footprint, selection and preview decisions happen here.
"""
from dataclasses import dataclass
from typing import Iterable, Optional
import logging

from garden_grid.domain.models import Crop, GridPosition
from garden_grid.services.domain.display_window import DisplayWindow
from garden_grid.services.domain.drag_selection import IDLE, DragState, preview_rect
from garden_grid.services.domain.footprint import Footprint, cell_label
from garden_grid.services.domain.occupancy_index import OccupancyIndex

logger = logging.getLogger(__name__)

GROWTH_STAGES = (
    "Planted",
    "Germinating",
    "Growing",
    "Vegetative",
    "Flowering",
    "Fruiting",
    "Ready to Harvest",
)

# Stage keywords -> tint, checked in order
STAGE_TINTS = (
    (("seed", "planted"), "oklch(0.7 0.1 145)"),
    (("growing", "vegetative"), "oklch(0.65 0.15 145)"),
    (("flowering", "fruiting"), "oklch(0.6 0.18 145)"),
    (("harvest", "ready"), "oklch(0.55 0.2 145)"),
)
DEFAULT_STAGE_TINT = "oklch(0.65 0.15 145)"

EMPTY_FILL = "oklch(var(--muted))"
EMPTY_BORDER = "oklch(var(--border))"
SELECTED_FILL = "oklch(0.7 0.12 145)"
SELECTED_BORDER = "oklch(0.5 0.2 145)"
SELECTED_MARK = "✓"

SINGLE_CELL_BORDER = 2
MULTI_CELL_BORDER = 3


def stage_tint(stage: str) -> str:
    """Fill colour for a crop, from keywords in its growth stage."""
    stage_lower = stage.lower()
    for keywords, tint in STAGE_TINTS:
        if any(keyword in stage_lower for keyword in keywords):
            return tint
    return DEFAULT_STAGE_TINT


@dataclass(frozen=True)
class CellView:
    """Everything needed to paint one grid cell."""
    x: int
    y: int
    crop_id: Optional[int]
    label: str
    fill: str
    border: str
    border_width: int
    title: str
    selected: bool = False
    in_preview: bool = False
    is_anchor: bool = False

    @property
    def occupied(self) -> bool:
        return self.crop_id is not None


def _crop_cell(crop: Crop, x: int, y: int, footprint: Optional[Footprint]) -> CellView:
    tint = stage_tint(crop.stage)
    anchor = footprint is not None and footprint.anchor == (x, y)
    title = f"{crop.name} ({crop.stage})"
    if crop.is_multi_cell:
        title += f" - {len(crop.grid_positions)} cells"
    return CellView(
        x=x,
        y=y,
        crop_id=crop.id,
        label=cell_label(crop, anchor),
        fill=tint,
        border=tint,
        border_width=MULTI_CELL_BORDER if crop.is_multi_cell else SINGLE_CELL_BORDER,
        title=title,
        is_anchor=anchor,
    )


def render_grid(
    index: OccupancyIndex,
    footprints: dict[int, Footprint],
    selected: Iterable[GridPosition],
    window: DisplayWindow,
    drag_state: DragState = IDLE,
) -> list[CellView]:
    """
    Build the render model for the displayed part of a garden.

    Args:
        index: Occupancy of the garden
        footprints: Multi-cell footprints keyed by crop id
        selected: Cells currently selected for planting
        window: Display window of the garden
        drag_state: Gesture in progress, for the preview highlight

    Returns:
        CellView list in row-major order, display window only
    """
    selected_set = {GridPosition(*p) for p in selected}
    preview = preview_rect(drag_state)
    views = []

    for position in window.cells():
        x, y = position
        crop = index.at(x, y)
        if crop is not None:
            views.append(_crop_cell(crop, x, y, footprints.get(crop.id)))
            continue

        is_selected = position in selected_set
        in_preview = preview is not None and preview.contains(x, y)
        highlighted = is_selected or in_preview
        views.append(CellView(
            x=x,
            y=y,
            crop_id=None,
            label=SELECTED_MARK if is_selected else "",
            fill=SELECTED_FILL if highlighted else EMPTY_FILL,
            border=SELECTED_BORDER if highlighted else EMPTY_BORDER,
            border_width=SINGLE_CELL_BORDER,
            title=f"Empty cell ({x}, {y})",
            selected=is_selected,
            in_preview=in_preview,
        ))

    logger.debug(
        f"Rendered {len(views)} cells ({window.display_width}x{window.display_height} window)"
    )
    return views


def grid_caption(window: DisplayWindow) -> str:
    """Caption under the grid, e.g. 'Grid: 50×3 meters (showing 20×3)'."""
    caption = f"Grid: {window.logical_width}×{window.logical_height} meters"
    if window.is_clamped:
        caption += f" (showing {window.display_width}×{window.display_height})"
    return caption
