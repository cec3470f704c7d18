"""
Domain service: rectangular drag selection over a garden grid.

The gesture is an explicit two-state machine:

    Idle --pointer-down on empty cell--> Dragging
    Dragging --pointer-enter--> Dragging (current moves, anchor stays)
    Dragging --pointer-up / pointer-leave--> Idle (rectangle committed)

Transitions are pure functions returning the next state. Committing a drag
yields the cells of the axis-aligned rectangle spanned by anchor and current;
the caller toggles each of them against its own selection.
"""
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Union
import logging

from garden_grid.domain.errors import GridPositionOutOfRange
from garden_grid.domain.models import GridPosition
from garden_grid.services.domain.occupancy_index import OccupancyIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    """No gesture in progress."""

    @property
    def active(self) -> bool:
        return False


@dataclass(frozen=True)
class Dragging:
    """Pointer held down; `anchor` is where the drag started."""
    anchor: GridPosition
    current: GridPosition

    @property
    def active(self) -> bool:
        return True


DragState = Union[Idle, Dragging]

IDLE = Idle()


@dataclass(frozen=True)
class SelectionRect:
    """Inclusive rectangle of grid cells."""
    min_x: int
    max_x: int
    min_y: int
    max_y: int

    @classmethod
    def spanning(cls, a: GridPosition, b: GridPosition) -> "SelectionRect":
        return cls(
            min_x=min(a.x, b.x),
            max_x=max(a.x, b.x),
            min_y=min(a.y, b.y),
            max_y=max(a.y, b.y),
        )

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def cells(self) -> Iterator[GridPosition]:
        """Cells in row-major order."""
        for y in range(self.min_y, self.max_y + 1):
            for x in range(self.min_x, self.max_x + 1):
                yield GridPosition(x, y)

    def __len__(self) -> int:
        return (self.max_x - self.min_x + 1) * (self.max_y - self.min_y + 1)


def _position(index: OccupancyIndex, x: int, y: int) -> GridPosition:
    if not (0 <= x < index.width and 0 <= y < index.height):
        raise GridPositionOutOfRange(x, y, index.width, index.height)
    return GridPosition(x, y)


def begin_drag(state: DragState, x: int, y: int, index: OccupancyIndex) -> DragState:
    """
    Pointer-down on (x, y).

    Starts a drag only from Idle and only on an unoccupied cell; otherwise
    the state is returned unchanged.

    Args:
        state: Current gesture state
        x: Cell column
        y: Cell row
        index: Occupancy of the garden being planted

    Returns:
        Next gesture state
    """
    position = _position(index, x, y)
    if state.active:
        return state
    if index.is_occupied(x, y):
        logger.debug(f"Pointer-down on occupied cell ({x}, {y}) ignored")
        return state
    logger.debug(f"Drag started at ({x}, {y})")
    return Dragging(anchor=position, current=position)


def update_drag(state: DragState, x: int, y: int, index: OccupancyIndex) -> DragState:
    """Pointer-enter on (x, y): move `current`, keep `anchor`. No-op while Idle."""
    position = _position(index, x, y)
    if not isinstance(state, Dragging):
        return state
    return Dragging(anchor=state.anchor, current=position)


def end_drag(state: DragState) -> tuple[Idle, list[GridPosition]]:
    """
    Pointer-up or pointer-leave: finish the gesture.

    Leaving the grid mid-drag counts as a release at the last cell entered,
    so a drag can never be left open.

    Returns:
        Tuple of (Idle state, cells to toggle in row-major order). The cell
        list is empty when no drag was in progress.
    """
    if not isinstance(state, Dragging):
        return IDLE, []
    rect = SelectionRect.spanning(state.anchor, state.current)
    cells = list(rect.cells())
    logger.debug(f"Drag committed {state.anchor} -> {state.current}: {len(cells)} cells")
    return IDLE, cells


def preview_rect(state: DragState) -> Optional[SelectionRect]:
    """Rectangle to highlight while dragging, or None when Idle."""
    if not isinstance(state, Dragging):
        return None
    return SelectionRect.spanning(state.anchor, state.current)


def apply_toggles(
    selected: Sequence[GridPosition],
    cells: Iterable[GridPosition],
    index: OccupancyIndex,
) -> list[GridPosition]:
    """
    Toggle each cell independently against a selection.

    Cells already selected are removed, the rest are appended, so dragging
    over a mix of selected and unselected cells merges rather than
    overwrites. Occupied cells are skipped.

    Args:
        selected: Current selection, in selection order
        cells: Cells to toggle
        index: Occupancy of the garden, for range checks and to skip planted cells

    Returns:
        New selection list; the input is not modified

    Raises:
        GridPositionOutOfRange: If a cell lies outside the grid
    """
    # dict keeps selection order with O(1) membership
    result = dict.fromkeys(GridPosition(*p) for p in selected)
    for cell in cells:
        cell = _position(index, *cell)
        if index.is_occupied(cell.x, cell.y):
            continue
        if cell in result:
            del result[cell]
        else:
            result[cell] = None
    return list(result)
