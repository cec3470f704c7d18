"""
Domain service: display windowing.

Large grids are clamped to a bounded top-left subgrid for rendering. The
clamp is display-only: crop placement and grid coordinates are unaffected.
"""
from dataclasses import dataclass
from typing import Iterator, Optional

from garden_grid.domain.models import GridPosition


def window_dimensions(logical_width: int, logical_height: int, max_display: int) -> tuple[int, int]:
    """
    Clamp grid dimensions to the display limit.

    Args:
        logical_width: Garden width in cells
        logical_height: Garden height in cells
        max_display: Maximum cells rendered per axis

    Returns:
        Tuple of (display_width, display_height)
    """
    if max_display < 1:
        raise ValueError(f"max_display must be at least 1, got {max_display}")
    return (min(logical_width, max_display), min(logical_height, max_display))


@dataclass(frozen=True)
class DisplayWindow:
    """Top-left subgrid of a garden that is actually rendered."""
    logical_width: int
    logical_height: int
    max_display: int

    def __post_init__(self):
        if self.max_display < 1:
            raise ValueError(f"max_display must be at least 1, got {self.max_display}")

    @property
    def dimensions(self) -> tuple[int, int]:
        return window_dimensions(self.logical_width, self.logical_height, self.max_display)

    @property
    def display_width(self) -> int:
        return self.dimensions[0]

    @property
    def display_height(self) -> int:
        return self.dimensions[1]

    @property
    def is_clamped(self) -> bool:
        return self.dimensions != (self.logical_width, self.logical_height)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.display_width and 0 <= y < self.display_height

    def cells(self) -> Iterator[GridPosition]:
        """Displayed cells in row-major order."""
        for y in range(self.display_height):
            for x in range(self.display_width):
                yield GridPosition(x, y)

    def indicator(self) -> Optional[str]:
        """'showing N×M of W×H' when the grid was clamped, else None."""
        if not self.is_clamped:
            return None
        return (
            f"showing {self.display_width}×{self.display_height} "
            f"of {self.logical_width}×{self.logical_height}"
        )
