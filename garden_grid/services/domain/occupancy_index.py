"""
Domain service: grid occupancy index.

Maps every cell of a garden's width x height grid to the crop planted there.
The index is a flat integer array indexed by `y * width + x` holding the
position of the owning crop in the crop list (-1 for an empty cell).
"""
from typing import Optional, Sequence
import logging
import numpy as np

from garden_grid.domain.errors import GridPositionOutOfRange
from garden_grid.domain.models import Crop, Garden

logger = logging.getLogger(__name__)

EMPTY = -1


class OccupancyIndex:
    """
    Read-only cell -> crop lookup, rebuilt from scratch on every crop-list change.

    When two crops claim the same cell the crop that comes later in the list
    wins. Cells outside the grid are skipped rather than wrapped.
    """

    def __init__(self, width: int, height: int, slots: np.ndarray, crops: Sequence[Crop]):
        self.width = width
        self.height = height
        self._slots = slots
        self._crops = list(crops)

    @classmethod
    def build(cls, width: int, height: int, crops: Sequence[Crop]) -> "OccupancyIndex":
        """
        Build the index from each crop's grid positions.

        Runs in O(width * height) for the allocation plus O(total occupied
        cells) for the inserts.

        Args:
            width: Grid columns
            height: Grid rows
            crops: Crops of one garden

        Returns:
            OccupancyIndex instance
        """
        slots = np.full(width * height, EMPTY, dtype=np.int32)
        overwritten = 0
        skipped = 0

        for slot, crop in enumerate(crops):
            for x, y in crop.grid_positions:
                if not (0 <= x < width and 0 <= y < height):
                    skipped += 1
                    logger.warning(
                        f"Crop {crop.id} claims cell ({x}, {y}) outside "
                        f"{width}x{height} grid, skipping"
                    )
                    continue
                key = y * width + x
                if slots[key] != EMPTY:
                    overwritten += 1
                slots[key] = slot

        logger.debug(
            f"Built occupancy index: {int(np.count_nonzero(slots != EMPTY))} occupied cells "
            f"from {len(crops)} crops (overwritten={overwritten}, skipped={skipped})"
        )
        return cls(width, height, slots, crops)

    @classmethod
    def for_garden(cls, garden: Garden, crops: Sequence[Crop]) -> "OccupancyIndex":
        """Build the index for a garden, ignoring crops that belong elsewhere."""
        own_crops = [crop for crop in crops if crop.garden_id == garden.id]
        return cls.build(garden.width, garden.height, own_crops)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise GridPositionOutOfRange(x, y, self.width, self.height)

    def at(self, x: int, y: int) -> Optional[Crop]:
        """Return the crop occupying (x, y), or None for an empty cell."""
        self._check(x, y)
        slot = self._slots[y * self.width + x]
        if slot == EMPTY:
            return None
        return self._crops[slot]

    def is_occupied(self, x: int, y: int) -> bool:
        self._check(x, y)
        return bool(self._slots[y * self.width + x] != EMPTY)

    @property
    def crops(self) -> list[Crop]:
        return list(self._crops)

    @property
    def occupied_count(self) -> int:
        return int(np.count_nonzero(self._slots != EMPTY))

    def as_grid(self) -> np.ndarray:
        """Crop slots as a (height, width) array; -1 marks empty cells."""
        return self._slots.reshape(self.height, self.width).copy()
