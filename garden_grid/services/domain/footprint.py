"""
Domain service: multi-cell crop footprints.

A footprint is the minimal axis-aligned rectangle covering a crop's cells.
Disjoint or L-shaped placements still get a plain bounding box, which may
cover empty cells or cells of other crops.
"""
from dataclasses import dataclass
from typing import Sequence
import logging

from garden_grid.domain.models import Crop
from garden_grid.utils.spatial_helpers import bounding_rect

logger = logging.getLogger(__name__)

LABEL_LENGTH = 2


@dataclass(frozen=True)
class Footprint:
    """Inclusive bounding rectangle of a crop's grid positions."""
    min_x: int
    max_x: int
    min_y: int
    max_y: int

    @property
    def anchor(self) -> tuple[int, int]:
        return (self.min_x, self.min_y)

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


def compute_footprint(crop: Crop) -> Footprint:
    min_x, max_x, min_y, max_y = bounding_rect(crop.grid_positions)
    return Footprint(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)


def is_anchor(crop: Crop, x: int, y: int) -> bool:
    """True iff (x, y) is the top-left cell of the crop's footprint."""
    return compute_footprint(crop).anchor == (x, y)


def resolve_footprints(crops: Sequence[Crop]) -> dict[int, Footprint]:
    """
    Footprints keyed by crop id, for multi-cell crops only.

    Single-cell crops render directly and are left out.
    """
    footprints = {
        crop.id: compute_footprint(crop)
        for crop in crops
        if crop.is_multi_cell
    }
    logger.debug(f"Resolved {len(footprints)} multi-cell footprints from {len(crops)} crops")
    return footprints


def cell_label(crop: Crop, anchor: bool) -> str:
    """
    Text drawn inside a crop cell.

    Single-cell crops show their initial. In a multi-cell footprint the
    anchor shows the first two letters upper-cased and every other cell
    stays blank.
    """
    if not crop.is_multi_cell:
        return crop.name[:1]
    if anchor:
        return crop.name[:LABEL_LENGTH].upper()
    return ""
