"""
Unit tests for multi-cell crop footprints.
"""
import pytest

from garden_grid.domain.models import Crop
from garden_grid.services.domain.footprint import (
    Footprint,
    cell_label,
    compute_footprint,
    is_anchor,
    resolve_footprints,
)


def make_crop(positions, name: str = "Pumpkin", crop_id: int = 1) -> Crop:
    return Crop(id=crop_id, garden_id=1, name=name, grid_positions=positions)


# ============================================================
# Footprint Tests
# ============================================================

class TestComputeFootprint:
    """Tests for bounding rectangles."""

    def test_rectangle(self, lettuce):
        assert compute_footprint(lettuce) == Footprint(min_x=2, max_x=3, min_y=2, max_y=3)

    def test_contains_every_position(self):
        """Every position lies inside the footprint."""
        crop = make_crop([(4, 1), (1, 3), (2, 2), (3, 0)])
        footprint = compute_footprint(crop)

        for x, y in crop.grid_positions:
            assert footprint.contains(x, y)

    def test_disjoint_positions_bounded_as_is(self):
        """Non-contiguous placements get the plain bounding box."""
        crop = make_crop([(0, 0), (4, 3)])
        footprint = compute_footprint(crop)

        assert (footprint.width, footprint.height) == (5, 4)
        assert footprint.contains(2, 2)

    def test_resolve_skips_single_cell_crops(self, sample_crops, lettuce):
        footprints = resolve_footprints(sample_crops)

        assert list(footprints) == [lettuce.id]


# ============================================================
# Anchor Tests
# ============================================================

class TestAnchor:
    """Tests for anchor cells and labels."""

    def test_anchor_is_top_left(self, lettuce):
        assert is_anchor(lettuce, 2, 2)
        assert not is_anchor(lettuce, 3, 3)

    @pytest.mark.parametrize("positions", [
        [(2, 2), (3, 2), (2, 3), (3, 3)],
        [(0, 0), (1, 0), (2, 0)],
        [(5, 1), (5, 2)],
        [(3, 3), (1, 1), (1, 3), (3, 1), (2, 2), (1, 2), (2, 1), (3, 2), (2, 3)],
    ])
    def test_exactly_one_anchor(self, positions):
        """Exactly one occupied cell is the anchor for rectangular placements."""
        crop = make_crop(positions)

        anchors = [p for p in crop.grid_positions if is_anchor(crop, *p)]

        assert len(anchors) == 1

    def test_l_shape_anchor_may_be_empty_cell(self):
        """The anchor of an L-shape can fall outside the crop's own cells."""
        crop = make_crop([(1, 0), (0, 1), (1, 1)])

        assert compute_footprint(crop).anchor == (0, 0)
        assert not any(is_anchor(crop, *p) for p in crop.grid_positions)

    def test_anchor_label(self, lettuce):
        assert cell_label(lettuce, anchor=True) == "LE"

    def test_non_anchor_label_blank(self, lettuce):
        assert cell_label(lettuce, anchor=False) == ""

    def test_single_cell_label(self, tomato):
        assert cell_label(tomato, anchor=False) == "T"
