"""
Shared pytest fixtures for all tests.

This module provides common fixtures including:
- Sample gardens
- Sample crops (single-cell and multi-cell)
- Sample boundaries
- Prebuilt occupancy indexes
"""
from datetime import date

import pytest

from garden_grid.domain.boundary import Boundary
from garden_grid.domain.models import Crop, Garden, GeoCoordinate
from garden_grid.services.domain.occupancy_index import OccupancyIndex


# ============================================================
# Sample Data Fixtures
# ============================================================

@pytest.fixture
def sample_garden() -> Garden:
    """A 5x5 grid-mode garden."""
    return Garden(id=1, name="Backyard Garden", width=5, height=5)


@pytest.fixture
def wide_garden() -> Garden:
    """A 50x3 garden, wider than any display window."""
    return Garden(id=2, name="Hedge Row", width=50, height=3)


@pytest.fixture
def tomato() -> Crop:
    """Single-cell crop at (0, 0)."""
    return Crop(
        id=10,
        garden_id=1,
        name="Tomato",
        species="Solanum lycopersicum",
        stage="Planted",
        planting_date=date(2024, 3, 1),
        harvest_date=date(2024, 7, 1),
        grid_positions=[(0, 0)],
    )


@pytest.fixture
def lettuce() -> Crop:
    """2x2 multi-cell crop covering (2..3, 2..3)."""
    return Crop(
        id=11,
        garden_id=1,
        name="Lettuce",
        species="Lactuca sativa",
        stage="Growing",
        planting_date=date(2024, 3, 10),
        harvest_date=date(2024, 5, 20),
        grid_positions=[(2, 2), (3, 2), (2, 3), (3, 3)],
    )


@pytest.fixture
def sample_crops(tomato, lettuce) -> list[Crop]:
    return [tomato, lettuce]


@pytest.fixture
def sample_index(sample_garden, sample_crops) -> OccupancyIndex:
    return OccupancyIndex.for_garden(sample_garden, sample_crops)


@pytest.fixture
def empty_index() -> OccupancyIndex:
    """Occupancy of an empty 5x5 grid."""
    return OccupancyIndex.build(5, 5, [])


@pytest.fixture
def square_coords() -> list[GeoCoordinate]:
    """Small square around San Francisco, SW/NW/NE/SE order."""
    return [
        GeoCoordinate(lat=37.7740, lng=-122.4200),
        GeoCoordinate(lat=37.7750, lng=-122.4200),
        GeoCoordinate(lat=37.7750, lng=-122.4190),
        GeoCoordinate(lat=37.7740, lng=-122.4190),
    ]


@pytest.fixture
def square_boundary_model(square_coords) -> Boundary:
    return Boundary(square_coords)
