"""
Request models handed to the marketplace backend.

The grid core never sends these anywhere; it only builds them for the
caller's garden-creation and crop-creation flows.
"""
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field

from garden_grid.domain.models import GardenType, GeoCoordinate, GridPosition


class CreateGardenRequest(BaseModel):
    """Garden-creation payload built by the boundary drawing flow."""
    name: str
    boundary: List[GeoCoordinate] = Field(
        description="Ordered boundary points; the ring is closed at render time"
    )
    width: int = Field(ge=1, le=100)
    height: int = Field(ge=1, le=100)
    grid_size: int = Field(alias="gridSize")
    garden_type: GardenType = Field(alias="gardenType")

    class Config:
        populate_by_name = True


class CreateCropRequest(BaseModel):
    """Crop-creation payload built by the planting flow."""
    garden_id: int = Field(alias="gardenId")
    name: str
    species: str
    stage: str
    planting_date: date = Field(alias="plantingDate")
    harvest_date: date = Field(alias="harvestDate")
    grid_positions: List[GridPosition] = Field(
        alias="gridPositions",
        description="Selected cells in selection order",
    )
    sensor_link: Optional[str] = Field(default=None, alias="sensorLink")

    class Config:
        populate_by_name = True
