"""
Domain models for gardens, crops and grid positions.

These models represent the snapshots handed to the grid core by the
marketplace backend. They carry no persistence or transport concerns.
"""
from datetime import date
from enum import Enum
from typing import List, NamedTuple, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class GridPosition(NamedTuple):
    """One discrete (x, y) cell of a garden grid."""
    x: int
    y: int


class GardenType(str, Enum):
    """How a garden's grid was defined."""
    MAP_BASED = "mapBased"
    GRID_BASED = "gridBased"


class GeoCoordinate(BaseModel):
    """Geographic coordinate in degrees."""
    lat: float = Field(allow_inf_nan=False, description="Latitude in degrees")
    lng: float = Field(allow_inf_nan=False, description="Longitude in degrees")

    class Config:
        frozen = True


class Garden(BaseModel):
    """A named planting area with a width x height grid overlay."""
    id: int = Field(ge=0)
    name: str
    boundary: List[GeoCoordinate] = Field(default_factory=list)
    width: int = Field(ge=1, le=100, description="Grid columns")
    height: int = Field(ge=1, le=100, description="Grid rows")
    grid_size: Optional[int] = Field(
        default=None,
        alias="gridSize",
        description="Total cell count; always width * height",
    )
    garden_type: GardenType = Field(default=GardenType.GRID_BASED, alias="gardenType")

    class Config:
        populate_by_name = True

    @model_validator(mode="after")
    def _check_grid_size(self) -> "Garden":
        expected = self.width * self.height
        if self.grid_size is None:
            self.grid_size = expected
        elif self.grid_size != expected:
            raise ValueError(
                f"gridSize {self.grid_size} does not match {self.width}x{self.height}"
            )
        return self

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height


class Crop(BaseModel):
    """A planting that occupies one or more grid cells of a garden."""
    id: int = Field(ge=0)
    garden_id: int = Field(ge=0, alias="gardenId")
    name: str
    species: str = ""
    stage: str = "Planted"
    planting_date: Optional[date] = Field(default=None, alias="plantingDate")
    harvest_date: Optional[date] = Field(default=None, alias="harvestDate")
    grid_positions: List[GridPosition] = Field(alias="gridPositions")
    sensor_link: Optional[str] = Field(default=None, alias="sensorLink")

    class Config:
        populate_by_name = True

    @field_validator("grid_positions")
    @classmethod
    def _check_positions(cls, positions: List[GridPosition]) -> List[GridPosition]:
        if not positions:
            raise ValueError("A crop must occupy at least one grid position")
        if len(set(positions)) != len(positions):
            raise ValueError("Grid positions must be unique")
        for x, y in positions:
            if x < 0 or y < 0:
                raise ValueError(f"Grid position ({x}, {y}) must not be negative")
        return positions

    @property
    def is_multi_cell(self) -> bool:
        return len(self.grid_positions) > 1
