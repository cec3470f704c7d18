"""
Application configuration using Pydantic settings.
"""
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Display Windowing
    grid_max_display: int = Field(
        default=20,
        description="Maximum number of cells rendered per axis in the garden grid view"
    )
    selector_max_display: int = Field(
        default=15,
        description="Maximum number of cells rendered per axis in the planting selector"
    )

    # Coordinate Transform
    min_coordinate_range: float = Field(
        default=0.001,
        description="Range in degrees substituted when a boundary has zero lat or lng extent"
    )
    canvas_width: int = Field(
        default=600,
        description="Drawing surface width in pixels"
    )
    canvas_height: int = Field(
        default=400,
        description="Drawing surface height in pixels"
    )
    canvas_padding: int = Field(
        default=40,
        description="Inset in pixels applied on every side of the boundary map"
    )

    # Boundary Drawing
    default_center_lat: float = Field(
        default=37.7749,
        description="Latitude at the centre of the drawing canvas"
    )
    default_center_lng: float = Field(
        default=-122.4194,
        description="Longitude at the centre of the drawing canvas"
    )
    drawing_scale: float = Field(
        default=0.001,
        description="Half-extent in degrees covered by the drawing canvas"
    )
    square_boundary_unit: float = Field(
        default=0.00001,
        description="Degrees per meter used for generated grid-mode boundaries"
    )

    # Garden Dimensions
    min_grid_dimension: int = Field(
        default=1,
        description="Smallest allowed garden width or height in cells"
    )
    max_grid_dimension: int = Field(
        default=100,
        description="Largest allowed garden width or height in cells"
    )
    default_map_grid_size: int = Field(
        default=10,
        description="Grid size pre-filled for map-mode gardens"
    )
    default_grid_width: int = Field(
        default=5,
        description="Width pre-filled for grid-mode gardens"
    )
    default_grid_height: int = Field(
        default=5,
        description="Height pre-filled for grid-mode gardens"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    # Application Settings
    app_name: str = Field(
        default="Garden Grid",
        description="Application name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )

    class Config:
        env_file = ".env"
        env_prefix = "GARDEN_GRID_"
        case_sensitive = False


# Global settings instance
settings = Settings()
