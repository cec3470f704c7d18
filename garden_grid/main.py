"""
Entry points for a UI shell embedding the grid core.
"""
import logging
from typing import Optional, Sequence

from garden_grid.config import settings
from garden_grid.domain.models import Crop, Garden, GeoCoordinate
from garden_grid.services.application.garden_drawing_session import GardenDrawingSession
from garden_grid.services.application.planting_session import PlantingSession

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging with the application format.

    Args:
        level: Level name; defaults to `settings.log_level`
    """
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Log level: {level_name}")
    logger.info(f"Display config: grid_max_display={settings.grid_max_display}, "
                f"selector_max_display={settings.selector_max_display}")


def open_planting_session(garden: Garden, crops: Sequence[Crop]) -> PlantingSession:
    """Planting session for the garden grid view."""
    return PlantingSession(garden, crops, max_display=settings.grid_max_display)


def open_crop_selector(garden: Garden, crops: Sequence[Crop]) -> PlantingSession:
    """Planting session for the smaller selector inside the add-crop form."""
    return PlantingSession(garden, crops, max_display=settings.selector_max_display)


def open_drawing_session(center: Optional[GeoCoordinate] = None) -> GardenDrawingSession:
    """Draft for a new garden."""
    return GardenDrawingSession(center=center)
