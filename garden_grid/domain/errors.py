"""
Domain exceptions.
"""


class GardenGridError(Exception):
    """Base class for errors raised by the grid core."""
    pass


class GridPositionOutOfRange(GardenGridError, IndexError):
    """A grid position outside [0, width) x [0, height) was queried or toggled."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Cell ({x}, {y}) out of bounds for {width}x{height} grid"
        )


class DraftValidationError(GardenGridError, ValueError):
    """A garden or crop draft failed validation; the message is user-facing."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
