"""
Unit tests for geographic <-> pixel coordinate transforms.
"""
import numpy as np
import pytest

from garden_grid.config import settings
from garden_grid.domain.models import GeoCoordinate
from garden_grid.utils.coordinate_transform import (
    Bounds,
    PixelPoint,
    Viewport,
    bounds_of,
    default_viewport,
    drawing_bounds,
    to_coordinate,
    to_pixel,
    to_pixels,
)


@pytest.fixture
def bounds() -> Bounds:
    return Bounds(min_lat=0.0, max_lat=1.0, min_lng=0.0, max_lng=2.0)


# ============================================================
# Forward Transform Tests
# ============================================================

class TestToPixel:
    """Tests for coordinate -> pixel conversion."""

    def test_north_west_corner_maps_to_origin(self, bounds):
        """Max latitude and min longitude land at the top-left."""
        pixel = to_pixel(GeoCoordinate(lat=1.0, lng=0.0), bounds, Viewport(200, 100))

        assert pixel == PixelPoint(0.0, 0.0)

    def test_south_east_corner_maps_to_far_corner(self, bounds):
        """Min latitude and max longitude land at the bottom-right."""
        pixel = to_pixel(GeoCoordinate(lat=0.0, lng=2.0), bounds, Viewport(200, 100))

        assert pixel == PixelPoint(200.0, 100.0)

    def test_latitude_axis_is_inverted(self, bounds):
        """Moving north decreases y."""
        viewport = Viewport(200, 100)
        south = to_pixel(GeoCoordinate(lat=0.25, lng=1.0), bounds, viewport)
        north = to_pixel(GeoCoordinate(lat=0.75, lng=1.0), bounds, viewport)

        assert north.y < south.y
        assert north.x == south.x

    def test_padding_insets_all_sides(self, bounds):
        """Padding shifts both corners inward symmetrically."""
        viewport = Viewport(220, 120, padding=10)

        assert to_pixel(GeoCoordinate(lat=1.0, lng=0.0), bounds, viewport) == PixelPoint(10.0, 10.0)
        assert to_pixel(GeoCoordinate(lat=0.0, lng=2.0), bounds, viewport) == PixelPoint(210.0, 110.0)

    def test_degenerate_bounds_do_not_raise(self):
        """A single-point boundary uses the minimum range instead of dividing by zero."""
        point = GeoCoordinate(lat=5.0, lng=5.0)
        bounds = bounds_of([point])

        pixel = to_pixel(point, bounds, Viewport(600, 400, padding=40))

        assert pixel == PixelPoint(40.0, 40.0)

    def test_degenerate_range_uses_configured_floor(self):
        """Zero extent is replaced by `min_coordinate_range`."""
        bounds = Bounds(min_lat=5.0, max_lat=5.0, min_lng=1.0, max_lng=1.0)

        assert bounds.lat_range() == settings.min_coordinate_range
        assert bounds.lng_range(min_range=0.5) == 0.5

    def test_vectorised_matches_scalar(self, bounds):
        """to_pixels agrees with to_pixel point by point."""
        viewport = Viewport(600, 400, padding=40)
        coords = [
            GeoCoordinate(lat=0.1, lng=0.3),
            GeoCoordinate(lat=0.9, lng=1.7),
            GeoCoordinate(lat=0.5, lng=1.0),
        ]

        pixels = to_pixels(coords, bounds, viewport)

        assert pixels.shape == (3, 2)
        for row, coord in zip(pixels, coords):
            assert np.allclose(row, to_pixel(coord, bounds, viewport))

    def test_vectorised_empty(self, bounds):
        assert to_pixels([], bounds, Viewport(10, 10)).shape == (0, 2)


# ============================================================
# Inverse Transform Tests
# ============================================================

class TestToCoordinate:
    """Tests for pixel -> coordinate conversion."""

    @pytest.mark.parametrize("lat,lng", [
        (0.1, 0.2),
        (0.5, 1.0),
        (0.999, 1.999),
        (0.33333, 0.77777),
    ])
    def test_round_trip(self, bounds, lat, lng):
        """toCoordinate(toPixel(c)) returns c within 1e-9."""
        viewport = Viewport(600, 400, padding=40)
        coord = GeoCoordinate(lat=lat, lng=lng)

        back = to_coordinate(to_pixel(coord, bounds, viewport), bounds, viewport)

        assert back.lat == pytest.approx(lat, abs=1e-9)
        assert back.lng == pytest.approx(lng, abs=1e-9)

    def test_round_trip_real_world(self, square_coords):
        """Round trip holds for realistic boundary coordinates."""
        bounds = bounds_of(square_coords)
        viewport = default_viewport()
        coord = GeoCoordinate(lat=37.77443, lng=-122.41957)

        back = to_coordinate(to_pixel(coord, bounds, viewport), bounds, viewport)

        assert back.lat == pytest.approx(coord.lat, abs=1e-9)
        assert back.lng == pytest.approx(coord.lng, abs=1e-9)

    def test_round_trip_degenerate(self):
        """Round trip also holds on a degenerate (single-point) box."""
        bounds = Bounds(min_lat=5.0, max_lat=5.0, min_lng=5.0, max_lng=5.0)
        viewport = Viewport(600, 400, padding=40)
        coord = GeoCoordinate(lat=5.0, lng=5.0)

        back = to_coordinate(to_pixel(coord, bounds, viewport), bounds, viewport)

        assert back.lat == pytest.approx(5.0, abs=1e-9)
        assert back.lng == pytest.approx(5.0, abs=1e-9)

    def test_canvas_click_matches_drawing_canvas(self):
        """Top-left of an unpadded drawing canvas is centre + scale north, - scale west."""
        center = GeoCoordinate(lat=37.7749, lng=-122.4194)
        bounds = drawing_bounds(center, scale=0.001)

        coord = to_coordinate(PixelPoint(0, 0), bounds, Viewport(600, 400))

        assert coord.lat == pytest.approx(37.7759)
        assert coord.lng == pytest.approx(-122.4204)


# ============================================================
# Bounds and Viewport Tests
# ============================================================

class TestBoundsAndViewport:
    """Tests for bounds computation and viewport validation."""

    def test_bounds_of_coordinates(self, square_coords):
        bounds = bounds_of(square_coords)

        assert bounds.min_lat == 37.7740
        assert bounds.max_lat == 37.7750
        assert bounds.min_lng == -122.4200
        assert bounds.max_lng == -122.4190

    def test_bounds_of_empty_uses_default_centre(self):
        """An empty boundary falls back to the drawing canvas box."""
        bounds = bounds_of([])

        assert bounds == drawing_bounds()
        assert bounds.min_lat < settings.default_center_lat < bounds.max_lat

    def test_padding_too_large_rejected(self):
        """A viewport with no drawable area is a configuration error."""
        with pytest.raises(ValueError):
            Viewport(width=80, height=80, padding=40)

    def test_default_viewport(self):
        viewport = default_viewport()

        assert viewport.width == settings.canvas_width
        assert viewport.padding == settings.canvas_padding
        assert default_viewport(padding=0).usable_width == settings.canvas_width
