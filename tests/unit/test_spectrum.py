"""
Unit tests for the light-source display helpers.
"""

import pytest

from photoelectric.utils.spectrum import is_visible, wavelength_to_color


class TestWavelengthToColor:
    """Tests for wavelength_to_color()"""

    @pytest.mark.parametrize("wavelength,color", [
        (100.0, "#8B00FF"),
        (379.9, "#8B00FF"),
        (380.0, "#4B0082"),
        (400.0, "#4B0082"),
        (450.0, "#0000FF"),
        (500.0, "#00FF00"),
        (550.0, "#FFFF00"),
        (600.0, "#FF7F00"),
        (645.0, "#FF0000"),
        (700.0, "#FF0000"),
        (750.0, "#8B0000"),
    ])
    def test_bands(self, wavelength, color):
        assert wavelength_to_color(wavelength) == color

    def test_band_edges_are_exclusive(self):
        assert wavelength_to_color(439.999) != wavelength_to_color(440.0)


class TestIsVisible:
    """Tests for is_visible()"""

    def test_ultraviolet(self):
        assert is_visible(250.0) is False

    def test_visible(self):
        assert is_visible(380.0) is True
        assert is_visible(700.0) is True

    def test_infrared(self):
        assert is_visible(750.0) is False
