"""
Display helpers for the light source.

Read-only conversions used by the presentation layer when drawing the
beam and the energy diagram.
"""

from typing import Tuple

# Upper band edges (nm, exclusive) and their display colors
_SPECTRAL_BANDS: Tuple[Tuple[float, str], ...] = (
    (380, "#8B00FF"),  # Violet (and ultraviolet)
    (440, "#4B0082"),  # Indigo
    (490, "#0000FF"),  # Blue
    (510, "#00FF00"),  # Green
    (580, "#FFFF00"),  # Yellow
    (645, "#FF7F00"),  # Orange
    (750, "#FF0000"),  # Red
)
_BEYOND_RED = "#8B0000"


def wavelength_to_color(wavelength_nm: float) -> str:
    """Approximate hex color of light at a wavelength."""
    for upper_edge, color in _SPECTRAL_BANDS:
        if wavelength_nm < upper_edge:
            return color
    return _BEYOND_RED


def is_visible(wavelength_nm: float) -> bool:
    return 380 <= wavelength_nm < 750
