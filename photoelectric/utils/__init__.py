"""
Photoelectric Utilities Package

Data export and display helpers.
"""

from .data_export import PhotoelectricDataExporter
from .spectrum import wavelength_to_color, is_visible

__all__ = ["PhotoelectricDataExporter", "wavelength_to_color", "is_visible"]
