"""Wireframe viewer for .fdf height maps: parsing, rasterising, projection and a pygame window."""

__version__ = "0.1.0"
__all__ = ["app", "controls", "parsing", "projection", "raster"]