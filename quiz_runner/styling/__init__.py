"""Styling module for the quiz runner."""

from .color_palette import ColorPalette, ToneColors

__all__ = ["ColorPalette", "ToneColors"]
