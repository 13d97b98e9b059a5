"""Renderers that draw interpolated frames."""

from signavatar.render.base import SKELETON_CONNECTIONS, Renderer, fit_surface_size
from signavatar.render.mock import RecordingRenderer
from signavatar.render.pillow import PillowRenderer

__all__ = [
    "SKELETON_CONNECTIONS",
    "PillowRenderer",
    "RecordingRenderer",
    "Renderer",
    "fit_surface_size",
]
