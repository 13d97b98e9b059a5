"""Stick-figure rendering onto Pillow images."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw

from signavatar.config import RenderSettings
from signavatar.render.base import SKELETON_CONNECTIONS, fit_surface_size

if TYPE_CHECKING:
    from pathlib import Path

    from signavatar.models.pose import Frame

logger = logging.getLogger(__name__)


class PillowRenderer:
    """Draws each frame as a stick figure on a square RGB image.

    Joint coordinates are authored for a ``max_size`` square and scaled down
    when the surface is smaller.  With ``record=True`` every rendered image
    is kept so the run can be saved as an animated GIF.
    """

    def __init__(self, settings: RenderSettings | None = None, *, record: bool = False) -> None:
        self.settings = settings or RenderSettings()
        self.size = self.settings.max_size
        self.record = record
        self.images: list[Image.Image] = []
        self._image = self._blank()

    @property
    def image(self) -> Image.Image:
        """The most recently rendered image."""
        return self._image

    @property
    def scale(self) -> float:
        return self.size / self.settings.max_size

    def resize(self, container_width: int, container_height: int) -> int:
        self.size = fit_surface_size(container_width, container_height, self.settings.max_size)
        self._image = self._blank()
        logger.debug("Surface resized: %dx%d", self.size, self.size)
        return self.size

    def render(self, frame: Frame) -> None:
        s = self.settings
        scale = self.scale
        img = self._blank()
        draw = ImageDraw.Draw(img)

        points = {name: (frame[name].x * scale, frame[name].y * scale) for name in frame}
        line_width = max(1, round(s.line_width * scale))

        hx, hy = points["head"]
        r = s.head_radius * scale
        draw.ellipse([hx - r, hy - r, hx + r, hy + r], outline=s.primary_color, width=line_width)

        for a, b in SKELETON_CONNECTIONS:
            draw.line([points[a], points[b]], fill=s.primary_color, width=line_width)

        jr = s.joint_radius * scale
        for px, py in points.values():
            draw.ellipse([px - jr, py - jr, px + jr, py + jr], fill=s.secondary_color)

        self._image = img
        if self.record:
            self.images.append(img)

    def save_png(self, output: Path) -> Path:
        """Save the latest image as PNG."""
        self._image.save(output, "PNG")
        return output

    def save_gif(self, output: Path, fps: int = 30) -> Path:
        """Save every recorded image as a looping animated GIF."""
        if not self.images:
            msg = "No recorded frames to save"
            raise ValueError(msg)
        first, *rest = self.images
        first.save(
            output,
            "GIF",
            save_all=True,
            append_images=rest,
            duration=max(1, round(1000 / fps)),
            loop=0,
        )
        logger.info("Wrote %d frames -> %s", len(self.images), output)
        return output

    def _blank(self) -> Image.Image:
        side = max(self.size, 1)
        return Image.new("RGB", (side, side), self.settings.background)
