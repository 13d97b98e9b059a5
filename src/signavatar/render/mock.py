"""Recording renderer for tests and headless runs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from signavatar.render.base import DEFAULT_MAX_SIZE, fit_surface_size

if TYPE_CHECKING:
    from signavatar.models.pose import Frame


class RecordingRenderer:
    """A renderer that keeps every frame it is asked to draw.

    Useful for driving the engine without a drawing surface.
    """

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE) -> None:
        self.max_size = max_size
        self.size = max_size
        self.frames: list[Frame] = []

    def render(self, frame: Frame) -> None:
        self.frames.append(frame)

    def resize(self, container_width: int, container_height: int) -> int:
        self.size = fit_surface_size(container_width, container_height, self.max_size)
        return self.size

    @property
    def last_frame(self) -> Frame | None:
        return self.frames[-1] if self.frames else None
