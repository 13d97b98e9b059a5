"""Renderer protocol and the skeleton layout shared by renderers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from signavatar.models.pose import Frame

DEFAULT_MAX_SIZE = 400

# Line segments drawn between joints (head is drawn as a circle).
SKELETON_CONNECTIONS: list[tuple[str, str]] = [
    # torso
    ("neck", "spine"),
    ("spine", "hip"),
    ("leftShoulder", "rightShoulder"),
    ("leftHip", "rightHip"),
    # arms
    ("leftShoulder", "leftElbow"),
    ("leftElbow", "leftWrist"),
    ("rightShoulder", "rightElbow"),
    ("rightElbow", "rightWrist"),
    # legs
    ("leftHip", "leftKnee"),
    ("leftKnee", "leftAnkle"),
    ("rightHip", "rightKnee"),
    ("rightKnee", "rightAnkle"),
]


@runtime_checkable
class Renderer(Protocol):
    """Draws interpolated frames onto an output surface."""

    def render(self, frame: Frame) -> None:
        """Draw one skeleton frame."""
        ...

    def resize(self, container_width: int, container_height: int) -> int:
        """Fit the surface to its container and return the new side length."""
        ...


def fit_surface_size(
    container_width: int,
    container_height: int,
    max_size: int = DEFAULT_MAX_SIZE,
) -> int:
    """Return the side of the largest square that fits the container, capped at *max_size*."""
    return max(0, min(container_width, container_height, max_size))
