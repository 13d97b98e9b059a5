"""Frame and pose builders shared by the test modules."""

from signavatar.models import Frame, Pose
from signavatar.poses.loader import FALLBACK_IDLE_FRAME


def shifted_frame(dx: float = 0.0, dy: float = 0.0) -> dict[str, dict[str, float]]:
    """Return the idle skeleton with every joint moved by (dx, dy)."""
    return {
        name: {"x": joint["x"] + dx, "y": joint["y"] + dy}
        for name, joint in FALLBACK_IDLE_FRAME.items()
    }


def make_pose(name: str, dx: float = 0.0, dy: float = 0.0) -> Pose:
    return Pose(name=name, frames=[Frame.model_validate(shifted_frame(dx, dy))])
