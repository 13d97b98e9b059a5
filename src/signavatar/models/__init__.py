"""SignAvatar data models - pure Pydantic, no I/O."""

from signavatar.models.pose import (
    IDLE_POSE,
    JOINT_NAMES,
    Catalog,
    Frame,
    Joint,
    Pose,
    UnknownPoseError,
    normalize_sign_name,
)

__all__ = [
    "IDLE_POSE",
    "JOINT_NAMES",
    "Catalog",
    "Frame",
    "Joint",
    "Pose",
    "UnknownPoseError",
    "normalize_sign_name",
]
