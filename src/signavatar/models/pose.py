"""Pose catalog models: joints, frames, poses and the named catalog."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator, model_validator

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

# Canonical skeleton. Every frame carries exactly these joints.
JOINT_NAMES: tuple[str, ...] = (
    "head",
    "neck",
    "leftShoulder",
    "rightShoulder",
    "leftElbow",
    "rightElbow",
    "leftWrist",
    "rightWrist",
    "spine",
    "hip",
    "leftHip",
    "rightHip",
    "leftKnee",
    "rightKnee",
    "leftAnkle",
    "rightAnkle",
)

IDLE_POSE = "idle"


class UnknownPoseError(KeyError):
    """Raised when a pose name is absent from the catalog."""


def normalize_sign_name(text: str) -> str:
    """Upper-case the first character of *text* and lower-case the rest.

    Catalog keys use this casing (``"Hello"``, ``"Thanks"``), so free text
    such as ``"HELLO"`` or ``"hello"`` resolves to the same pose.
    """
    if not text:
        return ""
    return text[:1].upper() + text[1:].lower()


class Joint(BaseModel):
    """A named 2-D skeletal point."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Frame(RootModel[dict[str, Joint]]):
    """A complete skeleton snapshot keyed by joint name."""

    @model_validator(mode="after")
    def _check_joint_names(self) -> Frame:
        keys = set(self.root)
        missing = [name for name in JOINT_NAMES if name not in keys]
        extra = sorted(keys.difference(JOINT_NAMES))
        if missing or extra:
            msg = f"frame joints do not match the skeleton (missing={missing}, extra={extra})"
            raise ValueError(msg)
        return self

    def __getitem__(self, name: str) -> Joint:
        return self.root[name]

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def keys(self) -> set[str]:
        return set(self.root)


class Pose(BaseModel):
    """A named, ordered sequence of frames representing one sign."""

    model_config = ConfigDict(frozen=True)

    name: str
    frames: list[Frame] = Field(min_length=1)

    @property
    def first_frame(self) -> Frame:
        return self.frames[0]


class Catalog(BaseModel):
    """Every loadable pose keyed by name. Always contains ``idle``."""

    model_config = ConfigDict(frozen=True)

    poses: dict[str, Pose]

    @model_validator(mode="before")
    @classmethod
    def _name_poses_from_keys(cls, data: Any) -> Any:
        # The resource format keys poses by name and omits it from the body.
        if isinstance(data, dict) and isinstance(data.get("poses"), dict):
            named: dict[str, Any] = {}
            for key, pose in data["poses"].items():
                if isinstance(pose, dict) and "name" not in pose:
                    pose = {**pose, "name": key}
                named[key] = pose
            data = {**data, "poses": named}
        return data

    @field_validator("poses")
    @classmethod
    def _require_idle(cls, poses: dict[str, Pose]) -> dict[str, Pose]:
        if IDLE_POSE not in poses:
            msg = f"catalog must contain an '{IDLE_POSE}' pose"
            raise ValueError(msg)
        return poses

    @property
    def idle(self) -> Pose:
        return self.poses[IDLE_POSE]

    def names(self) -> list[str]:
        """Return the pose names in catalog order."""
        return list(self.poses)

    def get(self, name: str) -> Pose:
        """Look up a pose by its exact key.

        Raises
        ------
        UnknownPoseError
            If no pose is stored under *name*.
        """
        try:
            return self.poses[name]
        except KeyError:
            raise UnknownPoseError(name) from None

    def resolve(self, name: str) -> Pose:
        """Normalize *name* and return its pose, or ``idle`` when absent.

        Never raises: an unknown sign degrades to the idle pose.
        """
        key = normalize_sign_name(name)
        try:
            return self.get(key)
        except UnknownPoseError:
            if key.lower() != IDLE_POSE:
                logger.warning("Pose '%s' not found, defaulting to %s", key, IDLE_POSE)
            return self.idle

    def __getitem__(self, name: str) -> Pose:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.poses

    def __len__(self) -> int:
        return len(self.poses)
