"""Animation controller: blends the rendered skeleton from one pose to the next."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from signavatar.engine.interpolation import lerp_frames
from signavatar.models.pose import Frame, Pose

logger = logging.getLogger(__name__)

DEFAULT_SPEED = 0.05

_SNAPSHOT_POSE_NAME = "<blend>"


@dataclass
class AnimationState:
    """Live interpolation state. The only mutable entity in the engine."""

    current_pose: Pose
    target_pose: Pose
    progress: float = 0.0
    speed: float = DEFAULT_SPEED

    @property
    def is_transitioning(self) -> bool:
        return self.current_pose is not self.target_pose


class AnimationController:
    """Advances an :class:`AnimationState` once per scheduler tick.

    The first :meth:`set_target` call places the figure on that pose with no
    visible transition.  Later calls keep ``current_pose`` and restart the
    blend towards the new target from progress zero, unless
    ``snapshot_on_retarget`` is set, in which case the last rendered blended
    frame becomes the new starting pose.
    """

    def __init__(self, speed: float = DEFAULT_SPEED, *, snapshot_on_retarget: bool = False) -> None:
        if not 0 < speed <= 1:
            msg = f"speed must be in (0, 1], got {speed}"
            raise ValueError(msg)
        self.speed = speed
        self.snapshot_on_retarget = snapshot_on_retarget
        self._state: AnimationState | None = None
        self._last_frame: Frame | None = None

    @property
    def state(self) -> AnimationState | None:
        return self._state

    @property
    def last_frame(self) -> Frame | None:
        """The frame produced by the most recent :meth:`tick`."""
        return self._last_frame

    @property
    def is_transitioning(self) -> bool:
        return self._state is not None and self._state.is_transitioning

    def set_target(self, pose: Pose) -> None:
        state = self._state
        if state is None:
            self._state = AnimationState(current_pose=pose, target_pose=pose, speed=self.speed)
            logger.debug("Initial pose: %s", pose.name)
            return

        if self.snapshot_on_retarget and state.is_transitioning and self._last_frame is not None:
            state.current_pose = Pose(name=_SNAPSHOT_POSE_NAME, frames=[self._last_frame])

        state.target_pose = pose
        state.progress = 0.0
        logger.debug("Setting pose: %s", pose.name)

    def reset(self, pose: Pose) -> None:
        """Drop any transition and rest on *pose*."""
        self._state = AnimationState(current_pose=pose, target_pose=pose, speed=self.speed)
        self._last_frame = None

    def tick(self) -> Frame | None:
        """Advance progress by one step and return the frame to render.

        Returns ``None`` until a target has been set.

        Raises
        ------
        MalformedFrameError
            If the current and target frames do not share the same joints.
        """
        state = self._state
        if state is None:
            return None

        state.progress += state.speed
        if state.progress > 1.0:
            state.progress = 0.0
            if state.is_transitioning:
                logger.debug("Transition to %s complete", state.target_pose.name)
            state.current_pose = state.target_pose

        frame = lerp_frames(state.current_pose.first_frame, state.target_pose.first_frame, state.progress)
        self._last_frame = frame
        return frame
