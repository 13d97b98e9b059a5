"""Animation engine: interpolation, controller, scheduler and the Sign API."""

from signavatar.engine.avatar import SignAvatar
from signavatar.engine.controller import AnimationController, AnimationState
from signavatar.engine.interpolation import MalformedFrameError, lerp, lerp_frames, lerp_joint
from signavatar.engine.scheduler import Scheduler

__all__ = [
    "AnimationController",
    "AnimationState",
    "MalformedFrameError",
    "Scheduler",
    "SignAvatar",
    "lerp",
    "lerp_frames",
    "lerp_joint",
]
