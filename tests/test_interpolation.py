"""Tests for frame interpolation."""

import pytest

from signavatar.engine.interpolation import MalformedFrameError, lerp, lerp_frames, lerp_joint
from signavatar.models import JOINT_NAMES, Frame, Joint
from signavatar.poses.loader import FALLBACK_IDLE_FRAME

from helpers import shifted_frame

FRAME_A = Frame.model_validate(FALLBACK_IDLE_FRAME)
FRAME_B = Frame.model_validate(shifted_frame(40, -20))


def test_lerp_scalar():
    assert lerp(0.0, 10.0, 0.0) == 0.0
    assert lerp(0.0, 10.0, 0.5) == 5.0
    assert lerp(0.0, 10.0, 1.0) == 10.0
    assert lerp(10.0, 0.0, 0.25) == 7.5


def test_lerp_joint():
    assert lerp_joint(Joint(x=0, y=100), Joint(x=100, y=0), 0.5) == Joint(x=50, y=50)


def test_lerp_frames_boundaries():
    assert lerp_frames(FRAME_A, FRAME_B, 0.0) == FRAME_A
    assert lerp_frames(FRAME_A, FRAME_B, 1.0) == FRAME_B


@pytest.mark.parametrize("t", [0.0, 0.05, 0.25, 0.5, 0.8, 1.0])
def test_lerp_frames_linear_per_joint(t: float):
    result = lerp_frames(FRAME_A, FRAME_B, t)
    assert result.keys() == set(JOINT_NAMES)
    for name in JOINT_NAMES:
        a, b = FRAME_A[name], FRAME_B[name]
        assert result[name].x == a.x + (b.x - a.x) * t
        assert result[name].y == a.y + (b.y - a.y) * t


def test_lerp_frames_same_frame_is_identity():
    assert lerp_frames(FRAME_A, FRAME_A, 0.37) == FRAME_A


def test_lerp_frames_mismatched_joints():
    broken = dict(FRAME_B.root)
    del broken["leftKnee"]
    bad = Frame.model_construct(broken)
    with pytest.raises(MalformedFrameError, match="leftKnee"):
        lerp_frames(FRAME_A, bad, 0.5)
