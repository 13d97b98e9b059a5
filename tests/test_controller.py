"""Tests for the animation controller state machine."""

import pytest

from signavatar.engine.controller import AnimationController
from signavatar.engine.interpolation import MalformedFrameError, lerp_frames
from signavatar.models import Frame, Pose

from helpers import make_pose

IDLE = make_pose("idle")
HELLO = make_pose("Hello", 40, -20)
THANKS = make_pose("Thanks", -20, 10)


def _controller(**kwargs) -> AnimationController:
    controller = AnimationController(**kwargs)
    controller.set_target(IDLE)
    return controller


def test_tick_before_target_returns_none():
    assert AnimationController().tick() is None


@pytest.mark.parametrize("speed", [0, -0.1, 1.5])
def test_invalid_speed(speed: float):
    with pytest.raises(ValueError):
        AnimationController(speed)


def test_first_target_has_no_transition():
    controller = AnimationController()
    controller.set_target(HELLO)
    state = controller.state
    assert state is not None
    assert state.current_pose is HELLO
    assert state.target_pose is HELLO
    assert state.progress == 0.0
    assert not controller.is_transitioning


def test_set_target_resets_progress():
    controller = _controller()
    controller.set_target(HELLO)
    for _ in range(5):
        controller.tick()
    controller.set_target(THANKS)
    assert controller.state.progress == 0.0
    assert controller.state.target_pose is THANKS


def test_tick_advances_progress():
    controller = _controller()
    controller.set_target(HELLO)
    frame = controller.tick()
    assert controller.state.progress == pytest.approx(0.05)
    assert frame == lerp_frames(IDLE.first_frame, HELLO.first_frame, controller.state.progress)
    assert controller.last_frame is frame


def test_progress_wraparound_completes_once():
    controller = _controller()
    controller.set_target(HELLO)
    controller.state.progress = 0.97

    frame = controller.tick()
    assert controller.state.progress == 0.0
    assert controller.state.current_pose is HELLO
    assert frame == HELLO.first_frame

    controller.tick()
    assert controller.state.progress == pytest.approx(0.05)
    assert controller.state.current_pose is HELLO


def test_transition_completes_in_twenty_ticks():
    controller = _controller()
    controller.set_target(HELLO)
    for _ in range(19):
        controller.tick()
    assert controller.state.current_pose is IDLE
    assert controller.state.progress == pytest.approx(0.95)

    controller.tick()
    assert controller.state.current_pose is HELLO
    assert controller.state.progress == 0.0
    assert not controller.is_transitioning


@pytest.mark.parametrize(("speed", "steps"), [(0.25, 4), (0.5, 2), (1.0, 1)])
def test_exact_step_reaches_one_before_wrapping(speed: float, steps: int):
    controller = _controller(speed=speed)
    controller.set_target(HELLO)
    for _ in range(steps):
        frame = controller.tick()
    assert controller.state.progress == 1.0
    assert controller.state.current_pose is IDLE
    assert controller.is_transitioning
    assert frame == HELLO.first_frame

    controller.tick()
    assert controller.state.progress == 0.0
    assert controller.state.current_pose is HELLO
    assert not controller.is_transitioning


def test_progress_stays_in_unit_interval():
    controller = _controller(speed=0.3)
    controller.set_target(HELLO)
    for _ in range(50):
        controller.tick()
        assert 0.0 <= controller.state.progress <= 1.0


def test_retarget_mid_transition_keeps_stale_current():
    controller = _controller()
    controller.set_target(HELLO)
    for _ in range(10):
        controller.tick()

    controller.set_target(THANKS)
    assert controller.state.current_pose is IDLE

    frame = controller.tick()
    assert frame == lerp_frames(IDLE.first_frame, THANKS.first_frame, controller.state.progress)


def test_retarget_with_snapshot_starts_from_blended_frame():
    controller = _controller(snapshot_on_retarget=True)
    controller.set_target(HELLO)
    for _ in range(10):
        controller.tick()
    blended = controller.last_frame

    controller.set_target(THANKS)
    current = controller.state.current_pose
    assert current.first_frame == blended

    frame = controller.tick()
    assert frame == lerp_frames(blended, THANKS.first_frame, controller.state.progress)


def test_snapshot_not_taken_when_resting():
    controller = _controller(snapshot_on_retarget=True)
    controller.tick()
    controller.set_target(HELLO)
    assert controller.state.current_pose is IDLE


def test_reset():
    controller = _controller()
    controller.set_target(HELLO)
    controller.tick()
    controller.reset(THANKS)
    assert controller.state.current_pose is THANKS
    assert controller.state.target_pose is THANKS
    assert controller.state.progress == 0.0
    assert controller.last_frame is None


def test_malformed_target_raises():
    broken = dict(HELLO.first_frame.root)
    del broken["head"]
    bad = Pose.model_construct(name="Broken", frames=[Frame.model_construct(broken)])

    controller = _controller()
    controller.set_target(bad)
    with pytest.raises(MalformedFrameError):
        controller.tick()
