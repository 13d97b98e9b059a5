"""Per-joint linear interpolation between skeleton frames."""

from __future__ import annotations

from signavatar.models.pose import Frame, Joint


class MalformedFrameError(ValueError):
    """Raised when two frames being blended do not share the same joints."""


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def lerp_joint(a: Joint, b: Joint, t: float) -> Joint:
    return Joint(x=lerp(a.x, b.x, t), y=lerp(a.y, b.y, t))


def lerp_frames(frame_a: Frame, frame_b: Frame, t: float) -> Frame:
    """Linearly interpolate every joint between *frame_a* and *frame_b*.

    ``t == 0`` yields *frame_a* and ``t == 1`` yields *frame_b*.

    Raises
    ------
    MalformedFrameError
        If the frames' joint names differ. Joints are never dropped.
    """
    keys_a = frame_a.keys()
    keys_b = frame_b.keys()
    if keys_a != keys_b:
        msg = (
            "cannot blend frames with different joints "
            f"(only in first: {sorted(keys_a - keys_b)}, only in second: {sorted(keys_b - keys_a)})"
        )
        raise MalformedFrameError(msg)

    # Frames arriving here already carry the validated skeleton.
    return Frame.model_construct({name: lerp_joint(frame_a[name], frame_b[name], t) for name in frame_a})
