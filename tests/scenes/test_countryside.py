"""同梱の田園風景シーンを RecordingRenderer で走査するテスト。"""

from __future__ import annotations

from collections import Counter

import numpy as np
import pytest

from landscape.core import transform as tf
from landscape.core.animation import AnimationState
from landscape.core.errors import StackImbalanceError
from landscape.core.frame_context import FrameContext
from landscape.core.primitives import PrimitiveKind
from landscape.core.recording import RecordingRenderer
from landscape.core.scene import render_frame
from landscape.scenes import countryside


def _render(state: AnimationState) -> list:
    renderer = RecordingRenderer()
    ctx = FrameContext(renderer)
    count = render_frame(ctx, countryside.draw, state)
    assert count == len(renderer.last_frame)
    assert ctx.stack.depth == 0
    return renderer.last_frame


def test_frame_is_balanced_and_draws_every_figure() -> None:
    calls = _render(AnimationState())
    assert len(calls) == 95

    kinds = Counter(call.kind for call in calls)
    assert kinds[PrimitiveKind.RAY_FAN] == 1
    assert kinds[PrimitiveKind.BLADE_FAN] == 2
    assert set(kinds) == set(PrimitiveKind)


def test_sun_rays_follow_rotation_angle() -> None:
    angle = 1.25
    calls = _render(AnimationState(rotation_angle=angle))
    (rays,) = [c for c in calls if c.kind is PrimitiveKind.RAY_FAN]

    expected = tf.translate(tf.identity(), (-0.68, 0.84, 0.0))
    expected = tf.scale(expected, (0.135, 0.135, 1.0))
    expected = tf.rotate(expected, angle)
    np.testing.assert_array_equal(rays.transform, expected)


def test_windmill_blades_spin_backwards() -> None:
    calls = _render(AnimationState(rotation_angle=0.5))
    blades = [c for c in calls if c.kind is PrimitiveKind.BLADE_FAN]

    expected = tf.translate(tf.identity(), (-0.04, 0.05, 0.0))
    expected = tf.translate(expected, (0.7, 0.06, 0.0))
    expected = tf.scale(expected, (0.2, 0.2, 1.0))
    expected = tf.rotate(expected, -0.5)
    np.testing.assert_array_equal(blades[1].transform, expected)


def test_only_boats_move_with_translation() -> None:
    a = _render(AnimationState(translation_x=0.0))
    b = _render(AnimationState(translation_x=0.2))

    moved = [i for i, (ca, cb) in enumerate(zip(a, b)) if not np.array_equal(ca.transform, cb.transform)]
    # 2 隻 x 6 プリミティブ
    assert len(moved) == 12
    for i in moved:
        assert b[i].transform[0, 3] > a[i].transform[0, 3]


def test_unbalanced_scene_is_reported_and_frame_still_closed() -> None:
    renderer = RecordingRenderer()
    ctx = FrameContext(renderer)

    def leaky(c: FrameContext, _state: AnimationState) -> None:
        c.push()
        c.draw(PrimitiveKind.SQUARE, (1.0, 1.0, 1.0))

    with pytest.raises(StackImbalanceError):
        render_frame(ctx, leaky, AnimationState())
    assert renderer.frame_count == 1
