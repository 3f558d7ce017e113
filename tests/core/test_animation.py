from __future__ import annotations

import pytest

from landscape.core.animation import Animation, AnimationState


def test_angle_after_n_ticks_matches_sequential_addition() -> None:
    theta0 = 0.3
    delta = 0.01
    anim = Animation(rotation_speed=delta, initial=AnimationState(rotation_angle=theta0))

    expected = theta0
    for _ in range(1000):
        expected += delta
        state = anim.tick()

    assert state.rotation_angle == expected
    assert state.frame_index == 1000


def test_angle_is_not_wrapped() -> None:
    anim = Animation(rotation_speed=1.0)
    for _ in range(10):
        anim.tick()
    assert anim.state.rotation_angle == pytest.approx(10.0)


def test_translation_reverses_after_leaving_range() -> None:
    anim = Animation(translation_speed=0.3, translation_range=0.7)

    anim.tick()
    anim.tick()
    assert anim.state.direction == 1

    s = anim.tick()
    assert s.translation_x == pytest.approx(0.9)
    assert s.direction == -1

    s = anim.tick()
    assert s.translation_x == pytest.approx(0.6)
    assert s.direction == -1


def test_reset_restores_initial_state() -> None:
    anim = Animation()
    anim.tick()
    anim.reset()
    assert anim.state == AnimationState()


def test_reset_restores_seeded_initial_state() -> None:
    start = AnimationState(rotation_angle=0.3, translation_x=0.1, direction=-1)
    anim = Animation(initial=start)
    anim.tick()
    anim.tick()
    assert anim.state != start

    anim.reset()
    assert anim.state == start
    assert anim.tick().frame_index == 1


def test_negative_range_is_rejected() -> None:
    with pytest.raises(ValueError):
        Animation(translation_range=-1.0)
