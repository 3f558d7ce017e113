"""
どこで: `src/landscape/scenes/countryside.py`。
何を: 空・太陽・雲・星・山・地面・道・川・木・船・風車・茂み・家・車からなる田園風景シーンを走査する。
なぜ: FrameContext の「reset → branch(push) → 合成 → draw → pop」パターンを使った完全なシーン例として同梱するため。

Notes
-----
回転角の定数（6.285, 6.5, 7.2, 4.71, 4.72, 5.9, -3.15 など）は見た目を合わせて決めた値なので、
0 や小さな負の角度に書き換えない。
"""

from __future__ import annotations

import math
from typing import Sequence

from landscape.core.animation import AnimationState
from landscape.core.frame_context import FrameContext
from landscape.core.primitives import PrimitiveKind

SQUARE = PrimitiveKind.SQUARE
TRIANGLE = PrimitiveKind.TRIANGLE
CIRCLE = PrimitiveKind.CIRCLE
RAY_FAN = PrimitiveKind.RAY_FAN
BLADE_FAN = PrimitiveKind.BLADE_FAN

BOAT_RED = (1.0, 0.0, 0.0, 0.9)
BOAT_BLUE = (0.2, 0.2, 0.5, 0.9)


def draw_sky(ctx: FrameContext) -> None:
    ctx.reset()
    with ctx.branch():
        ctx.translate((0.0, 0.6, 0.0))
        ctx.scale((3.0, 1.2, 1.0))
        ctx.draw(SQUARE, (0.0, 0.0, 0.0, 1.0))


def draw_sun(ctx: FrameContext, rotation_angle: float) -> None:
    """太陽本体と、`rotation_angle` で回る光線を描く。"""
    color = (1.0, 1.0, 1.0, 1.0)
    ctx.reset()
    with ctx.branch():
        ctx.translate((-0.68, 0.84, 0.0))
        ctx.scale((0.09, 0.09, 1.0))
        ctx.draw(CIRCLE, color)
    with ctx.branch():
        ctx.translate((-0.68, 0.84, 0.0))
        ctx.scale((0.135, 0.135, 1.0))
        ctx.rotate(rotation_angle)
        ctx.draw(RAY_FAN, color)


def draw_cloud(ctx: FrameContext) -> None:
    ctx.reset()
    puffs = (
        ((-0.82, 0.55), (0.23, 0.13), (0.7, 0.7, 0.7, 1.0)),
        ((-0.6, 0.514), (0.17, 0.095), (0.9, 0.9, 0.9, 1.0)),
        ((-0.39, 0.515), (0.09, 0.055), (0.7, 0.7, 0.7, 1.0)),
    )
    for (tx, ty), (sx, sy), color in puffs:
        with ctx.branch():
            ctx.translate((tx, ty, 0.0))
            ctx.scale((sx, sy, 1.0))
            ctx.draw(CIRCLE, color)


def draw_star(
    ctx: FrameContext,
    tx: float,
    ty: float,
    s_x: float,
    s_y: float,
    angle: float,
    size: float,
) -> None:
    """4 枚の三角形を十字に並べて星を描く。

    Parameters
    ----------
    tx, ty : float
        星の位置。
    s_x, s_y : float
        三角形 1 枚の倍率（`size` を掛ける前）。
    angle : float
        星全体の回転角 [rad]。
    size : float
        全体の大きさ。
    """
    color = (1.0, 1.0, 1.0, 1.0)
    s_x *= size
    s_y *= size
    arms = (
        ((tx, ty), 0.0),
        ((tx - 0.8 * s_x, ty - 0.5 * s_y), math.pi / 2),
        ((tx, ty - s_y), math.pi),
        ((tx + 0.8 * s_x, ty - 0.5 * s_y), math.pi * 3 / 2),
    )
    for (x, y), arm_angle in arms:
        ctx.reset()
        with ctx.branch():
            ctx.translate((x, y, 0.0))
            ctx.rotate(angle + arm_angle)
            ctx.scale((s_x, s_y, 1.0))
            ctx.draw(TRIANGLE, color)


def draw_mountain(
    ctx: FrameContext,
    t_x1: float,
    t_y1: float,
    s_x: float,
    s_y: float,
    t_x2: float = 0.0,
    t_y2: float = 0.0,
    single: bool = False,
) -> None:
    """山を描く。`single=False` なら明るい面の三角形を重ねる。"""
    dark = (0.57, 0.36, 0.15, 1.0)
    light = (0.65, 0.46, 0.16, 1.0)
    ctx.reset()
    with ctx.branch():
        ctx.translate((t_x1, t_y1, 0.0))
        ctx.scale((s_x, s_y, 1.0))
        ctx.draw(TRIANGLE, light if single else dark)

    if single:
        return
    with ctx.branch():
        ctx.translate((t_x2, t_y2, 0.0))
        ctx.rotate(6.5)
        ctx.scale((s_x, s_y, 1.0))
        ctx.draw(TRIANGLE, light)


def draw_ground(ctx: FrameContext) -> None:
    ctx.reset()
    with ctx.branch():
        ctx.translate((0.0, -0.6, 0.0))
        ctx.scale((3.0, 1.2, 1.0))
        ctx.draw(SQUARE, (0.15, 0.61, 0.0, 0.7))


def draw_river_line(ctx: FrameContext, offset: tuple[float, float] | None = None) -> None:
    """川面の白い線を 1 本描く。`offset` は線全体の平行移動。"""
    ctx.reset()
    if offset is not None:
        ctx.translate((offset[0], offset[1], 0.0))
    with ctx.branch():
        ctx.translate((-0.7, -0.19, 0.0))
        ctx.rotate(4.71)
        ctx.scale((0.003, 0.4, 1.0))
        ctx.draw(SQUARE, (0.9, 0.9, 0.9, 0.8))


def draw_river(ctx: FrameContext) -> None:
    ctx.reset()
    with ctx.branch():
        ctx.translate((0.0, -0.14, 0.0))
        ctx.scale((3.0, 0.23, 1.0))
        ctx.draw(SQUARE, (0.0, 0.0, 0.8, 0.8))

    draw_river_line(ctx)
    draw_river_line(ctx, (0.85, 0.1))
    draw_river_line(ctx, (1.5, -0.06))


def draw_road(ctx: FrameContext) -> None:
    ctx.reset()
    with ctx.branch():
        ctx.translate((0.568, -0.8, 0.0))
        ctx.rotate(7.2)
        ctx.scale((1.6, 2.1, 1.0))
        ctx.draw(TRIANGLE, (0.30, 0.40, 0.0, 0.9))


def draw_tree(ctx: FrameContext, t_x: float, t_y: float, s_x: float, s_y: float) -> None:
    """3 段の葉と幹からなる木を、(t_x, t_y) へ移動・(s_x, s_y) 倍して描く。"""
    ctx.reset()
    # z 倍率 0 は意図的（2D なので奥行きを潰してよい）。
    ctx.translate((t_x, t_y, 0.0))
    ctx.scale((s_x, s_y, 0.0))

    leaves = (
        (0.45, (0.35, 0.3), (0.30, 0.41, 0.0, 0.9)),
        (0.5, (0.375, 0.3), (0.38, 0.51, 0.0, 0.9)),
        (0.55, (0.4, 0.3), (0.45, 0.60, 0.0, 0.9)),
    )
    for y, (sx, sy), color in leaves:
        with ctx.branch():
            ctx.translate((0.55, y, 0.0))
            ctx.scale((sx, sy, 1.0))
            ctx.draw(TRIANGLE, color)

    with ctx.branch():
        ctx.translate((0.55, 0.14, 0.0))
        ctx.scale((0.04, 0.33, 1.0))
        ctx.draw(SQUARE, (0.57, 0.36, 0.15, 1.0))


def draw_boat(
    ctx: FrameContext,
    translation_x: float,
    tx: float,
    ty: float,
    s: float,
    flag_color: Sequence[float] = BOAT_RED,
) -> None:
    """船体・マスト・帆を描く。`translation_x` が往復移動量。"""
    hull = (0.83, 0.83, 0.83, 1.0)
    black = (0.0, 0.0, 0.0, 1.0)

    ctx.reset()
    ctx.translate((translation_x / s - (1 - s) * 0.3, 0.0, 0.0))

    with ctx.branch():
        ctx.translate((tx, ty - 0.15 * s, 0.0))
        ctx.scale((0.18 * s, 0.06 * s, 1.0))
        ctx.draw(SQUARE, hull)

    for side in (-1.0, 1.0):
        with ctx.branch():
            ctx.translate((tx + side * 0.09 * s, ty - 0.15 * s, 0.0))
            ctx.rotate(-3.15)
            ctx.scale((0.1 * s, 0.06 * s, 1.0))
            ctx.draw(TRIANGLE, hull)

    with ctx.branch():
        ctx.translate((tx + 0.01 * s, ty + 0.006 * s, 0.0))
        ctx.scale((0.01 * s, 0.25 * s, 1.0))
        ctx.draw(SQUARE, black)

    with ctx.branch():
        ctx.translate((tx - 0.03 * s, ty - 0.01 * s, 0.0))
        ctx.rotate(5.9)
        ctx.scale((0.005 * s, 0.23 * s, 1.0))
        ctx.draw(SQUARE, black)

    with ctx.branch():
        ctx.translate((tx + 0.115 * s, ty + 0.006 * s, 0.0))
        ctx.rotate(4.72)
        ctx.scale((0.2 * s, 0.2 * s, 1.0))
        ctx.draw(TRIANGLE, flag_color)


def draw_windmill(
    ctx: FrameContext,
    rotation_angle: float,
    t_x: float = 0.0,
    t_y: float = 0.0,
    sc: float = 1.0,
) -> None:
    """支柱・羽根・軸を描く。羽根は `rotation_angle` で回る。"""
    ctx.reset()
    ctx.translate((t_x, t_y, 0.0))

    with ctx.branch():
        ctx.translate((0.7 * sc, -0.25 * sc, 0.0))
        ctx.scale((0.03 * sc, 0.55 * sc, 1.0))
        ctx.draw(SQUARE, (0.3, 0.0, 0.0, 1.0))

    with ctx.branch():
        ctx.translate((0.7 * sc, 0.06 * sc, 0.0))
        ctx.scale((0.2 * sc, 0.2 * sc, 1.0))
        ctx.rotate(rotation_angle)
        ctx.draw(BLADE_FAN, (0.8, 0.65, 0.0, 1.0))

    with ctx.branch():
        ctx.translate((0.7 * sc, 0.053 * sc, 0.0))
        ctx.scale((0.03 * sc, 0.03 * sc, 1.0))
        ctx.draw(CIRCLE, (0.0, 0.0, 0.0, 1.0))


def draw_bush(ctx: FrameContext, offset: tuple[float, float, float] | None = None) -> None:
    """3 つの円で茂みを描く。`offset` は (t_x, t_y, s)。"""
    ctx.reset()
    if offset is not None:
        t_x, t_y, s = offset
        ctx.translate((t_x, t_y, 0.0))
        ctx.scale((s, s, 0.0))

    blobs = (
        ((-1.0, -0.55), (0.075, 0.055), (0.0, 0.7, 0.0, 0.9)),
        ((-0.72, -0.55), (0.07, 0.05), (0.0, 0.4, 0.0, 0.9)),
        ((-0.86, -0.53), (0.13, 0.09), (0.0, 0.51, 0.0, 0.9)),
    )
    for (x, y), (sx, sy), color in blobs:
        with ctx.branch():
            ctx.translate((x, y, 0.0))
            ctx.scale((sx, sy, 1.0))
            ctx.draw(CIRCLE, color)


def draw_house(ctx: FrameContext) -> None:
    roof = (0.8, 0.3, 0.1, 1.0)
    wall = (0.83, 0.83, 0.83, 1.0)
    window = (0.8, 0.55, 0.1, 0.9)
    ctx.reset()

    with ctx.branch():
        ctx.translate((-0.57, -0.29, 0.0))
        ctx.scale((0.4, 0.2, 1.0))
        ctx.draw(SQUARE, roof)

    for x in (-0.77, -0.37):
        with ctx.branch():
            ctx.translate((x, -0.29, 0.0))
            ctx.rotate(6.285)
            ctx.scale((0.25, 0.2, 1.0))
            ctx.draw(TRIANGLE, roof)

    with ctx.branch():
        ctx.translate((-0.57, -0.515, 0.0))
        ctx.scale((0.5, 0.25, 1.0))
        ctx.draw(SQUARE, wall)

    for x in (-0.715, -0.425):
        with ctx.branch():
            ctx.translate((x, -0.46, 0.0))
            ctx.scale((0.07, 0.07, 1.0))
            ctx.draw(SQUARE, window)

    # 扉
    with ctx.branch():
        ctx.translate((-0.57, -0.55, 0.0))
        ctx.scale((0.08, 0.18, 1.0))
        ctx.draw(SQUARE, window)


def draw_wheel(ctx: FrameContext, t_x: float = 0.0) -> None:
    ctx.reset()
    ctx.translate((t_x, 0.0, 0.0))
    for r, color in ((0.055, (0.0, 0.0, 0.0, 1.0)), (0.04, (0.51, 0.51, 0.51, 1.0))):
        with ctx.branch():
            ctx.translate((-0.652, -0.88, 0.0))
            ctx.scale((r, r, 1.0))
            ctx.draw(CIRCLE, color)


def draw_car(ctx: FrameContext) -> None:
    body = (0.0, 0.0, 0.8, 0.7)
    ctx.reset()

    with ctx.branch():
        ctx.translate((-0.501, -0.73, 0.0))
        ctx.rotate(6.285)
        ctx.scale((0.18, 0.10, 1.0))
        ctx.draw(CIRCLE, (0.0, 0.0, 1.0, 0.9))

    with ctx.branch():
        ctx.translate((-0.5, -0.73, 0.0))
        ctx.scale((0.198, 0.10, 1.0))
        ctx.draw(SQUARE, (0.9, 0.9, 0.9, 1.0))

    draw_wheel(ctx)
    draw_wheel(ctx, 0.3)

    ctx.reset()
    with ctx.branch():
        ctx.translate((-0.5, -0.8, 0.0))
        ctx.scale((0.429, 0.10, 1.0))
        ctx.draw(SQUARE, body)

    for x in (-0.285, -0.716):
        with ctx.branch():
            ctx.translate((x, -0.8, 0.0))
            ctx.rotate(6.285)
            ctx.scale((0.154, 0.10, 1.0))
            ctx.draw(TRIANGLE, body)


def draw(ctx: FrameContext, state: AnimationState) -> None:
    """田園風景 1 フレーム分を奥から手前の順に描く。"""
    draw_sky(ctx)
    draw_sun(ctx, state.rotation_angle)
    draw_cloud(ctx)

    draw_star(ctx, 0.4, 0.8, 0.015, 0.025, 0.0, 1.2)
    draw_star(ctx, 0.55, 0.95, 0.012, 0.02, 0.0, 0.8)
    draw_star(ctx, -0.15, 0.75, 0.01, 0.015, 0.0, 1.2)
    draw_star(ctx, 0.02, 0.65, 0.005, 0.01, 0.0, 1.7)
    draw_star(ctx, -0.03, 0.5, 0.003, 0.006, 0.0, 2.0)

    draw_mountain(ctx, -0.69, 0.097, 1.1, 0.25, -0.665, 0.1)
    draw_mountain(ctx, -0.054, 0.1, 1.5, 0.5, 0.00, 0.106)
    draw_mountain(ctx, 0.83, 0.075, 0.8, 0.2, -0.545, -0.005, single=True)

    draw_ground(ctx)
    draw_road(ctx)
    draw_river(ctx)

    draw_tree(ctx, 0.35, 0.01, 0.86, 0.85)
    draw_tree(ctx, 0.0, 0.005, 1.0, 1.0)
    draw_tree(ctx, -0.15, 0.01, 0.8, 0.8)

    draw_boat(ctx, state.translation_x, 0.08, 0.055, 0.75, BOAT_BLUE)
    draw_boat(ctx, state.translation_x, 0.0, 0.0, 1.0)

    draw_windmill(ctx, -state.rotation_angle, 0.0, 0.045, 0.7)
    draw_windmill(ctx, -state.rotation_angle, -0.04, 0.05, 1.0)

    draw_bush(ctx)
    draw_bush(ctx, (0.7, 0.0, 1.02))
    draw_bush(ctx, (1.46, -0.18, 1.6))
    draw_bush(ctx, (2.15, 0.25, 1.3))

    draw_house(ctx)
    draw_car(ctx)


__all__ = ["draw"]
