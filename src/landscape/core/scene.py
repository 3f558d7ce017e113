"""
どこで: `src/landscape/core/scene.py`。
何を: シーン走査関数の型と、1 フレーム分の走査（開始 → 描画 → 均衡検査 → 終了）を行うヘルパを提供する。
なぜ: interactive でもヘッドレスでも同じ手順でフレームを描けるようにするため。
"""

from __future__ import annotations

from typing import Callable, TypeAlias

from landscape.core.animation import AnimationState
from landscape.core.frame_context import FrameContext

SceneDraw: TypeAlias = Callable[[FrameContext, AnimationState], None]


def render_frame(ctx: FrameContext, draw: SceneDraw, state: AnimationState) -> int:
    """`draw` を 1 回走査し、発行した描画命令の数を返す。

    Notes
    -----
    - 走査の前に現在の Transform を恒等変換へ戻し、スタックを空にする。
    - 走査の後にスタック深さが 0 に戻っていることを検査する（`ctx.underflow` に従う）。
    - `draw` が例外を送出しても Renderer の `end_frame()` は呼ぶ。
    """
    ctx.renderer.begin_frame()
    try:
        ctx.begin_frame()
        draw(ctx, state)
        ctx.end_frame()
    finally:
        ctx.renderer.end_frame()
    return ctx.draw_count


__all__ = ["SceneDraw", "render_frame"]
