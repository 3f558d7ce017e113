"""
どこで: `src/landscape/api/run.py`。公開 API のランナー実装。
何を: pyglet + ModernGL を使い、`draw(ctx, state)` が走査するシーンをウィンドウにアニメーション描画する。
なぜ: スケッチを実行して実際に図形をプレビューできる経路を用意するため。
"""

from __future__ import annotations

from pathlib import Path

import pyglet

from landscape.core.animation import Animation
from landscape.core.display_mode import DisplayMode
from landscape.core.runtime_config import runtime_config, set_config_path
from landscape.core.scene import SceneDraw
from landscape.interactive.render_settings import RenderSettings
from landscape.interactive.runtime.draw_window_system import DrawWindowSystem


def run(
    draw: SceneDraw,
    *,
    config_path: str | Path | None = None,
    mode: DisplayMode | str | None = None,
    render_scale: float = 1.0,
    fps: float | None = None,
) -> None:
    """pyglet ウィンドウを生成し `draw(ctx, state)` のシーンを毎フレーム描画する。

    Parameters
    ----------
    draw : SceneDraw
        FrameContext とそのフレームの AnimationState を受け取り、シーンを走査する関数。
    config_path : str | Path | None
        設定ファイル（config.yaml）のパス。指定した場合は探索より優先する。
    mode : DisplayMode | str | None
        初期表示モード。None の場合は config の `render.mode`。
    render_scale : float
        キャンバス寸法に掛けるピクセル倍率。
    fps : float | None
        目標フレームレート。None の場合は config の `window.fps`。

    Returns
    -------
    None
        ウィンドウを閉じると制御を返す。

    Notes
    -----
    キー操作: S=Solid / W=Wireframe / P=Point で表示モードを切り替え、E で最後のフレームを SVG 保存する。
    """

    set_config_path(config_path)
    cfg = runtime_config()

    settings = RenderSettings.from_config(cfg, render_scale=render_scale)
    animation = Animation(
        rotation_speed=cfg.rotation_speed,
        translation_speed=cfg.translation_speed,
        translation_range=cfg.translation_range,
    )
    system = DrawWindowSystem(
        draw,
        settings=settings,
        mode=DisplayMode.parse(mode) if mode is not None else cfg.mode,
        animation=animation,
        fps=float(fps) if fps is not None else cfg.fps,
        underflow=cfg.underflow,
    )

    def request_exit(*_: object) -> None:
        # pyglet の on_close から呼ばれるコールバックは引数が来る場合があるため *args を受ける。
        pyglet.app.exit()

    system.window.push_handlers(on_close=request_exit)
    system.start()
    try:
        # フレームは FrameDriver が自前で予約するため、pyglet 側の自動再描画は使わない。
        pyglet.app.run(interval=None)
    finally:
        system.close()


__all__ = ["run"]
