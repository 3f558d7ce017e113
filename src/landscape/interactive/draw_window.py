# どこで: `src/landscape/interactive/draw_window.py`。
# 何を: シーン表示用の pyglet ウィンドウを生成する。
# なぜ: pyglet 依存を interactive 層に閉じ込め、core/export をヘッドレスに保つため。

from __future__ import annotations

import logging

import pyglet
from pyglet.gl import Config
from pyglet.window import NoSuchConfigException, Window

from landscape.interactive.render_settings import RenderSettings

_logger = logging.getLogger(__name__)


def _window_size(settings: RenderSettings) -> tuple[int, int]:
    canvas_w, canvas_h = settings.canvas_size
    scale = float(settings.render_scale)
    return max(1, int(round(canvas_w * scale))), max(1, int(round(canvas_h * scale)))


def create_draw_window(settings: RenderSettings, *, visible: bool = True) -> Window:
    """設定に基づき描画ウィンドウを生成する。

    MSAA 付きの GL config が使えない環境では、MSAA 無しで作り直す。
    """
    width, height = _window_size(settings)

    def _create(config: Config) -> Window:
        # シーンは clip 空間 [-1, 1]^2 に描くため、縦横比が崩れないよう固定サイズにする。
        return pyglet.window.Window(  # type: ignore[abstract]
            width=width,
            height=height,
            resizable=False,
            caption=settings.caption,
            config=config,
            vsync=False,
            visible=visible,
        )

    try:
        # 図形の縁を滑らかにするために MSAA を優先する。
        return _create(Config(double_buffer=True, sample_buffers=1, samples=4))  # type: ignore[abstract]
    except NoSuchConfigException:
        _logger.warning("MSAA is not available; falling back to a single-sampled window")
        return _create(Config(double_buffer=True))  # type: ignore[abstract]
