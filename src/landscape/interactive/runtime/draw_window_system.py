# どこで: `src/landscape/interactive/runtime/draw_window_system.py`。
# 何を: 描画ウィンドウ・GL レンダラー・フレームドライバを束ね、キー入力（表示モード切替/SVG 保存）を配線する。
# なぜ: `src/landscape/api/run.py` の `run()` を「配線」に寄せ、描画責務を独立させるため。

from __future__ import annotations

import inspect
import logging
from pathlib import Path

import moderngl
from pyglet.window import key

from landscape.core.animation import Animation
from landscape.core.display_mode import DisplayMode
from landscape.core.frame_context import FrameContext, UnderflowPolicy
from landscape.core.primitives import PrimitiveKind
from landscape.core.recording import RecordingRenderer
from landscape.core.renderer import RGBA
from landscape.core.runtime_config import output_root_dir
from landscape.core.scene import SceneDraw
from landscape.core.transform import Transform
from landscape.export.svg import export_svg
from landscape.interactive.draw_window import create_draw_window
from landscape.interactive.gl.draw_renderer import DrawRenderer
from landscape.interactive.render_settings import RenderSettings
from landscape.interactive.runtime.frame_driver import FrameDriver
from landscape.interactive.runtime.frame_scheduler import PygletFrameScheduler

_logger = logging.getLogger(__name__)

# ボタン操作の代わりに使うキー割り当て。
MODE_KEYS: dict[int, DisplayMode] = {
    key.S: DisplayMode.SOLID,
    key.W: DisplayMode.WIREFRAME,
    key.P: DisplayMode.POINT,
}


def _script_stem(draw: SceneDraw) -> str:
    try:
        source = inspect.getsourcefile(draw)
    except TypeError:
        source = None
    return Path(source).stem if source else "landscape"


class DrawWindowSystem:
    """描画（メインウィンドウ）のサブシステム。

    FrameContext から見た Renderer として振る舞い、GL 描画と DrawCall の記録を同時に行う。
    """

    def __init__(
        self,
        draw: SceneDraw,
        *,
        settings: RenderSettings,
        mode: DisplayMode,
        animation: Animation,
        fps: float = 60.0,
        underflow: UnderflowPolicy = "raise",
    ) -> None:
        self._settings = settings

        # 描画用の pyglet window を作成し、その window の OpenGL コンテキストに紐づく renderer を作る。
        self.window = create_draw_window(settings)
        self.window.switch_to()
        self._ctx = moderngl.create_context(require=330)
        self._renderer = DrawRenderer(self._ctx, settings)
        # 最後のフレームを SVG 保存するため、GL 描画と並行して DrawCall を記録しておく。
        self._recorder = RecordingRenderer()

        self._svg_output_path = output_root_dir() / "svg" / f"{_script_stem(draw)}.svg"

        self.driver = FrameDriver(
            draw,
            context=FrameContext(self, mode=mode, underflow=underflow),
            scheduler=PygletFrameScheduler(fps=float(fps)),
            animation=animation,
        )
        self.window.push_handlers(on_key_press=self._on_key_press)

    # ---------- Renderer ----------
    def _framebuffer_size(self) -> tuple[int, int]:
        getter = getattr(self.window, "get_framebuffer_size", None)
        if callable(getter):
            w, h = getter()
            return int(w), int(h)
        return int(self.window.width), int(self.window.height)

    def begin_frame(self) -> None:
        # 他ウィンドウ/他 framebuffer に描かないよう、毎フレーム明示的に切り替えてから描く。
        self.window.switch_to()
        self._ctx.screen.use()
        fb_w, fb_h = self._framebuffer_size()
        self._renderer.viewport(fb_w, fb_h)
        self._renderer.begin_frame()
        self._recorder.begin_frame()

    def draw_primitive(
        self,
        kind: PrimitiveKind,
        color: RGBA,
        transform: Transform,
        *,
        mode: DisplayMode,
    ) -> None:
        self._renderer.draw_primitive(kind, color, transform, mode=mode)
        self._recorder.draw_primitive(kind, color, transform, mode=mode)

    def end_frame(self) -> None:
        self._renderer.end_frame()
        self._recorder.end_frame()
        self.window.flip()

    # ---------- 入力 ----------
    def _on_key_press(self, symbol: int, _modifiers: int) -> None:
        mode = MODE_KEYS.get(symbol)
        if mode is not None:
            self.driver.set_mode(mode)
            return
        if symbol == key.E:
            try:
                path = self.save_svg()
                print(f"Saved SVG: {path}")
            except OSError:
                _logger.exception("Failed to save SVG: %s", self._svg_output_path)

    def save_svg(self) -> Path:
        """最後に描画したフレームを SVG として保存し、保存先パスを返す。"""
        return export_svg(
            self._recorder.last_frame,
            self._svg_output_path,
            canvas_size=self._settings.canvas_size,
            background_color=self._settings.background_color,
            point_size=self._settings.point_size,
        )

    # ---------- ライフサイクル ----------
    def start(self) -> None:
        """アニメーションループを開始する。"""
        self.driver.render()

    def close(self) -> None:
        """GPU / window 資源を解放する。"""
        self.driver.stop()
        # renderer が保持している GPU リソースを破棄してから window を閉じる。
        self._renderer.release()
        self.window.close()


__all__ = ["DrawWindowSystem", "MODE_KEYS"]
