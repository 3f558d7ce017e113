# どこで: `src/landscape/interactive/gl/draw_renderer.py`。
# 何を: FrameContext からの描画命令を ModernGL の draw call に変換するレンダラーを提供する。
# なぜ: シェーダ設定・メッシュ転送・表示モードのトポロジ選択を core から分離し、責務を明確にするため。

from __future__ import annotations

from typing import Any

import moderngl

from landscape.core.display_mode import DisplayMode, Topology, topology_for
from landscape.core.primitives import PrimitiveKind, primitive_mesh
from landscape.core.renderer import RGBA
from landscape.core.transform import Transform, to_gl_bytes
from landscape.interactive.gl.primitive_mesh import GpuPrimitiveMesh
from landscape.interactive.gl.shader import Shader
from landscape.interactive.render_settings import RenderSettings

_GL_MODES: dict[Topology, int] = {
    Topology.POINTS: moderngl.POINTS,
    Topology.LINE_STRIP: moderngl.LINE_STRIP,
    Topology.LINE_LOOP: moderngl.LINE_LOOP,
    Topology.TRIANGLES: moderngl.TRIANGLES,
    Topology.TRIANGLE_FAN: moderngl.TRIANGLE_FAN,
}


class DrawRenderer:
    """プリミティブを 1 つずつ描くシンプルなレンダラー。"""

    def __init__(self, ctx: Any, settings: RenderSettings) -> None:
        self.ctx = ctx
        self.program = Shader.create_shader(ctx)
        self._settings = settings
        # 形状は不変なので、種類ごとに 1 度だけ upload して使い回す。
        self._meshes: dict[PrimitiveKind, GpuPrimitiveMesh] = {
            kind: GpuPrimitiveMesh(ctx, self.program, primitive_mesh(kind)) for kind in PrimitiveKind
        }
        self.program["point_size"].value = float(settings.point_size) * float(settings.render_scale)
        self.ctx.enable(moderngl.BLEND | moderngl.PROGRAM_POINT_SIZE)

    def viewport(self, width: int, height: int) -> None:
        """ビューポートをウィンドウサイズに合わせて更新する。"""
        self.ctx.viewport = (0, 0, int(width), int(height))

    def clear(self, color: tuple[float, float, float]) -> None:
        """背景色でクリアする。"""
        self.ctx.clear(*color, 1.0)

    def begin_frame(self) -> None:
        """背景をクリアしてフレームを開始する。"""
        self.clear(self._settings.background_color)

    def draw_primitive(
        self,
        kind: PrimitiveKind,
        color: RGBA,
        transform: Transform,
        *,
        mode: DisplayMode,
    ) -> None:
        """`kind` を `transform` と `color` で描画する。表示モードはトポロジの選択にだけ使う。"""
        self.program["model"].write(to_gl_bytes(transform))
        self.program["color"].value = tuple(float(c) for c in color)
        self._meshes[kind].render(_GL_MODES[topology_for(kind, mode)])

    def end_frame(self) -> None:
        return

    def release(self) -> None:
        """GPU リソースを解放する。"""
        for mesh in self._meshes.values():
            mesh.release()
        self._meshes.clear()
        self.program.release()
