# どこで: `src/landscape/interactive/gl/shader.py`。
# 何を: プリミティブ描画用の GLSL ソースと ModernGL プログラム生成を提供する。
# なぜ: シェーダ文字列を Renderer から分離し、uniform 名（model/color/point_size）を一箇所で管理するため。

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330

in vec2 in_vert;
uniform mat4 model;
uniform float point_size;

void main() {
    gl_Position = model * vec4(in_vert, 0.0, 1.0);
    gl_PointSize = point_size;
}
"""

FRAGMENT_SHADER = """
#version 330

uniform vec4 color;
out vec4 frag_color;

void main() {
    frag_color = color;
}
"""


class Shader:
    """プリミティブ用シェーダプログラムのファクトリ。"""

    @staticmethod
    def create_shader(ctx: Any) -> Any:
        """`ctx` 上にプログラムをコンパイル・リンクして返す。"""
        return ctx.program(vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER)
