"""
どこで: `src/landscape/interactive/gl/primitive_mesh.py`。
何を: 1 種類のプリミティブの VBO/IBO/VAO を確保・解放する GpuPrimitiveMesh を提供する。
なぜ: GPU 転送の詳細を Renderer から切り離し、形状ごとに 1 度だけ upload して使い回すため。
"""

from __future__ import annotations

from typing import Any

import numpy as np

from landscape.core.primitives import PrimitiveMesh


class GpuPrimitiveMesh:
    """
    静的なプリミティブ形状を GPU に常駐させる
    """

    def __init__(self, ctx: Any, program: Any, mesh: PrimitiveMesh) -> None:
        """
        ctx: moderngl コンテキスト
        program: `in_vert`（vec2）を受け取るシェーダープログラム
        mesh: 局所座標の頂点とインデックス（形状は不変なので初期化時に 1 回だけ送る）
        """
        self.ctx = ctx
        self.program = program
        vertices = np.ascontiguousarray(mesh.vertices, dtype=np.float32)
        indices = np.ascontiguousarray(mesh.indices, dtype=np.uint32)
        self.vbo = ctx.buffer(vertices.tobytes())
        self.ibo = ctx.buffer(indices.tobytes())
        self.vao = ctx.simple_vertex_array(
            program, self.vbo, "in_vert", index_buffer=self.ibo, index_element_size=4
        )
        self.index_count: int = int(indices.shape[0])

    def render(self, mode: int) -> None:
        """インデックス全体を `mode` で描画する。"""
        self.vao.render(mode=mode, vertices=self.index_count)

    def release(self) -> None:
        """GPUのメモリを解放する（終了時に使う）"""
        self.vao.release()
        self.vbo.release()
        self.ibo.release()
