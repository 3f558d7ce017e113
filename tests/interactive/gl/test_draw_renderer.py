from __future__ import annotations

import moderngl
import numpy as np

from landscape.core import transform as tf
from landscape.core.display_mode import DisplayMode
from landscape.core.primitives import PrimitiveKind, primitive_mesh
from landscape.interactive.gl.draw_renderer import DrawRenderer
from landscape.interactive.render_settings import RenderSettings


class _DummyUniform:
    def __init__(self) -> None:
        self.value: object = None
        self.written: list[bytes] = []

    def write(self, data: bytes) -> None:
        self.written.append(bytes(data))


class _DummyProgram:
    def __init__(self, **sources: str) -> None:
        self.sources = sources
        self.uniforms: dict[str, _DummyUniform] = {}
        self.released = False

    def __getitem__(self, name: str) -> _DummyUniform:
        return self.uniforms.setdefault(name, _DummyUniform())

    def release(self) -> None:
        self.released = True


class _DummyBuffer:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.released = False

    def release(self) -> None:
        self.released = True


class _DummyVAO:
    def __init__(self, ibo: _DummyBuffer) -> None:
        self.ibo = ibo
        self.render_calls: list[tuple[int, int]] = []
        self.released = False

    def render(self, mode: int, vertices: int) -> None:
        self.render_calls.append((mode, vertices))

    def release(self) -> None:
        self.released = True


class _DummyContext:
    def __init__(self) -> None:
        self.programs: list[_DummyProgram] = []
        self.buffers: list[_DummyBuffer] = []
        self.vaos: list[_DummyVAO] = []
        self.enabled: int = 0
        self.clear_calls: list[tuple[float, ...]] = []
        self.viewport: tuple[int, int, int, int] | None = None

    def program(self, **sources: str) -> _DummyProgram:
        prog = _DummyProgram(**sources)
        self.programs.append(prog)
        return prog

    def buffer(self, data: bytes) -> _DummyBuffer:
        buf = _DummyBuffer(data)
        self.buffers.append(buf)
        return buf

    def simple_vertex_array(self, program, vbo, *attrs, index_buffer, index_element_size) -> _DummyVAO:
        assert attrs == ("in_vert",)
        assert index_element_size == 4
        vao = _DummyVAO(index_buffer)
        self.vaos.append(vao)
        return vao

    def enable(self, flags: int) -> None:
        self.enabled |= flags

    def clear(self, *rgba: float) -> None:
        self.clear_calls.append(rgba)


def _make_renderer(**kwargs) -> tuple[DrawRenderer, _DummyContext]:
    ctx = _DummyContext()
    renderer = DrawRenderer(ctx, RenderSettings(**kwargs))
    return renderer, ctx


def _vao_for(renderer: DrawRenderer, kind: PrimitiveKind) -> _DummyVAO:
    return renderer._meshes[kind].vao  # type: ignore[return-value]


def test_meshes_are_uploaded_once_per_kind() -> None:
    renderer, ctx = _make_renderer()

    assert len(ctx.vaos) == len(PrimitiveKind)
    # VBO と IBO の 2 本ずつ
    assert len(ctx.buffers) == 2 * len(PrimitiveKind)
    ibo = _vao_for(renderer, PrimitiveKind.CIRCLE).ibo
    expected = primitive_mesh(PrimitiveKind.CIRCLE).indices.astype(np.uint32).tobytes()
    assert ibo.data == expected
    assert ctx.enabled & moderngl.PROGRAM_POINT_SIZE


def test_point_size_uniform_follows_render_scale() -> None:
    renderer, _ = _make_renderer(point_size=4.0, render_scale=2.0)
    assert renderer.program["point_size"].value == 8.0


def test_draw_primitive_writes_uniforms_and_picks_topology() -> None:
    renderer, _ = _make_renderer()
    t = tf.translate(tf.identity(), (0.25, -0.5, 0.0))

    renderer.draw_primitive(PrimitiveKind.RAY_FAN, (1.0, 0.5, 0.0, 1.0), t, mode=DisplayMode.SOLID)

    assert renderer.program["model"].written == [tf.to_gl_bytes(t)]
    assert renderer.program["color"].value == (1.0, 0.5, 0.0, 1.0)
    # 光線は表示モードによらず線として描く（8 本 x 2 頂点）。
    assert _vao_for(renderer, PrimitiveKind.RAY_FAN).render_calls == [(moderngl.LINE_STRIP, 16)]


def test_display_mode_only_changes_topology() -> None:
    renderer, _ = _make_renderer()
    t = tf.identity()
    color = (0.0, 0.0, 1.0, 1.0)

    for mode in DisplayMode:
        renderer.draw_primitive(PrimitiveKind.SQUARE, color, t, mode=mode)

    calls = _vao_for(renderer, PrimitiveKind.SQUARE).render_calls
    assert calls == [
        (moderngl.TRIANGLES, 6),
        (moderngl.LINE_LOOP, 6),
        (moderngl.POINTS, 6),
    ]
    assert len(set(renderer.program["model"].written)) == 1


def test_begin_frame_clears_to_background() -> None:
    renderer, ctx = _make_renderer(background_color=(0.1, 0.2, 0.3))
    renderer.viewport(640, 480)
    renderer.begin_frame()

    assert ctx.viewport == (0, 0, 640, 480)
    assert ctx.clear_calls == [(0.1, 0.2, 0.3, 1.0)]


def test_release_frees_gpu_resources() -> None:
    renderer, ctx = _make_renderer()
    renderer.release()

    assert all(v.released for v in ctx.vaos)
    assert all(b.released for b in ctx.buffers)
    assert ctx.programs[0].released
