"""DrawWindowSystem のキー操作（表示モード切替 / SVG 保存）のテスト。"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pyglet.window import key

from landscape.core import transform as tf
from landscape.core.display_mode import DisplayMode
from landscape.core.primitives import PrimitiveKind
from landscape.core.recording import RecordingRenderer
from landscape.interactive.render_settings import RenderSettings
from landscape.interactive.runtime.draw_window_system import DrawWindowSystem


class _DummyDriver:
    def __init__(self) -> None:
        self.modes: list[DisplayMode] = []

    def set_mode(self, mode: DisplayMode) -> None:
        self.modes.append(mode)


def _make_system(svg_path: Path) -> tuple[DrawWindowSystem, _DummyDriver]:
    # __init__ を通さず（window/GL を作らず）、キー処理に必要な属性だけを設定する
    system = object.__new__(DrawWindowSystem)
    driver = _DummyDriver()
    recorder = RecordingRenderer()
    recorder.begin_frame()
    recorder.draw_primitive(
        PrimitiveKind.SQUARE, (0.0, 0.0, 0.0, 1.0), tf.identity(), mode=DisplayMode.SOLID
    )
    recorder.end_frame()
    system.driver = driver  # type: ignore[assignment]
    system._recorder = recorder  # type: ignore[attr-defined]
    system._settings = RenderSettings(canvas_size=(100, 100))  # type: ignore[attr-defined]
    system._svg_output_path = svg_path  # type: ignore[attr-defined]
    return system, driver


def test_mode_keys_switch_display_mode(tmp_path: Path) -> None:
    system, driver = _make_system(tmp_path / "out.svg")

    system._on_key_press(key.W, 0)
    system._on_key_press(key.P, 0)
    system._on_key_press(key.S, 0)
    system._on_key_press(key.A, 0)

    assert driver.modes == [DisplayMode.WIREFRAME, DisplayMode.POINT, DisplayMode.SOLID]
    assert not (tmp_path / "out.svg").exists()


def test_e_key_saves_last_frame_as_svg(tmp_path: Path) -> None:
    out_path = tmp_path / "svg" / "scene.svg"
    system, driver = _make_system(out_path)

    system._on_key_press(key.E, 0)

    assert driver.modes == []
    text = out_path.read_text(encoding="utf-8")
    assert text.count("<path ") == 2


def test_e_key_logs_when_svg_cannot_be_written(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", encoding="utf-8")
    system, _ = _make_system(blocker / "scene.svg")

    with caplog.at_level(logging.ERROR, logger="landscape.interactive.runtime.draw_window_system"):
        system._on_key_press(key.E, 0)

    assert any("Failed to save SVG" in r.getMessage() for r in caplog.records)
