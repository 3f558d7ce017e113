# どこで: `src/landscape/core/recording.py`。
# 何を: 描画命令を DrawCall として記録するだけのヘッドレス Renderer を提供する。
# なぜ: GL 無しでシーン走査を検証し、最後のフレームを SVG へ書き出せるようにするため。

from __future__ import annotations

from landscape.core.display_mode import DisplayMode
from landscape.core.primitives import PrimitiveKind
from landscape.core.renderer import RGBA, DrawCall
from landscape.core.transform import Transform


class RecordingRenderer:
    """フレームごとの DrawCall 列を保持する Renderer。"""

    def __init__(self) -> None:
        self._current: list[DrawCall] = []
        self._last_frame: list[DrawCall] = []
        self.frame_count = 0

    @property
    def calls(self) -> list[DrawCall]:
        """現在のフレームで記録済みの DrawCall を返す。"""
        return list(self._current)

    @property
    def last_frame(self) -> list[DrawCall]:
        """最後に完了したフレームの DrawCall を返す。"""
        return list(self._last_frame)

    def begin_frame(self) -> None:
        self._current = []

    def draw_primitive(
        self,
        kind: PrimitiveKind,
        color: RGBA,
        transform: Transform,
        *,
        mode: DisplayMode,
    ) -> None:
        self._current.append(DrawCall(kind=kind, color=color, transform=transform, mode=mode))

    def end_frame(self) -> None:
        self._last_frame = self._current
        self._current = []
        self.frame_count += 1


__all__ = ["RecordingRenderer"]
