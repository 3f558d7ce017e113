"""
どこで: `src/landscape/core/frame_context.py`。
何を: 1 フレームのシーン走査で使う「現在の Transform + TransformStack + 表示モード + Renderer」の束を提供する。
なぜ: 行列と表示モードを大域状態に置かず、走査関数へ明示的に引き回せるようにするため。

典型的な使い方::

    ctx.reset()
    with ctx.branch():
        ctx.translate((-0.68, 0.84, 0.0))
        ctx.scale((0.09, 0.09, 1.0))
        ctx.draw(PrimitiveKind.CIRCLE, (1.0, 1.0, 1.0, 1.0))
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Literal

from landscape.core import transform as tf
from landscape.core.display_mode import DisplayMode
from landscape.core.errors import StackImbalanceError
from landscape.core.primitives import PrimitiveKind
from landscape.core.renderer import Renderer, coerce_rgba
from landscape.core.transform import Transform, Vec3
from landscape.core.transform_stack import TransformStack

_logger = logging.getLogger(__name__)

UnderflowPolicy = Literal["raise", "warn"]
UNDERFLOW_POLICIES: tuple[str, ...] = ("raise", "warn")


class FrameContext:
    """シーン走査用の変換コンテキスト。

    Parameters
    ----------
    renderer : Renderer
        `draw()` の委譲先。
    mode : DisplayMode | str
        初期表示モード。
    underflow : {"raise", "warn"}
        pop 過多・フレーム終了時の不整合の扱い。
        - `"raise"`: 例外（StackUnderflowError / StackImbalanceError）を送出する。
        - `"warn"`: warning を記録し、現在の Transform を変えずに続行する。

    Notes
    -----
    合成操作（translate/scale/rotate）は現在の Transform に右から掛ける
    （親 → 子の局所座標系の規約）。
    """

    def __init__(
        self,
        renderer: Renderer,
        *,
        mode: DisplayMode | str = DisplayMode.SOLID,
        underflow: UnderflowPolicy = "raise",
    ) -> None:
        if underflow not in UNDERFLOW_POLICIES:
            raise ValueError(f"underflow は {UNDERFLOW_POLICIES} のいずれか: got={underflow!r}")
        self.renderer = renderer
        self.mode = DisplayMode.parse(mode)
        self.underflow: UnderflowPolicy = underflow
        self.stack = TransformStack()
        self._current: Transform = tf.identity()
        self._draw_count = 0

    @property
    def current(self) -> Transform:
        """現在の Transform（読み取り専用）を返す。"""
        return self._current

    @property
    def draw_count(self) -> int:
        """`begin_frame()` 以降に発行した描画命令の数を返す。"""
        return self._draw_count

    # ---------- フレーム境界 ----------
    def begin_frame(self) -> None:
        """スタックを空にし、現在の Transform を恒等変換に戻す。"""
        self.stack.clear()
        self._current = tf.identity()
        self._draw_count = 0

    def end_frame(self) -> None:
        """フレーム終了時の push/pop 均衡を検査する。

        Raises
        ------
        StackImbalanceError
            `underflow="raise"` でスタックが空でない場合。
        """
        depth = self.stack.depth
        if depth == 0:
            return
        if self.underflow == "raise":
            raise StackImbalanceError(f"フレーム終了時に pop されていない push が残っている: depth={depth}")
        _logger.warning("Unbalanced transform stack at end of frame (depth=%d); clearing", depth)
        self.stack.clear()

    # ---------- 合成 ----------
    def reset(self) -> Transform:
        """現在の Transform を恒等変換に戻して返す（新しい独立した枝の開始）。"""
        self._current = tf.identity()
        return self._current

    def translate(self, offset: Vec3) -> Transform:
        """現在の Transform に平行移動を合成して返す。"""
        self._current = tf.translate(self._current, offset)
        return self._current

    def scale(self, factors: Vec3) -> Transform:
        """現在の Transform に拡大縮小を合成して返す。"""
        self._current = tf.scale(self._current, factors)
        return self._current

    def rotate(self, angle: float, axis: Vec3 = tf.Z_AXIS) -> Transform:
        """現在の Transform に回転を合成して返す（角度は正規化しない）。"""
        self._current = tf.rotate(self._current, angle, axis)
        return self._current

    # ---------- save / restore ----------
    def push(self) -> None:
        """現在の Transform のコピーをスタックへ積む。"""
        self.stack.push(self._current)

    def pop(self) -> Transform:
        """スタック先頭の Transform を現在の Transform に戻して返す。

        `underflow="warn"` かつスタックが空のときは warning を記録し、
        現在の Transform を変えずに返す。
        """
        if self.underflow == "warn" and self.stack.depth == 0:
            _logger.warning("Transform stack is empty; pop ignored")
            return self._current
        self._current = self.stack.pop()
        return self._current

    @contextmanager
    def branch(self) -> Iterator[Transform]:
        """push/pop を対にしたスコープを返す。

        例外や早期 return を含むすべての経路で、抜けるときに pop する。
        """
        self.push()
        try:
            yield self._current
        finally:
            self.pop()

    # ---------- 描画 ----------
    def draw(self, kind: PrimitiveKind, color: Sequence[float]) -> None:
        """現在の Transform で `kind` を描くよう Renderer へ指示する。"""
        self.renderer.draw_primitive(
            PrimitiveKind(kind),
            coerce_rgba(color),
            self._current,
            mode=self.mode,
        )
        self._draw_count += 1


__all__ = ["FrameContext", "UNDERFLOW_POLICIES", "UnderflowPolicy"]
