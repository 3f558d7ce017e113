"""
どこで: `src/landscape/core/renderer.py`。
何を: core が駆動する Renderer の境界（Protocol）と、1 回分の描画命令 DrawCall を定義する。
なぜ: core を GL/ウィンドウから独立させ、ヘッドレスな記録や export と差し替え可能にするため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, TypeAlias

from landscape.core.display_mode import DisplayMode
from landscape.core.primitives import PrimitiveKind
from landscape.core.transform import Transform, as_transform

RGBA: TypeAlias = tuple[float, float, float, float]


def coerce_rgba(value: Sequence[float]) -> RGBA:
    """`(r, g, b)` または `(r, g, b, a)`（0..1）を RGBA タプルに正規化して返す。

    Raises
    ------
    ValueError
        長さ 3/4 のシーケンスでない場合。
    """
    try:
        items = [float(v) for v in value]
    except Exception as exc:
        raise ValueError(f"color は数値のシーケンスである必要がある: {value!r}") from exc
    if len(items) == 3:
        items.append(1.0)
    if len(items) != 4:
        raise ValueError(f"color は長さ 3 または 4 である必要がある: {value!r}")
    r, g, b, a = items
    return (r, g, b, a)


@dataclass(frozen=True, slots=True)
class DrawCall:
    """1 プリミティブ分の描画命令。transform は呼び出し時点のスナップショット。"""

    kind: PrimitiveKind
    color: RGBA
    transform: Transform
    mode: DisplayMode

    def __post_init__(self) -> None:
        object.__setattr__(self, "transform", as_transform(self.transform))


class Renderer(Protocol):
    """FrameContext から描画命令を受け取る側の境界。

    `draw_primitive` は transform を値として受け取り、呼び出しの後で保持しない。
    """

    def begin_frame(self) -> None: ...

    def draw_primitive(
        self,
        kind: PrimitiveKind,
        color: RGBA,
        transform: Transform,
        *,
        mode: DisplayMode,
    ) -> None: ...

    def end_frame(self) -> None: ...


__all__ = ["DrawCall", "RGBA", "Renderer", "coerce_rgba"]
