"""
どこで: `src/landscape/core/display_mode.py`。
何を: 表示モード（Solid/Wireframe/Point）と、(PrimitiveKind, DisplayMode) → 描画トポロジの対応表を定義する。
なぜ: 各プリミティブの描画関数で文字列比較を繰り返さず、1 箇所の表引きに集約するため。
"""

from __future__ import annotations

from enum import Enum

from landscape.core.primitives import PrimitiveKind


class DisplayMode(Enum):
    """描画モード。Transform の合成には一切影響しない。"""

    SOLID = "solid"
    WIREFRAME = "wireframe"
    POINT = "point"

    @classmethod
    def parse(cls, value: "DisplayMode | str") -> "DisplayMode":
        """`"solid"` / `"Wireframe"` / `"p"` のような表記を DisplayMode に変換して返す。

        Raises
        ------
        ValueError
            未知の表記の場合。
        """
        if isinstance(value, DisplayMode):
            return value
        text = str(value).strip().lower()
        for mode in cls:
            if text in (mode.value, mode.value[0]):
                return mode
        raise ValueError(f"未知の display mode: {value!r}")


class Topology(Enum):
    """インデックス列の解釈（GL の draw mode に対応）。"""

    POINTS = "points"
    LINE_STRIP = "line_strip"
    LINE_LOOP = "line_loop"
    TRIANGLES = "triangles"
    TRIANGLE_FAN = "triangle_fan"


_FILLED_SHAPE = {
    DisplayMode.SOLID: Topology.TRIANGLES,
    DisplayMode.WIREFRAME: Topology.LINE_LOOP,
    DisplayMode.POINT: Topology.POINTS,
}

_TOPOLOGY: dict[tuple[PrimitiveKind, DisplayMode], Topology] = {
    **{(PrimitiveKind.SQUARE, m): t for m, t in _FILLED_SHAPE.items()},
    **{(PrimitiveKind.TRIANGLE, m): t for m, t in _FILLED_SHAPE.items()},
    **{(PrimitiveKind.CIRCLE, m): t for m, t in _FILLED_SHAPE.items()},
    # 光線は Solid でも線として描く。
    (PrimitiveKind.RAY_FAN, DisplayMode.SOLID): Topology.LINE_STRIP,
    (PrimitiveKind.RAY_FAN, DisplayMode.WIREFRAME): Topology.LINE_STRIP,
    (PrimitiveKind.RAY_FAN, DisplayMode.POINT): Topology.POINTS,
    (PrimitiveKind.BLADE_FAN, DisplayMode.SOLID): Topology.TRIANGLE_FAN,
    (PrimitiveKind.BLADE_FAN, DisplayMode.WIREFRAME): Topology.LINE_LOOP,
    (PrimitiveKind.BLADE_FAN, DisplayMode.POINT): Topology.POINTS,
}


def topology_for(kind: PrimitiveKind, mode: DisplayMode) -> Topology:
    """`kind` を `mode` で描くときのトポロジを返す。"""
    return _TOPOLOGY[(PrimitiveKind(kind), DisplayMode(mode))]


__all__ = ["DisplayMode", "Topology", "topology_for"]
