"""
どこで: `src/landscape/core/primitives.py`。
何を: Renderer が描ける固定プリミティブ（正方形/三角形/円/光線/羽根）の頂点・インデックス配列を生成する。
なぜ: 形状データを GL から切り離した純粋関数にし、GPU 転送と SVG export の両方で共有するため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

import numpy as np

CIRCLE_SEGMENTS = 50
RAY_COUNT = 8
BLADE_SEGMENTS = 16


class PrimitiveKind(Enum):
    """描画可能なプリミティブの種類。"""

    SQUARE = "square"
    TRIANGLE = "triangle"
    CIRCLE = "circle"
    RAY_FAN = "ray_fan"
    BLADE_FAN = "blade_fan"


@dataclass(frozen=True, slots=True)
class PrimitiveMesh:
    """1 プリミティブ分の局所座標の頂点配列とインデックス配列。

    Parameters
    ----------
    vertices : np.ndarray
        float32 型 shape (N, 2) の頂点配列（局所座標）。
    indices : np.ndarray
        uint32 型 shape (M,) のインデックス配列。

    Notes
    -----
    配列は writeable=False に固定する（キャッシュを共有するため）。
    """

    vertices: np.ndarray
    indices: np.ndarray

    def __post_init__(self) -> None:
        vertices = np.asarray(self.vertices, dtype=np.float32)
        indices = np.asarray(self.indices, dtype=np.uint32)
        if vertices.ndim != 2 or vertices.shape[1] != 2:
            raise ValueError("vertices は shape (N,2) である必要がある")
        if indices.ndim != 1:
            raise ValueError("indices は 1 次元配列である必要がある")
        if indices.size and int(indices.max()) >= vertices.shape[0]:
            raise ValueError("indices が vertices の範囲外を参照している")
        vertices.setflags(write=False)
        indices.setflags(write=False)
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "indices", indices)

    @property
    def index_count(self) -> int:
        """インデックス数を返す。"""
        return int(self.indices.shape[0])


def _fan_positions(n: int) -> list[tuple[float, float]]:
    """中心 (0,0) と単位円周上の n 点を返す。"""
    positions = [(0.0, 0.0)]
    for i in range(n):
        angle = (math.pi * 2.0) * i / n
        positions.append((math.cos(angle), math.sin(angle)))
    return positions


def _square() -> PrimitiveMesh:
    vertices = [(0.5, 0.5), (-0.5, 0.5), (-0.5, -0.5), (0.5, -0.5)]
    return PrimitiveMesh(vertices=np.array(vertices), indices=np.array([0, 1, 2, 0, 2, 3]))


def _triangle() -> PrimitiveMesh:
    vertices = [(0.0, 0.5), (-0.5, -0.5), (0.5, -0.5)]
    return PrimitiveMesh(vertices=np.array(vertices), indices=np.array([0, 1, 2]))


def _circle() -> PrimitiveMesh:
    n = CIRCLE_SEGMENTS
    # 先頭の [0, 1, n] で円周を閉じる。
    indices = [0, 1, n]
    for i in range(n):
        indices.extend((0, i, i + 1))
    return PrimitiveMesh(vertices=np.array(_fan_positions(n)), indices=np.array(indices))


def _ray_fan() -> PrimitiveMesh:
    indices: list[int] = []
    for i in range(RAY_COUNT):
        indices.extend((0, i + 1))
    return PrimitiveMesh(vertices=np.array(_fan_positions(RAY_COUNT)), indices=np.array(indices))


def _blade_fan() -> PrimitiveMesh:
    # 16 分割した円周のうち 4 区間おきに羽根を 1 枚張る（計 4 枚）。
    indices: list[int] = []
    for i in range(1, BLADE_SEGMENTS, 4):
        indices.extend((0, i, i + 1))
    return PrimitiveMesh(
        vertices=np.array(_fan_positions(BLADE_SEGMENTS)), indices=np.array(indices)
    )


_BUILDERS = {
    PrimitiveKind.SQUARE: _square,
    PrimitiveKind.TRIANGLE: _triangle,
    PrimitiveKind.CIRCLE: _circle,
    PrimitiveKind.RAY_FAN: _ray_fan,
    PrimitiveKind.BLADE_FAN: _blade_fan,
}


@lru_cache(maxsize=None)
def primitive_mesh(kind: PrimitiveKind) -> PrimitiveMesh:
    """`kind` の PrimitiveMesh を返す（キャッシュ）。"""
    return _BUILDERS[PrimitiveKind(kind)]()


__all__ = [
    "BLADE_SEGMENTS",
    "CIRCLE_SEGMENTS",
    "PrimitiveKind",
    "PrimitiveMesh",
    "RAY_COUNT",
    "primitive_mesh",
]
