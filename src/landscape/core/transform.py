"""
どこで: `src/landscape/core/transform.py`。
何を: 4x4 アフィン行列（Transform）の生成と合成（translate/scale/rotate）を提供する。
なぜ: 合成を「新しい行列を返す純粋関数」に限定し、描画呼び出し間でのエイリアシングを防ぐため。
"""

from __future__ import annotations

import math
from typing import Sequence, TypeAlias

import numpy as np

Transform: TypeAlias = np.ndarray
Vec3: TypeAlias = Sequence[float]

Z_AXIS: tuple[float, float, float] = (0.0, 0.0, 1.0)


def _frozen(m: np.ndarray) -> Transform:
    m.setflags(write=False)
    return m


def _vec3(value: Vec3, *, name: str) -> tuple[float, float, float]:
    try:
        x, y, z = value  # type: ignore[misc]
    except Exception as exc:
        raise ValueError(f"{name} は長さ 3 のシーケンスである必要がある: got={value!r}") from exc
    return float(x), float(y), float(z)


def as_transform(m: object) -> Transform:
    """任意の 4x4 配列を読み取り専用の Transform（float64 のコピー）に変換して返す。

    Raises
    ------
    ValueError
        shape が (4, 4) でない場合。
    """
    arr = np.array(m, dtype=np.float64, copy=True)
    if arr.shape != (4, 4):
        raise ValueError(f"Transform は shape (4, 4) である必要がある: got={arr.shape}")
    return _frozen(arr)


def identity() -> Transform:
    """恒等変換を返す。"""
    return _frozen(np.eye(4, dtype=np.float64))


def translate(t: Transform, offset: Vec3) -> Transform:
    """`t` の局所座標系で `offset` だけ平行移動した Transform を返す（`t @ T`）。

    Notes
    -----
    z 成分も行列へ反映する（2D シーンでは通常 0）。
    """
    dx, dy, dz = _vec3(offset, name="offset")
    m = np.eye(4, dtype=np.float64)
    m[0, 3] = dx
    m[1, 3] = dy
    m[2, 3] = dz
    return _frozen(np.asarray(t, dtype=np.float64) @ m)


def scale(t: Transform, factors: Vec3) -> Transform:
    """`t` の局所軸を成分ごとに拡大縮小した Transform を返す（`t @ S`）。

    0 を含む倍率も受け付ける（形状を線や点に潰す用途がある）。
    """
    sx, sy, sz = _vec3(factors, name="factors")
    m = np.diag([sx, sy, sz, 1.0]).astype(np.float64, copy=False)
    return _frozen(np.asarray(t, dtype=np.float64) @ m)


def rotation_matrix(angle: float, axis: Vec3 = Z_AXIS) -> Transform:
    """`axis` まわりに `angle` [rad] 回転する 4x4 行列を返す。

    Parameters
    ----------
    angle : float
        回転角 [rad]。2π で正規化しない（任意の有限値をそのまま使う）。
    axis : Vec3
        回転軸。内部で正規化する。

    Raises
    ------
    ValueError
        回転軸の長さが 0 の場合。
    """
    x, y, z = _vec3(axis, name="axis")
    length = math.sqrt(x * x + y * y + z * z)
    if length == 0.0:
        raise ValueError(f"回転軸の長さが 0: axis={axis!r}")
    x, y, z = x / length, y / length, z / length

    # 非有限値は numpy 側で NaN として伝播させる（検証しない）。
    a = np.float64(angle)
    s = float(np.sin(a))
    c = float(np.cos(a))
    k = 1.0 - c

    m = np.eye(4, dtype=np.float64)
    m[0, 0] = x * x * k + c
    m[0, 1] = x * y * k - z * s
    m[0, 2] = x * z * k + y * s
    m[1, 0] = y * x * k + z * s
    m[1, 1] = y * y * k + c
    m[1, 2] = y * z * k - x * s
    m[2, 0] = z * x * k - y * s
    m[2, 1] = z * y * k + x * s
    m[2, 2] = z * z * k + c
    return _frozen(m)


def rotate(t: Transform, angle: float, axis: Vec3 = Z_AXIS) -> Transform:
    """`t` の局所座標系で `axis` まわりに回転した Transform を返す（`t @ R`）。"""
    return _frozen(np.asarray(t, dtype=np.float64) @ rotation_matrix(angle, axis))


def apply(t: Transform, points: np.ndarray) -> np.ndarray:
    """局所座標の点列を world 座標へ写して返す。

    Parameters
    ----------
    t : Transform
        局所 → world の変換。
    points : np.ndarray
        shape (N, 2) または (N, 3)。2 列の場合 z=0 とみなす。

    Returns
    -------
    np.ndarray
        shape (N, 3) の float64 配列。
    """
    pts = np.asarray(points, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] not in (2, 3):
        raise ValueError(f"points は shape (N, 2|3) である必要がある: got={pts.shape}")
    n = pts.shape[0]
    homo = np.zeros((n, 4), dtype=np.float64)
    homo[:, : pts.shape[1]] = pts
    homo[:, 3] = 1.0
    out = homo @ np.asarray(t, dtype=np.float64).T
    return out[:, :3]


def to_gl_bytes(t: Transform) -> bytes:
    """uniform mat4 へ書き込む column-major float32 バイト列を返す。"""
    return np.asarray(t, dtype="f4").T.tobytes()


__all__ = [
    "Transform",
    "Vec3",
    "Z_AXIS",
    "apply",
    "as_transform",
    "identity",
    "rotate",
    "rotation_matrix",
    "scale",
    "to_gl_bytes",
    "translate",
]
