"""
どこで: `src/landscape/export/svg.py`。
何を: 記録済みフレーム（DrawCall 列）を SVG として保存する関数を提供する。
なぜ: interactive 依存なしの headless export を用意し、フレームの見た目を GL 無しで確認できるようにするため。
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from pathlib import Path

import numpy as np

from landscape.core.display_mode import Topology, topology_for
from landscape.core.primitives import primitive_mesh
from landscape.core.renderer import RGBA, DrawCall
from landscape.core.transform import apply

_SVG_NS = "http://www.w3.org/2000/svg"
_FLOAT_DECIMALS = 3


def _fmt(value: float, *, decimals: int = _FLOAT_DECIMALS) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-0") and float(text) == 0.0:
        return text[1:]
    return text


def _rgb01_to_hex(color: RGBA) -> str:
    """0..1 float RGB(A) を #RRGGBB に変換して返す（alpha は無視）。"""

    def _c(v: float) -> int:
        iv = int(round(float(v) * 255.0))
        return 0 if iv < 0 else 255 if iv > 255 else iv

    return f"#{_c(color[0]):02X}{_c(color[1]):02X}{_c(color[2]):02X}"


def _clip_to_canvas(xy: np.ndarray, *, canvas_size: tuple[int, int]) -> np.ndarray:
    """clip 空間 [-1, 1]^2 の点列を SVG のキャンバス座標（y 下向き）へ写して返す。"""
    w, h = canvas_size
    out = np.empty((xy.shape[0], 2), dtype=np.float64)
    out[:, 0] = (xy[:, 0] + 1.0) * 0.5 * float(w)
    out[:, 1] = (1.0 - xy[:, 1]) * 0.5 * float(h)
    return out


def _points_to_d(points: np.ndarray, *, closed: bool) -> str:
    parts = [f"M {_fmt(points[0, 0])} {_fmt(points[0, 1])}"]
    for xy in points[1:]:
        parts.append(f"L {_fmt(xy[0])} {_fmt(xy[1])}")
    if closed:
        parts.append("Z")
    return " ".join(parts)


def _iter_triangles(indices: np.ndarray, topology: Topology) -> Iterator[tuple[int, int, int]]:
    """TRIANGLES / TRIANGLE_FAN のインデックス列から非退化三角形を列挙する。"""
    idx = [int(i) for i in indices]
    if topology is Topology.TRIANGLES:
        tris = [tuple(idx[i : i + 3]) for i in range(0, len(idx) - 2, 3)]
    else:
        tris = [(idx[0], idx[i], idx[i + 1]) for i in range(1, len(idx) - 1)]
    for a, b, c in tris:
        if a == b or b == c or a == c:
            continue
        yield a, b, c


def _call_to_elements(call: DrawCall, *, canvas_size: tuple[int, int], point_size: float) -> list[str]:
    mesh = primitive_mesh(call.kind)
    world = apply(call.transform, mesh.vertices)
    xy = _clip_to_canvas(world[:, :2], canvas_size=canvas_size)
    color = _rgb01_to_hex(call.color)
    alpha = _fmt(call.color[3])
    topology = topology_for(call.kind, call.mode)

    elements: list[str] = []
    if topology in (Topology.TRIANGLES, Topology.TRIANGLE_FAN):
        for a, b, c in _iter_triangles(mesh.indices, topology):
            d = _points_to_d(xy[[a, b, c]], closed=True)
            elements.append(f'  <path d="{d}" fill="{color}" fill-opacity="{alpha}" stroke="none" />')
    elif topology in (Topology.LINE_LOOP, Topology.LINE_STRIP):
        if mesh.index_count >= 2:
            d = _points_to_d(xy[mesh.indices], closed=topology is Topology.LINE_LOOP)
            elements.append(
                f'  <path d="{d}" fill="none" stroke="{color}" stroke-opacity="{alpha}" stroke-width="1" />'
            )
    else:
        r = _fmt(float(point_size) * 0.5)
        seen: set[int] = set()
        for i in mesh.indices:
            i = int(i)
            if i in seen:
                continue
            seen.add(i)
            elements.append(
                f'  <circle cx="{_fmt(xy[i, 0])}" cy="{_fmt(xy[i, 1])}" r="{r}" '
                f'fill="{color}" fill-opacity="{alpha}" />'
            )
    return elements


def export_svg(
    calls: Sequence[DrawCall],
    path: str | Path,
    *,
    canvas_size: tuple[int, int],
    background_color: tuple[float, float, float] | None = None,
    point_size: float = 6.0,
) -> Path:
    """DrawCall 列を描画順に SVG として保存する。

    Parameters
    ----------
    calls : Sequence[DrawCall]
        1 フレーム分の描画命令（描画順）。
    path : str or Path
        出力先パス。
    canvas_size : tuple[int, int]
        キャンバス寸法（px）。clip 空間 [-1, 1]^2 をこの矩形へ写す。
    background_color : tuple[float, float, float] or None, optional
        背景色。None の場合は背景矩形を出力しない。
    point_size : float, default 6.0
        Point モードの点の直径（px）。

    Returns
    -------
    Path
        保存先パス。

    Raises
    ------
    ValueError
        canvas_size が正でない場合。
    """
    _path = Path(path)
    canvas_w, canvas_h = canvas_size
    if canvas_w <= 0 or canvas_h <= 0:
        raise ValueError("canvas_size は正の値である必要がある")

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        (
            f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {int(canvas_w)} {int(canvas_h)}" '
            f'width="{int(canvas_w)}" height="{int(canvas_h)}">'
        )
    )
    if background_color is not None:
        bg = _rgb01_to_hex((*background_color, 1.0))
        lines.append(f'  <rect x="0" y="0" width="{int(canvas_w)}" height="{int(canvas_h)}" fill="{bg}" />')

    for call in calls:
        lines.extend(
            _call_to_elements(call, canvas_size=(int(canvas_w), int(canvas_h)), point_size=point_size)
        )

    lines.append("</svg>")

    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write("\n".join(lines) + "\n")

    return _path


__all__ = ["export_svg"]
