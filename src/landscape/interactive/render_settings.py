# どこで: `src/landscape/interactive/render_settings.py`。
# 何を: interactive 描画設定の束を表すデータクラスを定義する。
# なぜ: `run` の引数を簡潔に保ちつつ、interactive 側の設定を一元管理するため。

from __future__ import annotations

from dataclasses import dataclass

from landscape.core.runtime_config import RuntimeConfig


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """リアルタイム描画に用いる設定値の集合。"""

    background_color: tuple[float, float, float] = (0.95, 0.95, 0.95)
    canvas_size: tuple[int, int] = (600, 600)
    render_scale: float = 1.0
    point_size: float = 6.0
    caption: str = "landscape"

    @classmethod
    def from_config(cls, cfg: RuntimeConfig, *, render_scale: float = 1.0) -> "RenderSettings":
        """RuntimeConfig から RenderSettings を組み立てて返す。"""
        return cls(
            background_color=cfg.background_color,
            canvas_size=cfg.canvas_size,
            render_scale=float(render_scale),
            point_size=cfg.point_size,
            caption=cfg.caption,
        )
