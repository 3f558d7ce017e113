# どこで: `src/landscape/interactive/runtime/__init__.py`。
# 何を: フレーム予約（FrameScheduler）とフレームドライバ（FrameDriver）を公開する。
# なぜ: ウィンドウを持たない経路（テスト・ヘッドレス実行）からもアニメーションループを組めるようにするため。

from __future__ import annotations

from landscape.interactive.runtime.frame_driver import FrameDriver
from landscape.interactive.runtime.frame_scheduler import (
    FrameHandle,
    FrameScheduler,
    ManualFrameScheduler,
    PygletFrameScheduler,
)

__all__ = [
    "FrameDriver",
    "FrameHandle",
    "FrameScheduler",
    "ManualFrameScheduler",
    "PygletFrameScheduler",
]
