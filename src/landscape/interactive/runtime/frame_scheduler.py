# どこで: `src/landscape/interactive/runtime/frame_scheduler.py`。
# 何を: 「次フレームのコールバック予約」と、その予約を取り消すキャンセルトークン（FrameHandle）を提供する。
# なぜ: ループ再開時に保留中のフレームを必ず取り消し、アニメーションループが重複しないようにするため。

from __future__ import annotations

from collections import deque
from typing import Callable, Protocol

import pyglet

FrameCallback = Callable[[float], None]


class FrameHandle:
    """予約済みフレームのキャンセルトークン。

    `cancel()` は冪等。発火済み・取り消し済みの handle に対しては何もしない。
    """

    def __init__(self, cancel: Callable[[], None]) -> None:
        self._cancel = cancel
        self._active = True

    @property
    def active(self) -> bool:
        """まだ発火も取り消しもされていなければ True を返す。"""
        return self._active

    def cancel(self) -> None:
        """予約を取り消す。"""
        if not self._active:
            return
        self._active = False
        self._cancel()

    def _mark_fired(self) -> None:
        self._active = False


class FrameScheduler(Protocol):
    """次フレームのコールバックを 1 回だけ予約する。"""

    def schedule(self, callback: FrameCallback) -> FrameHandle: ...


class PygletFrameScheduler:
    """`pyglet.clock` でフレームを予約するスケジューラ。

    Parameters
    ----------
    fps : float
        目標フレームレート。`<=0` の場合は次の clock tick で即座に呼ぶ。
    """

    def __init__(self, *, fps: float) -> None:
        self._fps = float(fps)

    @property
    def interval(self) -> float:
        """予約間隔（秒）を返す。"""
        return 1.0 / self._fps if self._fps > 0 else 0.0

    def schedule(self, callback: FrameCallback) -> FrameHandle:
        handle: FrameHandle

        def fire(dt: float) -> None:
            handle._mark_fired()
            callback(dt)

        handle = FrameHandle(lambda: pyglet.clock.unschedule(fire))
        # fire は予約ごとに別関数なので、unschedule が他の予約を巻き込まない。
        pyglet.clock.schedule_once(fire, self.interval)
        return handle


class ManualFrameScheduler:
    """`advance()` を呼んだときだけ予約を発火させるスケジューラ（ヘッドレス実行・テスト用）。"""

    def __init__(self, *, dt: float = 1.0 / 60.0) -> None:
        self._dt = float(dt)
        self._pending: deque[tuple[FrameHandle, FrameCallback]] = deque()

    @property
    def pending(self) -> int:
        """取り消されていない予約の数を返す。"""
        return sum(1 for handle, _ in self._pending if handle.active)

    def schedule(self, callback: FrameCallback) -> FrameHandle:
        # 先頭に溜まった取り消し済みの予約は捨てる。
        while self._pending and not self._pending[0][0].active:
            self._pending.popleft()
        handle = FrameHandle(lambda: None)
        self._pending.append((handle, callback))
        return handle

    def advance(self, frames: int = 1) -> int:
        """保留中の予約を最大 `frames` 回発火させ、実際に発火した回数を返す。"""
        fired = 0
        while fired < frames and self._pending:
            handle, callback = self._pending.popleft()
            if not handle.active:
                continue
            handle._mark_fired()
            callback(self._dt)
            fired += 1
        return fired


__all__ = [
    "FrameCallback",
    "FrameHandle",
    "FrameScheduler",
    "ManualFrameScheduler",
    "PygletFrameScheduler",
]
