# どこで: `src/landscape/interactive/runtime/frame_driver.py`。
# 何を: 表示モード切替（set_mode）とアニメーションループ（render）を担うフレームドライバを提供する。
# なぜ: 「保留フレームの取り消し → 変換のリセット → 1 回の走査 → 次フレーム予約」を 1 箇所に閉じ込めるため。

from __future__ import annotations

from landscape.core.animation import Animation, AnimationState
from landscape.core.display_mode import DisplayMode
from landscape.core.frame_context import FrameContext
from landscape.core.scene import SceneDraw, render_frame
from landscape.interactive.runtime.frame_scheduler import FrameHandle, FrameScheduler


class FrameDriver:
    """シーン走査を毎フレーム回すドライバ。

    Parameters
    ----------
    draw : SceneDraw
        `draw(ctx, state)` でシーンを描く関数。
    context : FrameContext
        変換スタック・表示モード・Renderer の束。ドライバが専有する。
    scheduler : FrameScheduler
        次フレームの予約先。
    animation : Animation | None
        毎フレーム 1 回 tick するアニメーション。None なら既定値で生成する。

    Notes
    -----
    アクティブなループは常に高々 1 本。`render()` は先に保留中の予約を取り消してから
    次を予約するため、何度呼んでもループは重複しない。
    """

    def __init__(
        self,
        draw: SceneDraw,
        *,
        context: FrameContext,
        scheduler: FrameScheduler,
        animation: Animation | None = None,
    ) -> None:
        self._draw = draw
        self.context = context
        self._scheduler = scheduler
        self.animation = animation if animation is not None else Animation()
        self._pending: FrameHandle | None = None
        self._frames = 0

    @property
    def mode(self) -> DisplayMode:
        """現在の表示モードを返す。"""
        return self.context.mode

    @property
    def running(self) -> bool:
        """次フレームが予約済みなら True を返す。"""
        return self._pending is not None and self._pending.active

    @property
    def frames(self) -> int:
        """これまでに描いたフレーム数を返す。"""
        return self._frames

    def set_mode(self, mode: DisplayMode | str) -> None:
        """表示モードを切り替え、ループを再開する。"""
        self.context.mode = DisplayMode.parse(mode)
        self.render()

    def render(self) -> None:
        """保留フレームを取り消し、1 フレーム描いて次フレームを予約する。"""
        self.stop()
        self._frame()
        self._schedule_next()

    def step(self) -> AnimationState:
        """予約せずに 1 フレームだけ描き、そのフレームの AnimationState を返す。"""
        return self._frame()

    def stop(self) -> None:
        """保留中のフレームがあれば取り消す。"""
        pending = self._pending
        self._pending = None
        if pending is not None:
            pending.cancel()

    def _frame(self) -> AnimationState:
        # アニメーション量はフレーム冒頭で 1 回だけ更新し、同じフレームの描画はその値を読む。
        state = self.animation.tick()
        render_frame(self.context, self._draw, state)
        self._frames += 1
        return state

    def _on_tick(self, _dt: float) -> None:
        self._pending = None
        self._frame()
        self._schedule_next()

    def _schedule_next(self) -> None:
        self._pending = self._scheduler.schedule(self._on_tick)


__all__ = ["FrameDriver"]
