# どこで: `src/landscape/core/animation.py`。
# 何を: 毎フレーム更新するアニメーション量（回転角・往復移動量と向き）を保持・更新する。
# なぜ: フレームドライバだけが書き換える状態を 1 つのオブジェクトに閉じ込め、描画側へは不変スナップショットで渡すため。

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ROTATION_SPEED = 0.01
DEFAULT_TRANSLATION_SPEED = 0.003
DEFAULT_TRANSLATION_RANGE = 0.7


@dataclass(frozen=True, slots=True)
class AnimationState:
    """1 フレーム分のアニメーション量。"""

    rotation_angle: float = 0.0
    translation_x: float = 0.0
    direction: int = 1
    frame_index: int = 0


class Animation:
    """回転と往復移動のアニメーション。

    Notes
    -----
    角度は毎 tick `rotation_angle += rotation_speed` の逐次加算で進める。
    N tick 後の値は θ₀ に Δ を N 回順に足したものと一致する（2π で折り返さない）。
    """

    def __init__(
        self,
        *,
        rotation_speed: float = DEFAULT_ROTATION_SPEED,
        translation_speed: float = DEFAULT_TRANSLATION_SPEED,
        translation_range: float = DEFAULT_TRANSLATION_RANGE,
        initial: AnimationState | None = None,
    ) -> None:
        if translation_range < 0:
            raise ValueError(f"translation_range は 0 以上である必要がある: got={translation_range}")
        self.rotation_speed = float(rotation_speed)
        self.translation_speed = float(translation_speed)
        self.translation_range = float(translation_range)
        self._initial = initial if initial is not None else AnimationState()
        self._state = self._initial

    @property
    def state(self) -> AnimationState:
        """現在のスナップショットを返す。"""
        return self._state

    def tick(self) -> AnimationState:
        """1 フレーム進め、新しいスナップショットを返す。"""
        s = self._state
        angle = s.rotation_angle + self.rotation_speed
        x = s.translation_x + self.translation_speed * s.direction
        direction = s.direction
        # 範囲を超えたフレームで向きだけ反転する（位置はクランプしない）。
        if abs(x) > self.translation_range:
            direction = -direction
        self._state = AnimationState(
            rotation_angle=angle,
            translation_x=x,
            direction=direction,
            frame_index=s.frame_index + 1,
        )
        return self._state

    def reset(self) -> None:
        """コンストラクタで渡した初期状態（既定は AnimationState()）へ戻す。"""
        self._state = self._initial


__all__ = [
    "Animation",
    "AnimationState",
    "DEFAULT_ROTATION_SPEED",
    "DEFAULT_TRANSLATION_RANGE",
    "DEFAULT_TRANSLATION_SPEED",
]
