# どこで: `src/landscape/__init__.py`。
# 何を: ルート `landscape` パッケージを定義する。
# なぜ: import 起点を `landscape` に統一し、ヘッドレスに使える core の型をまとめて公開するため。

from __future__ import annotations

from landscape.core.animation import Animation, AnimationState
from landscape.core.display_mode import DisplayMode
from landscape.core.errors import StackImbalanceError, StackUnderflowError, TransformStackError
from landscape.core.frame_context import FrameContext
from landscape.core.primitives import PrimitiveKind
from landscape.core.transform_stack import TransformStack

__all__ = [
    "Animation",
    "AnimationState",
    "DisplayMode",
    "FrameContext",
    "PrimitiveKind",
    "StackImbalanceError",
    "StackUnderflowError",
    "TransformStack",
    "TransformStackError",
    "run",
]


def __getattr__(name: str):
    # run は pyglet/moderngl を import するため、使われるまで読み込まない。
    if name == "run":
        from landscape.api import run

        return run
    raise AttributeError(name)
