"""
どこで: `src/landscape/core/transform_stack.py`。
何を: Transform のスナップショットを積む LIFO スタックを提供する。
なぜ: 入れ子の座標系を push/pop で区切り、兄弟の図形どうしが変換状態を漏らし合わないようにするため。
"""

from __future__ import annotations

import numpy as np

from landscape.core.errors import StackUnderflowError
from landscape.core.transform import Transform, as_transform


class TransformStack:
    """Transform の save/restore 用スタック。

    Notes
    -----
    push は値コピーで保存する。呼び出し側が後から元の配列を書き換えても、
    積まれたスナップショットは変わらない。
    """

    def __init__(self) -> None:
        self._items: list[Transform] = []

    def __len__(self) -> int:
        return len(self._items)

    @property
    def depth(self) -> int:
        """現在の深さを返す。"""
        return len(self._items)

    def push(self, t: Transform | np.ndarray) -> None:
        """`t` のコピーを積む。"""
        self._items.append(as_transform(t))

    def pop(self) -> Transform:
        """最後に積んだ Transform を取り除いて返す。

        Raises
        ------
        StackUnderflowError
            スタックが空の場合（push/pop の対応が崩れている）。
        """
        if not self._items:
            raise StackUnderflowError("TransformStack が空: 対応する push の無い pop")
        return self._items.pop()

    def peek(self) -> Transform:
        """最後に積んだ Transform を取り除かずに返す。"""
        if not self._items:
            raise StackUnderflowError("TransformStack が空: peek できる Transform が無い")
        return self._items[-1]

    def clear(self) -> None:
        """全スナップショットを破棄する。"""
        self._items.clear()


__all__ = ["TransformStack"]
