# どこで: `src/landscape/core/errors.py`。
# 何を: TransformStack まわりの例外階層を定義する。
# なぜ: push/pop の不整合（呼び出し側のバグ）を握りつぶさず、型で区別して通知するため。

from __future__ import annotations


class TransformStackError(RuntimeError):
    """TransformStack の利用誤りを表す基底例外。"""


class StackUnderflowError(TransformStackError):
    """空のスタックに対して pop した。"""


class StackImbalanceError(TransformStackError):
    """フレーム終了時に push/pop の数が一致していない。"""


__all__ = ["StackImbalanceError", "StackUnderflowError", "TransformStackError"]
