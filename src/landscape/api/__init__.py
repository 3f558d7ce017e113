# どこで: `src/landscape/api/__init__.py`。
# 何を: 公開 API（run）を再エクスポートする。
# なぜ: `from landscape.api import run` を安定した入口にするため。

from __future__ import annotations

from landscape.api.run import run

__all__ = ["run"]
