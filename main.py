"""
どこで: リポジトリ直下 `main.py`。
何を: 同梱の田園風景シーンを run でプレビュー表示する。
なぜ: 動作確認用の最小エントリポイントとして利用するため。
"""

import sys

sys.path.append("src")

from landscape.api import run
from landscape.scenes.countryside import draw

if __name__ == "__main__":
    run(draw, mode="solid", render_scale=1.0)
