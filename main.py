"""
どこで: リポジトリ直下 `main.py`。
何を: 設定に従って三角形デモを起動する。
なぜ: 動作確認用の最小エントリポイントとして利用するため。
"""

import sys

sys.path.append("src")

from trigl import run

if __name__ == "__main__":
    run()
