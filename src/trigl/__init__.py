# どこで: `src/trigl/__init__.py`。
# 何を: ルート `trigl` パッケージを定義する。
# なぜ: import 起点を `trigl` に統一するため。

from __future__ import annotations

from trigl.api import run

__all__ = ["run"]
