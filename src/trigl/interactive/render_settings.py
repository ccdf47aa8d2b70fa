# どこで: `src/trigl/interactive/render_settings.py`。
# 何を: interactive 描画設定の束を表すデータクラスを定義する。
# なぜ: `run` の引数を簡潔に保ちつつ、interactive 側の設定を一元管理するため。

from __future__ import annotations

from dataclasses import dataclass

from trigl.core.runtime_config import RuntimeConfig


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """リアルタイム描画に用いる設定値の集合。"""

    caption: str = "SDL2 Simple Example"
    window_size: tuple[int, int] = (512, 512)
    background_color: tuple[float, float, float] = (0.5, 0.5, 0.5)
    fps: float = 60.0

    @classmethod
    def from_runtime_config(cls, config: RuntimeConfig) -> "RenderSettings":
        return cls(
            caption=config.window_caption,
            window_size=config.window_size,
            background_color=config.background_color,
            fps=config.fps,
        )
