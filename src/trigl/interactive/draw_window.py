# どこで: `src/trigl/interactive/draw_window.py`。
# 何を: 描画用の pyglet ウィンドウ生成を行う。
# なぜ: interactive 依存をこの層に閉じ込め、core をヘッドレスに保つため。

from __future__ import annotations

from typing import TYPE_CHECKING

from trigl.interactive.render_settings import RenderSettings

if TYPE_CHECKING:
    from pyglet.window import Window


def create_draw_window(settings: RenderSettings) -> Window:
    """設定に基づき描画ウィンドウを生成する。"""
    # pyglet.gl は import 時に GL ライブラリを読むため、ウィンドウ生成時まで遅延する。
    import pyglet
    from pyglet.gl import Config

    # 深度テストを使うため depth buffer を要求する。
    config = Config(double_buffer=True, depth_size=24)  # type: ignore[abstract]
    width, height = settings.window_size
    window = pyglet.window.Window(  # type: ignore[abstract]
        width=int(width),
        height=int(height),
        resizable=False,
        caption=settings.caption,
        config=config,
    )
    return window
