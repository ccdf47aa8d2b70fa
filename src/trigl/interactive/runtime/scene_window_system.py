# どこで: `src/trigl/interactive/runtime/scene_window_system.py`。
# 何を: Scene を描画ウィンドウへ描画するサブシステムを提供する。
# なぜ: `src/trigl/api/runner.py` の `run()` を「配線」に寄せ、描画責務を独立させるため。

from __future__ import annotations

from trigl.core.scene import Scene
from trigl.interactive.draw_window import create_draw_window
from trigl.interactive.gl.draw_renderer import DrawRenderer
from trigl.interactive.render_settings import RenderSettings
from trigl.interactive.runtime.frame_pipeline import render_scene_frame


class SceneWindowSystem:
    """描画ウィンドウのサブシステム。"""

    def __init__(self, scene: Scene, *, settings: RenderSettings) -> None:
        """描画用の window/renderer を初期化する。"""

        self._scene = scene
        self._settings = settings

        # 描画用の pyglet window を作成し、その window の OpenGL コンテキストに紐づく renderer を作る。
        self.window = create_draw_window(settings)
        try:
            self._renderer = DrawRenderer(self.window)
        except Exception:
            self.window.close()
            raise

    def draw_frame(self) -> None:
        """1 フレーム分の描画を行う（`flip()` は呼ばない）。"""

        # 注: 呼び出し側（FrameLoop）が事前に self.window.switch_to() 済みである前提。
        self._renderer.viewport(self.window.width, self.window.height)
        render_scene_frame(
            self._scene,
            self._renderer,
            background_color=self._settings.background_color,
        )

    def close(self) -> None:
        """GPU / window 資源を解放する。"""

        self._renderer.release()
        self.window.close()
