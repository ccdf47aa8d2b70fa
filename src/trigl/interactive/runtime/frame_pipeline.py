"""
どこで: `src/trigl/interactive/runtime/frame_pipeline.py`。
何を: 1 フレーム分の「クリア → カメラ → 描画物 → 回転 1 ステップ」を renderer へ依頼するパイプラインを提供する。
なぜ: 描画順序を window/GL から切り離し、偽の renderer でテストできるようにするため。
"""

from __future__ import annotations

from typing import Any

from trigl.core.scene import Scene


def render_scene_frame(
    scene: Scene,
    renderer: Any,
    *,
    background_color: tuple[float, float, float],
) -> None:
    """1 フレーム分のシーンを描画し、アニメーションを 1 ステップ進める。

    Parameters
    ----------
    scene : Scene
        描画対象のシーン。
    renderer : DrawRenderer
        `clear` / `reset_camera` / `set_projection` / `set_view` / `draw_triangle` を提供する描画オブジェクト。
    background_color : tuple[float, float, float]
        クリア色 RGB（0..1）。
    """

    renderer.clear(background_color)
    if scene.camera is None:
        renderer.reset_camera()
    # camera.draw() は Scene.draw の先頭で呼ばれる。
    scene.draw(renderer)
    scene.update()


__all__ = ["render_scene_frame"]
