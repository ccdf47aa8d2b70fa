"""
どこで: `src/trigl/api/runner.py`。公開 API のランナー実装。
何を: pyglet + ModernGL を使い、設定に応じたシーン（静的/回転）をウィンドウに描画するランナーを提供する。
なぜ: `main.py` / `python -m trigl` から同じ経路でデモを起動できるようにするため。
"""

from __future__ import annotations

import logging
from pathlib import Path

from trigl.core.runtime_config import runtime_config, set_config_path
from trigl.core.scene import build_scene
from trigl.interactive.render_settings import RenderSettings
from trigl.interactive.runtime.frame_loop import FrameLoop, WindowTask
from trigl.interactive.runtime.scene_window_system import SceneWindowSystem

_logger = logging.getLogger(__name__)


def run(
    *,
    variant: str | None = None,
    config_path: str | Path | None = None,
) -> None:
    """ウィンドウを生成し、三角形のシーンを固定 fps で描画する。

    Parameters
    ----------
    variant : str | None
        `"static"`（シーン記述ファイルの三角形をそのまま描く）または
        `"animated"`（カメラ越しに回転する三角形を描く）。
        None の場合は config の `scene.variant` を使う。
    config_path : str | Path | None
        明示的に読む config.yaml。None の場合は既定の探索に従う。

    Returns
    -------
    None
        ウィンドウを閉じると制御を返す。

    Raises
    ------
    SceneDescriptionError
        シーン記述ファイルを読めない場合。
    GLCapabilityError
        必要な OpenGL バージョンが利用できない場合。
    """

    if config_path is not None:
        set_config_path(config_path)
    config = runtime_config()
    logging.basicConfig(level=config.log_level)
    if config.config_path is not None:
        _logger.info("Using config: %s", config.config_path)

    scene = build_scene(config, variant)
    settings = RenderSettings.from_runtime_config(config)

    # --- サブシステムの組み立て ---
    window_system = SceneWindowSystem(scene, settings=settings)
    loop = FrameLoop(
        WindowTask(window=window_system.window, draw_frame=window_system.draw_frame),
        fps=settings.fps,
    )
    try:
        loop.run()
    finally:
        window_system.close()


__all__ = ["run"]
