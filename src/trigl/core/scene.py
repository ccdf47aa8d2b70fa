"""
どこで: `src/trigl/core/scene.py`。
何を: カメラ・描画物・アニメーション対象を束ねるシーンコンテキストと、2 種類のシーン構築関数を提供する。
なぜ: グローバルなシーン状態を持たず、エントリポイントで組み立てたシーンを描画ループへ明示的に渡すため。
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from trigl.core.camera import Camera
from trigl.core.runtime_config import SCENE_VARIANTS, RuntimeConfig
from trigl.core.scene_description import SceneDescription, load_scene_description
from trigl.core.triangle import Triangle

# アニメーションシーンの三角形（シーン記述ファイルは読まない）。
ANIMATED_TRIANGLE_COLOR = (255, 128, 0, 255)
ANIMATED_TRIANGLE_CENTER = (0.0, 0.0, 0.0)
ANIMATED_TRIANGLE_SIZE = 0.5


@dataclass(frozen=True, slots=True)
class RotationStep:
    """1 フレームあたりの回転量（角度 [rad] と回転軸）。"""

    angle: float
    axis: tuple[float, float, float]


class Scene:
    """1 フレーム分の描画と更新の対象をまとめたもの。

    Parameters
    ----------
    objects : Sequence[Triangle]
        描画順に並んだ描画物。
    camera : Camera | None
        None の場合、projection/view は設定しない。
    animated : Triangle | None
        `update()` で回転させる対象。
    rotation_step : RotationStep | None
        `update()` 1 回あたりの回転量。
    """

    def __init__(
        self,
        objects: Sequence[Triangle],
        *,
        camera: Camera | None = None,
        animated: Triangle | None = None,
        rotation_step: RotationStep | None = None,
    ) -> None:
        self.objects = list(objects)
        self.camera = camera
        self.animated = animated
        self.rotation_step = rotation_step

    def draw(self, renderer: Any) -> None:
        """カメラ → 各描画物の順で描画する。"""
        if self.camera is not None:
            self.camera.draw(renderer)
        for obj in self.objects:
            obj.draw(renderer)

    def update(self) -> None:
        """アニメーション対象を 1 ステップだけ回転させる。

        経過時間は使わないため、回転速度はフレームレートに依存する。
        """
        if self.animated is None or self.rotation_step is None:
            return
        self.animated.transform.rotate(self.rotation_step.angle, self.rotation_step.axis)


def build_static_scene(description: SceneDescription) -> Scene:
    """シーン記述から、変換もカメラも持たない静的シーンを作る。"""

    triangle = Triangle(
        description.color,
        description.center,
        description.size,
        use_transform=False,
    )
    return Scene([triangle])


def build_animated_scene(config: RuntimeConfig) -> Scene:
    """固定の三角形を回転させ、カメラ越しに見るシーンを作る。"""

    triangle = Triangle(
        ANIMATED_TRIANGLE_COLOR,
        ANIMATED_TRIANGLE_CENTER,
        ANIMATED_TRIANGLE_SIZE,
    )
    camera = Camera(
        fov=math.radians(config.camera_fov_deg),
        z_near=config.camera_near,
        z_far=config.camera_far,
        window_size=config.window_size,
    )
    camera.transform.translate(config.camera_position)
    step = RotationStep(
        angle=math.radians(config.animation_step_deg),
        axis=config.animation_axis,
    )
    return Scene([triangle], camera=camera, animated=triangle, rotation_step=step)


def build_scene(config: RuntimeConfig, variant: str | None = None) -> Scene:
    """variant（未指定なら config.scene_variant）に応じたシーンを作る。

    Raises
    ------
    ValueError
        未知の variant の場合。
    SceneDescriptionError
        static でシーン記述ファイルを読めない場合。
    """

    name = (config.scene_variant if variant is None else str(variant)).strip().lower()
    if name == "static":
        return build_static_scene(load_scene_description(config.scene_description_path))
    if name == "animated":
        return build_animated_scene(config)
    raise ValueError(f"未知の scene variant です: {name!r}（{SCENE_VARIANTS} のいずれか）")


__all__ = [
    "ANIMATED_TRIANGLE_CENTER",
    "ANIMATED_TRIANGLE_COLOR",
    "ANIMATED_TRIANGLE_SIZE",
    "RotationStep",
    "Scene",
    "build_animated_scene",
    "build_scene",
    "build_static_scene",
]
