# どこで: `src/trigl/core/camera.py`。
# 何を: 自身の Transform から透視投影行列とビュー行列を算出するカメラを定義する。
# なぜ: カメラ状態の確定（projection/view のロード）を物体描画より前に 1 箇所で行うため。

from __future__ import annotations

from typing import Any

import numpy as np

from trigl.core import matrices
from trigl.core.transform import Transform


class Camera:
    """透視投影カメラ。

    Parameters
    ----------
    fov : float
        垂直画角 [rad]。
    z_near, z_far : float
        ニア/ファー平面。
    window_size : tuple[int, int]
        アスペクト比の算出に使うウィンドウサイズ（幅, 高さ）。
    """

    def __init__(
        self,
        *,
        fov: float,
        z_near: float,
        z_far: float,
        window_size: tuple[int, int],
    ) -> None:
        self._fov = float(fov)
        self._z_near = float(z_near)
        self._z_far = float(z_far)
        self._window_size = (int(window_size[0]), int(window_size[1]))
        self.transform = Transform()

    @property
    def fov(self) -> float:
        return self._fov

    @property
    def z_near(self) -> float:
        return self._z_near

    @property
    def z_far(self) -> float:
        return self._z_far

    def aspect(self) -> float:
        """幅 / 高さ を浮動小数で返す。"""
        width, height = self._window_size
        return float(width) / float(height)

    def target(self) -> np.ndarray:
        """前方 1 単位先の注視点（position + forward）を返す。"""
        return self.transform.position + self.transform.forward

    def projection_matrix(self) -> np.ndarray:
        return matrices.perspective(self._fov, self.aspect(), self._z_near, self._z_far)

    def view_matrix(self) -> np.ndarray:
        return matrices.look_at(self.transform.position, self.target(), self.transform.up)

    def draw(self, renderer: Any) -> None:
        """projection と view を renderer の現在状態としてロードする。

        同一フレーム内で、どの物体の `draw()` よりも先に呼ぶ必要がある。
        """
        renderer.set_projection(self.projection_matrix())
        renderer.set_view(self.view_matrix())


__all__ = ["Camera"]
