"""
どこで: `src/trigl/core/triangle.py`。
何を: 単色塗りの三角形（色・中心・半サイズ + Transform）を定義する。
なぜ: 頂点配置と色の解釈を描画バックエンドから切り離し、ヘッドレスにテストできるようにするため。
"""

from __future__ import annotations

from typing import Any

import numpy as np

from trigl.core.transform import Transform


class Triangle:
    """固定色の三角形。

    Parameters
    ----------
    color : tuple[int, int, int, int]
        RGBA（各 0..255）。
    center : tuple[float, float, float]
        ローカル座標での中心。
    size : float
        中心から頂点までの半サイズ。
    use_transform : bool
        True の場合、描画時に `transform.matrix` をモデル行列として適用する。
        False の場合は行列を適用せず、そのままの座標で描く（静的シーン）。
    """

    def __init__(
        self,
        color: tuple[int, int, int, int],
        center: tuple[float, float, float],
        size: float,
        *,
        use_transform: bool = True,
    ) -> None:
        self._color = tuple(int(c) & 0xFF for c in color)
        self._center = tuple(float(v) for v in center)
        self._size = float(size)
        self.use_transform = bool(use_transform)
        self.transform = Transform()

    @property
    def color(self) -> tuple[int, int, int, int]:
        return self._color  # type: ignore[return-value]

    @property
    def center(self) -> tuple[float, float, float]:
        return self._center  # type: ignore[return-value]

    @property
    def size(self) -> float:
        return self._size

    def color_rgba01(self) -> tuple[float, float, float, float]:
        """色を 0..1 float の RGBA で返す。"""
        r, g, b, a = self._color
        return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    def vertices(self) -> np.ndarray:
        """上・左下・右下の順に 3 頂点を (3, 3) 配列で返す。"""
        cx, cy, cz = self._center
        s = self._size
        return np.array(
            [
                [cx, cy + s, cz],
                [cx - s, cy - s, cz],
                [cx + s, cy - s, cz],
            ],
            dtype=np.float64,
        )

    def draw(self, renderer: Any) -> None:
        """renderer へ三角形 1 枚の描画を依頼する。

        Parameters
        ----------
        renderer : DrawRenderer
            `draw_triangle(vertices, color, model=...)` を提供する描画オブジェクト。
        """
        model = self.transform.matrix if self.use_transform else None
        renderer.draw_triangle(self.vertices(), self.color_rgba01(), model=model)

    def __repr__(self) -> str:
        return (
            f"Triangle(color={self._color!r}, center={self._center!r}, "
            f"size={self._size!r}, use_transform={self.use_transform!r})"
        )


__all__ = ["Triangle"]
