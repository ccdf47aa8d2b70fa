# どこで: `src/trigl/core/transform.py`。
# 何を: 4x4 モデル行列を所有し、合成可能なアフィン操作と基底ベクトルのビューを提供する。
# なぜ: Triangle と Camera が同じ姿勢表現を共有し、行列の列を直接読み書きできるようにするため。

from __future__ import annotations

import numpy as np

from trigl.core import matrices
from trigl.core.matrices import Vec3


class Transform:
    """右手系のアフィン姿勢を表す 4x4 同次行列。

    Notes
    -----
    行列は `m[row, col]` の数学的な並び。列 0/1/2 が left/up/forward、
    列 3 の先頭 3 成分が位置を表す。
    translate/rotate/scale は右から掛ける（ローカル座標系での操作になる）。
    基底アクセサは行列のビューを返すため、`position` への書き込みは行列を直接更新する。
    """

    def __init__(self) -> None:
        self._matrix = matrices.identity()

    @property
    def matrix(self) -> np.ndarray:
        """所有している 4x4 行列（コピーではない）。"""
        return self._matrix

    def translate(self, offset: Vec3) -> None:
        self._post_multiply(matrices.translation(offset))

    def rotate(self, angle: float, axis: Vec3) -> None:
        """axis 周りに angle [rad] 回転する。axis は正規化不要。"""
        self._post_multiply(matrices.rotation(angle, axis))

    def scale(self, factors: Vec3) -> None:
        self._post_multiply(matrices.scaling(factors))

    def reset(self) -> None:
        """単位行列へ戻す。"""
        self._matrix[...] = matrices.identity()

    def _post_multiply(self, other: np.ndarray) -> None:
        # 既存のビューを無効化しないよう、配列を差し替えずに中身だけ書き換える。
        self._matrix[...] = self._matrix @ other

    @property
    def position(self) -> np.ndarray:
        """列 3 の先頭 3 成分（書き込み可能なビュー）。"""
        return self._matrix[:3, 3]

    @position.setter
    def position(self, value: Vec3) -> None:
        self._matrix[:3, 3] = np.asarray(value, dtype=np.float64)

    @property
    def forward(self) -> np.ndarray:
        return self._column_view(2)

    @property
    def up(self) -> np.ndarray:
        return self._column_view(1)

    @property
    def left(self) -> np.ndarray:
        return self._column_view(0)

    def _column_view(self, col: int) -> np.ndarray:
        view = self._matrix[:3, col]
        view.flags.writeable = False
        return view

    def __repr__(self) -> str:
        return f"Transform(matrix={self._matrix.tolist()!r})"


__all__ = ["Transform"]
