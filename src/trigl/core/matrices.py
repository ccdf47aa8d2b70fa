from __future__ import annotations

# どこで: `src/trigl/core/matrices.py`。
# 何を: 4x4 同次変換行列（単位/平行移動/回転/拡大縮小/透視投影/lookAt）の生成を提供する。
# なぜ: Transform と Camera が同じ座標系定義（右手系・列ベクトル）を共有するため。

import math
from typing import Sequence

import numpy as np

Vec3 = Sequence[float] | np.ndarray


def identity() -> np.ndarray:
    """4x4 単位行列を返す。"""
    return np.identity(4, dtype=np.float64)


def translation(offset: Vec3) -> np.ndarray:
    """平行移動行列を返す（列 3 に offset が入る）。"""
    m = identity()
    m[:3, 3] = np.asarray(offset, dtype=np.float64)
    return m


def rotation(angle: float, axis: Vec3) -> np.ndarray:
    """axis 周りに angle [rad] 回転する行列を返す。

    Notes
    -----
    axis は内部で正規化する。ゼロベクトルは想定しない（NaN になる）。
    """
    a = np.asarray(axis, dtype=np.float64)
    a = a / np.linalg.norm(a)
    c = math.cos(angle)
    s = math.sin(angle)
    x, y, z = a
    cross = np.array(
        [
            [0.0, -z, y],
            [z, 0.0, -x],
            [-y, x, 0.0],
        ]
    )
    m = identity()
    m[:3, :3] = c * np.identity(3) + (1.0 - c) * np.outer(a, a) + s * cross
    return m


def scaling(factors: Vec3) -> np.ndarray:
    """非一様スケール行列を返す。"""
    m = identity()
    m[0, 0], m[1, 1], m[2, 2] = np.asarray(factors, dtype=np.float64)
    return m


def perspective(fovy: float, aspect: float, z_near: float, z_far: float) -> np.ndarray:
    """右手系の透視投影行列を返す（クリップ空間 z は [-1, 1]）。

    Parameters
    ----------
    fovy : float
        垂直画角 [rad]。
    aspect : float
        幅 / 高さ。
    z_near, z_far : float
        ニア/ファー平面までの距離。
    """
    f = 1.0 / math.tan(fovy / 2.0)
    depth = z_far - z_near
    m = np.zeros((4, 4), dtype=np.float64)
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = -(z_far + z_near) / depth
    m[2, 3] = -(2.0 * z_far * z_near) / depth
    m[3, 2] = -1.0
    return m


def look_at(eye: Vec3, center: Vec3, up: Vec3) -> np.ndarray:
    """eye から center を向く右手系のビュー行列を返す。"""
    eye_v = np.asarray(eye, dtype=np.float64)
    f = np.asarray(center, dtype=np.float64) - eye_v
    f = f / np.linalg.norm(f)
    s = np.cross(f, np.asarray(up, dtype=np.float64))
    s = s / np.linalg.norm(s)
    u = np.cross(s, f)

    m = identity()
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye_v)
    m[1, 3] = -np.dot(u, eye_v)
    m[2, 3] = np.dot(f, eye_v)
    return m


def to_gl_bytes(m: np.ndarray) -> bytes:
    """ModernGL の mat4 uniform 用に列優先 float32 の bytes を返す。"""
    return np.ascontiguousarray(np.asarray(m).T, dtype="f4").tobytes()


__all__ = [
    "identity",
    "look_at",
    "perspective",
    "rotation",
    "scaling",
    "to_gl_bytes",
    "translation",
]
