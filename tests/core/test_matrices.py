"""4x4 行列ヘルパのテスト。"""

from __future__ import annotations

import math

import numpy as np
import pytest

from trigl.core import matrices


def test_translation_puts_offset_in_column_3() -> None:
    m = matrices.translation((1.0, 2.0, 3.0))
    assert m[:3, 3].tolist() == [1.0, 2.0, 3.0]
    assert np.array_equal(m[:3, :3], np.identity(3))


def test_rotation_about_z_maps_x_to_y() -> None:
    m = matrices.rotation(math.pi / 2, (0.0, 0.0, 1.0))
    p = m @ np.array([1.0, 0.0, 0.0, 1.0])
    assert p[:3] == pytest.approx([0.0, 1.0, 0.0], abs=1e-12)


def test_rotation_normalizes_axis() -> None:
    a = matrices.rotation(0.3, (0.0, 5.0, 0.0))
    b = matrices.rotation(0.3, (0.0, 1.0, 0.0))
    assert np.allclose(a, b)


def test_scaling_is_diagonal() -> None:
    m = matrices.scaling((2.0, 3.0, 4.0))
    assert np.array_equal(m, np.diag([2.0, 3.0, 4.0, 1.0]))


def test_perspective_matches_right_handed_gl_convention() -> None:
    m = matrices.perspective(math.pi / 2, 1.0, 0.1, 100.0)
    assert m[0, 0] == pytest.approx(1.0)
    assert m[1, 1] == pytest.approx(1.0)
    assert m[3, 2] == -1.0
    assert m[3, 3] == 0.0

    # ニア平面上の点は NDC z = -1、ファー平面上の点は +1 になる。
    near = m @ np.array([0.0, 0.0, -0.1, 1.0])
    far = m @ np.array([0.0, 0.0, -100.0, 1.0])
    assert near[2] / near[3] == pytest.approx(-1.0)
    assert far[2] / far[3] == pytest.approx(1.0)


def test_look_at_moves_eye_to_origin_and_target_to_negative_z() -> None:
    view = matrices.look_at((0.0, 0.0, -3.0), (0.0, 0.0, -2.0), (0.0, 1.0, 0.0))
    eye = view @ np.array([0.0, 0.0, -3.0, 1.0])
    target = view @ np.array([0.0, 0.0, -2.0, 1.0])
    assert eye[:3] == pytest.approx([0.0, 0.0, 0.0])
    assert target[:3] == pytest.approx([0.0, 0.0, -1.0])


def test_to_gl_bytes_is_column_major_float32() -> None:
    m = matrices.translation((1.0, 2.0, 3.0))
    values = np.frombuffer(matrices.to_gl_bytes(m), dtype="f4")
    assert values.size == 16
    # 列優先なので平行移動成分は末尾 4 要素（列 3）に並ぶ。
    assert values[12:15].tolist() == [1.0, 2.0, 3.0]
