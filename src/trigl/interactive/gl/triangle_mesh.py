"""
どこで: `src/trigl/interactive/gl/triangle_mesh.py`。
何を: 三角形 1 枚分の VBO/VAO の確保・更新・解放を担当する。
なぜ: GPU 転送の詳細を Renderer から切り離すため。
"""

from __future__ import annotations

from typing import Any

import numpy as np


class TriangleMesh:
    """
    GPU に三角形の頂点を送り込む作業を管理
    """

    VERTEX_COUNT = 3

    def __init__(self, ctx: Any, program: Any):
        """
        ctx: moderngl コンテキスト
        program: `in_vert` attribute を持つシェーダープログラム
        VBO (Vertex Buffer Object): 3 頂点 x vec3 (float32) 分だけ確保する。
        VAO (Vertex Array Object): VBO と program の attribute を関連付ける。
        """
        self.ctx = ctx
        self.program = program
        self.vbo = ctx.buffer(reserve=self.VERTEX_COUNT * 3 * 4, dynamic=True)
        self.vao = ctx.simple_vertex_array(program, self.vbo, "in_vert")

    def upload(self, vertices: np.ndarray) -> None:
        """頂点 (3, 3) を GPU へ送り込む"""
        vertices_f32 = np.ascontiguousarray(vertices, dtype=np.float32).reshape(-1)
        if vertices_f32.size != self.VERTEX_COUNT * 3:
            raise ValueError(f"vertices は (3, 3) である必要があります: got size={vertices_f32.size}")
        self.vbo.write(vertices_f32.tobytes())

    def render(self, mode: int) -> None:
        self.vao.render(mode=mode, vertices=self.VERTEX_COUNT)

    def release(self) -> None:
        """GPU のメモリを解放する（終了時に使う）"""
        self.vbo.release()
        self.vao.release()
