# どこで: `src/trigl/interactive/gl/draw_renderer.py`。
# 何を: ライブ描画用の ModernGL レンダラーをカプセル化する。
# なぜ: コンテキスト生成・機能チェック・シェーダ設定・頂点転送をループから分離し、責務を明確にするため。

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import moderngl
import numpy as np

from trigl.core import matrices
from trigl.interactive.gl.shader import Shader
from trigl.interactive.gl.triangle_mesh import TriangleMesh

if TYPE_CHECKING:
    from pyglet.window import Window

_logger = logging.getLogger(__name__)

# GLSL 330 のシェーダを使うため OpenGL 3.3 を要求する。
REQUIRED_GL_VERSION = 330


class GLCapabilityError(RuntimeError):
    """必要な OpenGL バージョンが利用できない場合の例外。"""


def ensure_gl_version(ctx: Any, required: int = REQUIRED_GL_VERSION) -> None:
    """ctx の OpenGL バージョンが required 未満なら GLCapabilityError を送出する。"""
    version_code = int(ctx.version_code)
    if version_code < int(required):
        raise GLCapabilityError(
            f"OpenGL {required // 100}.{(required % 100) // 10} (GLSL {required}) API is required "
            f"but not available (got {version_code // 100}.{(version_code % 100) // 10})."
        )


class DrawRenderer:
    """三角形をリアルタイム描画するシンプルなレンダラー。"""

    def __init__(self, window: Window) -> None:
        window.switch_to()
        self.ctx = moderngl.create_context()
        # コンテキスト生成直後に機能チェックし、満たさなければ以降の初期化はしない。
        ensure_gl_version(self.ctx)
        _logger.info("OpenGL context created: version_code=%d", self.ctx.version_code)

        self.ctx.enable(moderngl.DEPTH_TEST)
        self.program = Shader.create_shader(self.ctx)
        self.mesh = TriangleMesh(self.ctx, self.program)
        self.reset_camera()

    def viewport(self, width: int, height: int) -> None:
        """ビューポートをウィンドウサイズに合わせて更新する。"""
        self.ctx.viewport = (0, 0, int(width), int(height))

    def clear(self, color: tuple[float, float, float]) -> None:
        """背景色と深度バッファをクリアする。"""
        self.ctx.clear(*color, 1.0, depth=1.0)

    def set_projection(self, projection: np.ndarray) -> None:
        self.program["projection"].write(matrices.to_gl_bytes(projection))

    def set_view(self, view: np.ndarray) -> None:
        self.program["view"].write(matrices.to_gl_bytes(view))

    def reset_camera(self) -> None:
        """projection/view を単位行列へ戻す（カメラ無しの描画用）。"""
        self.set_projection(matrices.identity())
        self.set_view(matrices.identity())

    def draw_triangle(
        self,
        vertices: np.ndarray,
        color: tuple[float, float, float, float],
        *,
        model: np.ndarray | None = None,
    ) -> None:
        """塗りつぶし三角形 1 枚を描画する。model が None なら単位行列を使う。"""
        self.mesh.upload(vertices)
        self.program["model"].write(
            matrices.to_gl_bytes(matrices.identity() if model is None else model)
        )
        self.program["color"].value = tuple(float(c) for c in color)
        self.mesh.render(mode=moderngl.TRIANGLES)

    def release(self) -> None:
        """GPU リソースを解放する。"""
        self.mesh.release()
        self.program.release()
        self.ctx.release()
