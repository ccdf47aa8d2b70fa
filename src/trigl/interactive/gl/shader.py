# どこで: `src/trigl/interactive/gl/shader.py`。
# 何を: 単色三角形用の GLSL プログラム（MVP 変換 + 一様色）を生成する。
# なぜ: シェーダ文字列と uniform 名を DrawRenderer から分離するため。

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330

uniform mat4 projection;
uniform mat4 view;
uniform mat4 model;

in vec3 in_vert;

void main() {
    gl_Position = projection * view * model * vec4(in_vert, 1.0);
}
"""

FRAGMENT_SHADER = """
#version 330

uniform vec4 color;

out vec4 frag_color;

void main() {
    frag_color = color;
}
"""


class Shader:
    """三角形描画用シェーダの生成。"""

    @staticmethod
    def create_shader(ctx: Any) -> Any:
        """ModernGL の Program を返す。

        uniform: `projection` / `view` / `model`（mat4）, `color`（vec4）。
        attribute: `in_vert`（vec3）。
        """
        return ctx.program(vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER)
