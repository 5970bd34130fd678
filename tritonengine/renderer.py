"""Draws the engine's demonstration triangle."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from tritonengine.shader import Shader

DEFAULT_VERTEX_SHADER = Path("assets/shaders/vertex.glsl")
DEFAULT_FRAGMENT_SHADER = Path("assets/shaders/fragment.glsl")

TRIANGLE_VERTICES = (
    -0.5, -0.5, 0.0,
    0.5, -0.5, 0.0,
    0.0, 0.5, 0.0,
)


class Renderer:
    """Owns the shader and vertex buffers for one triangle."""

    def __init__(
        self,
        vertex_path: str | Path = DEFAULT_VERTEX_SHADER,
        fragment_path: str | Path = DEFAULT_FRAGMENT_SHADER,
    ) -> None:
        self.vertex_path = Path(vertex_path)
        self.fragment_path = Path(fragment_path)
        self._shader: Shader | None = None
        self._vao: Any = None
        self._vbo: Any = None

    def init(self) -> None:
        """Build the shader and upload the triangle's vertices."""
        self._shader = Shader(self.vertex_path, self.fragment_path, [(0, "aPos")])
        self._shader.use()
        self._init_triangle()

    def _init_triangle(self) -> None:
        from pyglet import gl

        self._vao = gl.GLuint()
        self._vbo = gl.GLuint()
        gl.glGenVertexArrays(1, self._vao)
        gl.glGenBuffers(1, self._vbo)

        gl.glBindVertexArray(self._vao)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self._vbo)
        data = (gl.GLfloat * len(TRIANGLE_VERTICES))(*TRIANGLE_VERTICES)
        view = memoryview(data)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, view.nbytes, data, gl.GL_STATIC_DRAW)

        stride = 3 * view.itemsize
        gl.glVertexAttribPointer(0, 3, gl.GL_FLOAT, gl.GL_FALSE, stride, 0)
        gl.glEnableVertexAttribArray(0)

        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
        gl.glBindVertexArray(0)

    def render(self) -> None:
        """Draw the triangle with the renderer's shader."""
        if self._shader is None:
            raise RuntimeError("Renderer.render() called before Renderer.init()")
        from pyglet import gl

        self._shader.use()
        gl.glBindVertexArray(self._vao)
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, len(TRIANGLE_VERTICES) // 3)