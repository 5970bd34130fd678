"""GLSL shader programs built from a vertex and a fragment source file."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from pathlib import Path

_INFO_LOG_SIZE = 512


class CompileTarget(Enum):
    """Stage of shader building whose result is being checked."""

    VERTEX = "vertex"
    FRAGMENT = "fragment"
    PROGRAM = "program"


class ShaderError(RuntimeError):
    """A shader failed to compile or a program failed to link."""

    def __init__(self, target: CompileTarget, info_log: str) -> None:
        self.target = target
        self.info_log = info_log
        kind = "Link" if target is CompileTarget.PROGRAM else "Compile"
        super().__init__(f"Shader {kind} ERROR: {info_log}")


def read_file(file_path: str | Path) -> str:
    """Return the whole text of a file."""
    return Path(file_path).read_text()


class Shader:
    """A linked GL program made of one vertex and one fragment shader."""

    def __init__(
        self,
        vertex_path: str | Path,
        fragment_path: str | Path,
        attrib_bindings: Iterable[tuple[int, str]] = (),
    ) -> None:
        vertex_code = read_file(vertex_path)
        fragment_code = read_file(fragment_path)

        from pyglet import gl

        self._gl = gl
        self._vertex = self._compile(vertex_code, CompileTarget.VERTEX)
        self._fragment = self._compile(fragment_code, CompileTarget.FRAGMENT)

        self.program_id = gl.glCreateProgram()
        gl.glAttachShader(self.program_id, self._vertex.id)
        gl.glAttachShader(self.program_id, self._fragment.id)
        for location, name in attrib_bindings:
            encoded = name.encode()
            buffer = (gl.GLchar * (len(encoded) + 1))()
            buffer.value = encoded
            gl.glBindAttribLocation(self.program_id, location, buffer)
        gl.glLinkProgram(self.program_id)
        self._check_link()

    def use(self) -> None:
        """Make this program the current one."""
        self._gl.glUseProgram(self.program_id)

    @staticmethod
    def _compile(source: str, target: CompileTarget):
        from pyglet.graphics.shader import Shader as GLShader
        from pyglet.graphics.shader import ShaderException

        try:
            return GLShader(source, target.value)
        except ShaderException as exc:
            raise ShaderError(target, str(exc)) from exc

    def _check_link(self) -> None:
        gl = self._gl
        status = gl.GLint(0)
        gl.glGetProgramiv(self.program_id, gl.GL_LINK_STATUS, status)
        if not status.value:
            buffer = (gl.GLchar * _INFO_LOG_SIZE)()
            gl.glGetProgramInfoLog(self.program_id, _INFO_LOG_SIZE, None, buffer)
            raise ShaderError(
                CompileTarget.PROGRAM, buffer.value.decode(errors="replace")
            )