"""The application window and its OpenGL context."""

from __future__ import annotations

from typing import Any

from tritonengine.logger import LogLevel, log


class WindowError(RuntimeError):
    """The window or its OpenGL context could not be created."""


class Window:
    """A window holding an OpenGL 3.3 core context."""

    def __init__(self) -> None:
        self._window: Any = None

    def init(self, width: int, height: int, title: str) -> None:
        """Create the window and make its context current."""
        try:
            import pyglet
            from pyglet import gl

            config = gl.Config(
                major_version=3,
                minor_version=3,
                forward_compatible=True,
                double_buffer=True,
            )
            self._window = pyglet.window.Window(
                width, height, caption=title, config=config
            )
        except Exception as exc:
            log("Window Creation Failed", LogLevel.ERROR)
            raise WindowError("Window Creation Failed") from exc

        self._window.switch_to()
        log("Window created successfully", LogLevel.INFO)

    def swap_buffers(self) -> None:
        """Present the back buffer and process pending window events."""
        if self._window is not None:
            self._window.flip()
            self._window.dispatch_events()

    def should_close(self) -> bool:
        """Whether the user has asked the window to close."""
        return self._window is not None and bool(self._window.has_exit)

    def native_handle(self) -> Any:
        """Return the underlying window object, or None before initialisation."""
        if self._window is None:
            log("Accessing native handle before window initialization!", LogLevel.WARNING)
        return self._window

    def close(self) -> None:
        """Destroy the window if one exists."""
        if self._window is not None:
            self._window.close()
            self._window = None

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()