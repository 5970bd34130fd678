"""The engine: window set-up and the main frame loop."""

from __future__ import annotations

import time
from typing import Any

from tritonengine.application import Application, EngineContext
from tritonengine.logger import LogLevel, log
from tritonengine.renderer import Renderer
from tritonengine.window import Window, WindowError


class Engine:
    """Opens a window and drives an application frame by frame."""

    def __init__(
        self,
        width: int,
        height: int,
        title: str,
        window: Any = None,
        renderer: Any = None,
    ) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.window = window if window is not None else Window()
        self.renderer = renderer if renderer is not None else Renderer()
        self.context = EngineContext()
        self._last_time_frame = 0.0

    def run(self, app: Application) -> None:
        """Run the application until the window asks to close."""
        try:
            self.window.init(self.width, self.height, self.title)
        except WindowError:
            log("Unable to initialize the window system", LogLevel.ERROR)
            return
        log("Starting Engine execution", LogLevel.INFO)

        self.context.window = self.window
        self.context.renderer = self.renderer
        app.on_init(self.context)

        self.renderer.init()

        start = time.monotonic()
        while not self.window.should_close():
            current_time = time.monotonic() - start
            delta_time = current_time - self._last_time_frame
            self._last_time_frame = current_time

            app.on_update(delta_time)
            app.on_render()
            self.renderer.render()
            self.window.swap_buffers()

        app.on_shutdown()
        log("Ending Engine execution", LogLevel.INFO)

    def close(self) -> None:
        """Release the window."""
        self.window.close()

    def __enter__(self) -> Engine:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()