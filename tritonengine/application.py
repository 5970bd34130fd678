"""The interface a game implements, and the context the engine hands it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class EngineContext:
    """Engine subsystems made available to the running application."""

    window: Any = None
    input: Any = None
    renderer: Any = None


class Application:
    """Base class for games driven by the engine.

    The default hooks keep track of the engine context, the time played and
    the number of frames, so a subclass only overrides what it needs.
    """

    context: EngineContext | None = None
    elapsed_time: float = 0.0
    update_count: int = 0
    render_count: int = 0
    is_shut_down: bool = False

    def on_init(self, ctx: EngineContext) -> None:
        """Called once after the engine has set up its subsystems."""
        self.context = ctx
        self.is_shut_down = False

    def on_update(self, delta_time: float) -> None:
        """Called every frame with the seconds elapsed since the previous frame."""
        self.elapsed_time += delta_time
        self.update_count += 1

    def on_render(self) -> None:
        """Called every frame after the update."""
        self.render_count += 1

    def on_shutdown(self) -> None:
        """Called once after the main loop has ended."""
        self.is_shut_down = True