"""The sample game and the command that starts it."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from tritonengine.application import Application, EngineContext
from tritonengine.engine import Engine


class TestGame(Application):
    """A game that does nothing but keep the engine's window open."""

    __test__ = False

    def on_init(self, ctx: EngineContext) -> None:
        """Load the scene and its resources."""

    def on_update(self, delta_time: float) -> None:
        """Advance the game state."""

    def on_render(self) -> None:
        """Draw the game's objects."""

    def on_shutdown(self) -> None:
        """Release the game's resources."""


def main(argv: Sequence[str] | None = None) -> int:
    """Open an 800x600 window and run the sample game in it."""
    parser = argparse.ArgumentParser(
        prog="tritonengine", description="Run the sample game."
    )
    parser.parse_args(argv)
    with Engine(800, 600, "Triton Engine") as engine:
        engine.run(TestGame())
    return 0