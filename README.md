# tritonengine

A small game engine built on pyglet. It opens a window with an OpenGL 3.3
context, runs a frame loop and hands each frame to your game. While the loop
runs, the built-in renderer draws a triangle with a shader program that it
loads from a vertex file and a fragment file.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the demo

```
tritonengine
```

This opens an 800×600 window titled "Triton Engine" and runs the bundled
`TestGame` (from `tritonengine.game`) until you close the window. The command
takes no options other than `--help`.

The renderer reads its shaders from `assets/shaders/vertex.glsl` and
`assets/shaders/fragment.glsl`, relative to the current directory. These
files are not part of the package; you supply them. The vertex shader's
position input is bound to attribute location 0 under the name `aPos`.

## Writing a game

Subclass `tritonengine.application.Application` and override the hooks you
need:

- `on_init(ctx)` runs once before the loop starts. `ctx` is an
  `EngineContext` whose `window` and `renderer` are the engine's; its `input`
  stays `None`.
- `on_update(delta_time)` runs every frame. `delta_time` is the number of
  seconds since the previous frame.
- `on_render()` runs every frame after the update.
- `on_shutdown()` runs once after the window closes.

The base class hooks are not empty: `on_init` stores the context in
`self.context`, `on_update` adds to `self.elapsed_time` and
`self.update_count`, `on_render` adds to `self.render_count`, and
`on_shutdown` sets `self.is_shut_down`. Call `super()` from an override if
you want to keep that bookkeeping.

```python
from tritonengine.application import Application
from tritonengine.engine import Engine


class MyGame(Application):
    def on_update(self, delta_time):
        super().on_update(delta_time)
        if self.elapsed_time > 10.0:
            print("ten seconds have passed")


with Engine(800, 600, "My Game") as engine:
    engine.run(MyGame())
```

`Engine(width, height, title, window=None, renderer=None)` creates a
`tritonengine.window.Window` and a `tritonengine.renderer.Renderer` when none
are given. `Engine.close()`, or leaving the `with` block, closes the window.

If the window cannot be created, `Window.init` raises
`tritonengine.window.WindowError`; `Engine.run` catches it, logs an error and
returns without calling any of the game's hooks. Errors from the renderer's
set-up are not caught.

## Windows

`tritonengine.window.Window` wraps a pyglet window. `init(width, height,
title)` creates it and makes its context current; `swap_buffers()` presents
the frame and processes pending window events; `should_close()` reports
whether the user has asked to close it; `native_handle()` returns the pyglet
window (logging a warning and returning `None` before `init`); `close()`
destroys it. A `Window` can also be used as a context manager.

## Shaders

`tritonengine.shader.Shader(vertex_path, fragment_path, attrib_bindings=())`
reads two GLSL files, compiles them and links them into one program. Each
`(location, name)` pair in `attrib_bindings` binds a vertex attribute before
the link. A compile or link failure raises `tritonengine.shader.ShaderError`,
whose `target` is a `CompileTarget` (`VERTEX`, `FRAGMENT` or `PROGRAM`) and
whose `info_log` holds the driver's message. `Shader.use()` makes the program
current, and `program_id` holds its GL name. `read_file(file_path)` returns
the whole text of a file.

A current OpenGL context is needed before a `Shader` is built.

## Logging

`tritonengine.logger.log(message, level=LogLevel.INFO)` writes one coloured
line to standard output, such as `[INFO]Starting Engine execution`. The
levels are `LogLevel.INFO` (green), `LogLevel.WARNING` (yellow) and
`LogLevel.ERROR` (red); each has a `label` and a `color`.

## What it does not do

There is no keyboard or mouse input handling: the context's `input` is always
`None`. The renderer only draws its one fixed triangle; there is no scene,
texture, mesh or asset loading, and no shader files ship with the package.