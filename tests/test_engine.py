from tritonengine.application import Application
from tritonengine.engine import Engine
from tritonengine.window import WindowError


class FakeWindow:
    def __init__(self, frames=3, fail=False):
        self.frames = frames
        self.fail = fail
        self.swaps = 0
        self.init_args = None
        self.closed = False

    def init(self, width, height, title):
        if self.fail:
            raise WindowError("Window Creation Failed")
        self.init_args = (width, height, title)

    def should_close(self):
        return self.swaps >= self.frames

    def swap_buffers(self):
        self.swaps += 1

    def close(self):
        self.closed = True


class FakeRenderer:
    def __init__(self):
        self.initialised = False
        self.renders = 0

    def init(self):
        self.initialised = True

    def render(self):
        self.renders += 1


class RecordingApp(Application):
    def __init__(self):
        self.events = []
        self.deltas = []
        self.ctx = None

    def on_init(self, ctx):
        self.ctx = ctx
        self.events.append("init")

    def on_update(self, delta_time):
        self.deltas.append(delta_time)
        self.events.append("update")

    def on_render(self):
        self.events.append("render")

    def on_shutdown(self):
        self.events.append("shutdown")


def test_run_drives_hooks_in_order():
    window, renderer, app = FakeWindow(frames=2), FakeRenderer(), RecordingApp()
    Engine(320, 240, "demo", window, renderer).run(app)
    assert app.events == ["init", "update", "render", "update", "render", "shutdown"]
    assert window.init_args == (320, 240, "demo")
    assert renderer.initialised is True
    assert renderer.renders == 2
    assert window.swaps == 2


def test_context_is_filled_before_init():
    window, renderer, app = FakeWindow(frames=1), FakeRenderer(), RecordingApp()
    engine = Engine(10, 10, "ctx", window, renderer)
    engine.run(app)
    assert app.ctx is engine.context
    assert app.ctx.window is window
    assert app.ctx.renderer is renderer


def test_deltas_are_non_negative():
    app = RecordingApp()
    Engine(1, 1, "t", FakeWindow(frames=5), FakeRenderer()).run(app)
    assert len(app.deltas) == 5
    assert all(delta >= 0.0 for delta in app.deltas)


def test_window_failure_stops_before_app(capsys):
    app, renderer = RecordingApp(), FakeRenderer()
    Engine(1, 1, "t", FakeWindow(fail=True), renderer).run(app)
    assert app.events == []
    assert renderer.initialised is False
    assert "[ERROR]Unable to initialize the window system" in capsys.readouterr().out


def test_run_logs_start_and_end(capsys):
    Engine(1, 1, "t", FakeWindow(frames=0), FakeRenderer()).run(RecordingApp())
    out = capsys.readouterr().out
    assert out.index("[INFO]Starting Engine execution") < out.index(
        "[INFO]Ending Engine execution"
    )


def test_close_releases_window():
    window = FakeWindow()
    with Engine(1, 1, "t", window, FakeRenderer()):
        assert window.closed is False
    assert window.closed is True