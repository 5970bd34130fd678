import pytest

from tritonengine.logger import RESET, LogLevel, log


@pytest.mark.parametrize(
    "level, expected",
    [
        (LogLevel.INFO, "\033[32m[INFO]hello\033[0m\n"),
        (LogLevel.WARNING, "\033[33m[WARNING]hello\033[0m\n"),
        (LogLevel.ERROR, "\033[31m[ERROR]hello\033[0m\n"),
    ],
)
def test_log_formats_each_level(capsys, level, expected):
    log("hello", level)
    assert capsys.readouterr().out == expected


def test_default_level_is_info(capsys):
    log("Starting Engine execution")
    assert capsys.readouterr().out == "\033[32m[INFO]Starting Engine execution\033[0m\n"


def test_output_always_ends_with_reset(capsys):
    for level in LogLevel:
        log("x", level)
        out = capsys.readouterr().out
        assert out.endswith(RESET + "\n")
        assert out.startswith(level.color)


@pytest.mark.parametrize("level", list(LogLevel))
def test_logged_label_is_member_name(capsys, level):
    log("message", level)
    out = capsys.readouterr().out
    assert out == f"{level.color}[{level.name}]message{RESET}\n"