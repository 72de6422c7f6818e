from __future__ import annotations

from xrandr_query import CommandNotFoundError, XrandrCommandError, XrandrWrapper

SAMPLE_OUTPUT = """\
Screen 0: minimum 8 x 8, current 1920 x 1080, maximum 32767 x 32767
eDP-1 connected primary 1920x1080+0+0 (normal left inverted right x axis y axis) 344mm x 193mm
   1920x1080     60.01*+  59.93
   1680x1050     59.95
HDMI-1 disconnected (normal left inverted right x axis y axis)"""


class EchoWrapper(XrandrWrapper):
    """Prints canned query output instead of asking an X server."""

    command = "echo"

    def _query_args(self) -> list[str]:
        return [SAMPLE_OUTPUT]


class LsWrapper(XrandrWrapper):
    command = "ls"

    def _query_args(self) -> list[str]:
        return ["/definitely/nonexistent/path/for/xrandr-query"]


class MissingWrapper(XrandrWrapper):
    command = "definitely-missing-command-xyz123"


def test_echo_integration_parses_outputs() -> None:
    outputs = EchoWrapper().query()

    assert [output.name for output in outputs] == ["eDP-1", "HDMI-1"]
    assert [len(output.modes) for output in outputs] == [2, 0]
    assert outputs[0].modes[0].active is True


def test_ls_integration_nonexistent_path_raises_error_model() -> None:
    try:
        LsWrapper().query()
    except XrandrCommandError as exc:
        assert "ls" in exc.command
        assert exc.exit_code != 0
    else:
        raise AssertionError("Expected XrandrCommandError to be raised for nonexistent path")


def test_missing_command_raises_command_not_found() -> None:
    try:
        MissingWrapper().query()
    except CommandNotFoundError:
        pass
    else:
        raise AssertionError("Expected CommandNotFoundError for a missing executable")
