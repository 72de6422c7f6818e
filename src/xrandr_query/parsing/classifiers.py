from __future__ import annotations

from xrandr_query.exceptions import MalformedLine
from xrandr_query.models import Mode, Output

MODE_LINE_INDENT = "  "

_CONNECTION_STATES = {
    "connected": True,
    "disconnected": False,
}


def parse_output_line(line: str) -> Output:
    """Decode an output header such as ``eDP-1 connected primary 1920x1080+0+0``.

    Only the connector name and the connection state are read; geometry,
    rotation and the other trailing tokens are ignored.
    """
    tokens = line.split()

    if not tokens:
        raise MalformedLine(line, "line too short, name not found")
    name = tokens[0]

    if len(tokens) < 2:
        raise MalformedLine(line, "line too short, state not found")
    state = tokens[1]

    if state not in _CONNECTION_STATES:
        raise MalformedLine(line, f"unknown state {state!r}", token=state)

    return Output(name=name, connected=_CONNECTION_STATES[state])


def parse_mode_line(line: str) -> Mode | None:
    """Decode an indented mode line such as ``   1920x1080     60.01*+  59.93``.

    Returns ``None`` when the line is not indented, which marks the end of
    the current output's mode list. Raises :class:`MalformedLine` when an
    indented line lacks a mode name or a refresh rate.
    """
    if not line.startswith(MODE_LINE_INDENT):
        return None

    tokens = line.split()

    if not tokens:
        raise MalformedLine(line, "line too short, mode name not found")
    name = tokens[0]

    if len(tokens) < 2:
        raise MalformedLine(line, "line too short, no refresh rate found")
    rate = tokens[1]

    default = rate.endswith("+")
    # "*" is either last ("60.00*") or directly before the "+" ("60.00*+").
    active = len(rate) >= 2 and "*" in (rate[-1], rate[-2])

    # A preferred mode that is not active is printed as "60.00 +".
    if len(tokens) > 2 and tokens[2] == "+":
        default = True

    return Mode(name=name, default=default, active=active)
