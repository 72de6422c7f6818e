from __future__ import annotations

"""xrandr-query public API.

This module exposes the parser for ``xrandr --query`` output, the models
it produces, the wrapper that runs xrandr, and the exception hierarchy.
"""

from .base import XrandrCommandError, XrandrWrapper
from .exceptions import (
    CommandNotFoundError,
    MalformedLine,
    ParsingError,
    TimeoutError,
    UnexpectedHeader,
    XrandrQueryException,
)
from .models import Mode, Output
from .parsing import parse_mode_line, parse_output_line, parse_outputs

__all__ = [
    "Mode",
    "Output",
    "parse_outputs",
    "parse_output_line",
    "parse_mode_line",
    "XrandrQueryException",
    "ParsingError",
    "MalformedLine",
    "UnexpectedHeader",
    "CommandNotFoundError",
    "TimeoutError",
    "XrandrCommandError",
    "XrandrWrapper",
]

__version__ = "0.1.0"
