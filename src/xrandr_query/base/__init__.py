from __future__ import annotations

from .error import XrandrCommandError
from .wrapper import XrandrWrapper

__all__ = [
    "XrandrCommandError",
    "XrandrWrapper",
]
