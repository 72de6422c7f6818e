from __future__ import annotations

from .classifiers import parse_mode_line, parse_output_line
from .engine import ParserState, parse_outputs

__all__ = ["parse_outputs", "parse_output_line", "parse_mode_line", "ParserState"]
