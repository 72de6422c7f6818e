from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Iterable, Iterator, List

from xrandr_query.exceptions import ParsingError, UnexpectedHeader
from xrandr_query.models import Output
from xrandr_query.parsing.classifiers import parse_mode_line, parse_output_line

logger = logging.getLogger(__name__)

SCREEN_PREFIX = "Screen "


class ParserState(Enum):
    """States of the document parser.

    Attributes:
        START: Nothing read yet; the ``Screen`` line is expected.
        EXPECT_OUTPUT: The next line must be an output header.
        EXPECT_MODE: Collecting mode lines for the current output.
    """

    START = auto()
    EXPECT_OUTPUT = auto()
    EXPECT_MODE = auto()


def _normalize_output(output: str | Iterable[str]) -> Iterator[str]:
    """Yield query output as lines without line terminators."""
    if isinstance(output, str):
        yield from output.splitlines()
        return
    for line in output:
        yield line.rstrip("\r\n")


def parse_outputs(output: str | Iterable[str]) -> List[Output]:
    """Parse ``xrandr --query`` output into a list of outputs.

    ``output`` is either the full text or an iterable of lines, such as an
    open file. The first line must be the ``Screen`` summary; every output
    header after it is followed by zero or more indented mode lines.

    Raises :class:`~xrandr_query.exceptions.ParsingError` (``MalformedLine``
    or ``UnexpectedHeader``) on the first offending line. No partial list is
    returned on failure.
    """
    outputs: List[Output] = []
    state = ParserState.START
    current: Output | None = None

    for index, line in enumerate(_normalize_output(output), start=1):
        try:
            # A header line both closes the previous output and opens the
            # next one, so it may be dispatched twice.
            while True:
                if state is ParserState.START:
                    if not line.startswith(SCREEN_PREFIX):
                        raise UnexpectedHeader(line, line_number=index)
                    state = ParserState.EXPECT_OUTPUT
                    break

                if state is ParserState.EXPECT_OUTPUT:
                    current = parse_output_line(line)
                    logger.debug("Line %d: output %s", index, current.name)
                    state = ParserState.EXPECT_MODE
                    break

                mode = parse_mode_line(line)
                if mode is None:
                    assert current is not None
                    outputs.append(current)
                    current = None
                    state = ParserState.EXPECT_OUTPUT
                    continue

                assert current is not None
                current.modes.append(mode)
                break
        except ParsingError as exc:
            if exc.line_number is None:
                exc.line_number = index
            logger.debug("Parsing aborted at line %d: %s", index, exc)
            raise

    if current is not None:
        outputs.append(current)

    logger.debug("Parsed %d output(s)", len(outputs))
    return outputs
