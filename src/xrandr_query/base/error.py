from __future__ import annotations

import re
from typing import Any, ClassVar, Dict

from pydantic import Field, dataclasses

from xrandr_query.exceptions import XrandrQueryException


@dataclasses.dataclass(
    config={
        "arbitrary_types_allowed": True,
        "extra": "ignore",
    }
)
class XrandrCommandError(XrandrQueryException):
    """Structured error information for a failed ``xrandr`` invocation.

    This dataclass doubles as an exception type. Besides the exit code,
    captured output and command string, it records the X display named in
    xrandr's ``Can't open display`` message when stderr contains one.
    """

    exit_code: int = Field(
        description="Exit code returned by xrandr",
    )
    stderr: str = Field(
        description="Standard error output captured from xrandr",
    )
    stdout: str = Field(
        default="",
        description="Standard output captured from xrandr",
    )
    command: str = Field(
        description="The executed command string",
    )
    display: str | None = Field(
        default=None,
        description="X display xrandr failed to open, if reported",
    )

    _stderr_patterns: ClassVar[Dict[str, str]] = {
        "display": r"Can't open display\s*(\S*)",
    }

    def __post_init__(self) -> None:
        XrandrQueryException.__init__(self, str(self))

    def __str__(self) -> str:
        stderr_preview = self.stderr
        if len(stderr_preview) > 200:
            stderr_preview = stderr_preview[:200] + "..."
        return (
            f"Command '{self.command}' failed with exit code {self.exit_code}: "
            f"{stderr_preview}"
        )

    @classmethod
    def parse_from_stderr(
        cls,
        stderr: str,
        exit_code: int,
        command: str,
        stdout: str = "",
    ) -> "XrandrCommandError":
        """Build an error instance, filling pattern-based fields from stderr.

        If no pattern matches, the instance still carries the raw stderr and
        command metadata.
        """
        data: Dict[str, Any] = {
            "exit_code": exit_code,
            "stderr": stderr,
            "stdout": stdout,
            "command": command,
        }

        if stderr:
            for field_name, pattern in cls._stderr_patterns.items():
                match = re.search(pattern, stderr, re.MULTILINE)
                if match:
                    data[field_name] = match.group(1)

        return cls(**data)
