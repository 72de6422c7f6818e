from __future__ import annotations

import importlib
import logging
from typing import Any, ClassVar

from pydantic import BaseModel, field_validator

from xrandr_query.base.error import XrandrCommandError
from xrandr_query.exceptions import CommandNotFoundError, TimeoutError
from xrandr_query.models import Output
from xrandr_query.parsing import parse_outputs

logger = logging.getLogger(__name__)

_sh = importlib.import_module("sh")


def _to_text(value: Any) -> str:
    """Return value as a text string, decoding bytes if necessary."""
    if isinstance(value, (bytes, bytearray)):
        return value.decode()
    return str(value)


class XrandrWrapper(BaseModel):
    """Runs ``xrandr --query`` and parses what it prints.

    Subclasses may point ``command`` at another executable and override
    the argument or output hooks. Command execution is implemented via sh.
    """

    command: ClassVar[str] = "xrandr"

    # Error model used when exit code is non-zero
    error_model: ClassVar[type[XrandrCommandError]] = XrandrCommandError

    timeout: int = 30
    display: str | None = None

    model_config = {
        "arbitrary_types_allowed": True,
        "extra": "forbid",
        "validate_assignment": True,
        "validate_default": True,
    }

    @field_validator("timeout")
    @classmethod
    def _validate_timeout(cls, value: int) -> int:
        """Ensure timeout is positive and not unreasonably large."""
        if value <= 0:
            raise ValueError("timeout must be positive")
        if value > 600:
            raise ValueError("timeout must not exceed 600 seconds")
        return value

    @field_validator("display")
    @classmethod
    def _validate_display(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("display must not be blank")
        return value

    def model_post_init(self, __context: Any) -> None:  # type: ignore[override]
        """Validate wrapper configuration after initialization."""
        if not getattr(type(self), "command", None):
            msg = f"{type(self).__name__} must define 'command' class variable"
            raise TypeError(msg)

    # ------------------------------------------------------------------
    # Argument building hooks
    # ------------------------------------------------------------------

    def _build_args(self, **kwargs: Any) -> list[str]:
        """Convert keyword arguments into a flat list of CLI arguments.

        * None values are skipped.
        * Boolean True -> ``--flag``, False -> omitted.
        * Other values become ``--key value``.
        """
        args: list[str] = []
        for key, value in kwargs.items():
            if value is None:
                continue

            flag = f"--{key.replace('_', '-')}"
            if isinstance(value, bool):
                if value:
                    args.append(flag)
            else:
                args.extend([flag, str(value)])

        return args

    def _query_args(self) -> list[str]:
        """Arguments passed to ``command`` by :meth:`query`."""
        return self._build_args(display=self.display, query=True)

    def _preprocess_output(self, output: str) -> str:
        """Hook for normalizing raw stdout before parsing."""
        return output

    def _get_error_model(self) -> type[XrandrCommandError]:
        """Return the error model class used for failures."""
        return self.error_model

    def _build_command_string(self, args: list[str]) -> str:
        """Return a human-readable command string for error messages."""
        parts = [self.command, *args]
        return " ".join(parts)

    # ------------------------------------------------------------------
    # Core execution
    # ------------------------------------------------------------------

    def _execute(self, *args: str) -> str:
        """Run the command and return its standard output as text."""
        cli_args = list(args)
        command_str = self._build_command_string(cli_args)
        logger.debug("Running %s", command_str)

        try:
            cmd = _sh.Command(self.command)
            result = cmd(
                *cli_args,
                _timeout=self.timeout,
                _err_to_out=False,
            )
        except Exception as exc:
            exc_type = type(exc).__name__

            if exc_type == "CommandNotFound":
                raise CommandNotFoundError(str(exc)) from exc

            if exc_type == "TimeoutException":
                raise TimeoutError(
                    f"Command '{command_str}' timed out after {self.timeout} seconds"
                ) from exc

            if exc_type == "ErrorReturnCode" or exc_type.startswith("ErrorReturnCode_"):
                error = self._get_error_model().parse_from_stderr(
                    stderr=_to_text(getattr(exc, "stderr", "")),
                    exit_code=getattr(exc, "exit_code", 1),
                    command=command_str,
                    stdout=_to_text(getattr(exc, "stdout", "")),
                )
                raise error from exc

            # Re-raise unexpected exceptions
            raise

        stdout_value = getattr(result, "stdout", result)
        return _to_text(stdout_value)

    def query(self) -> list[Output]:
        """Query the current display configuration.

        Raises CommandNotFoundError, TimeoutError or the error model when
        the command fails, and ParsingError when its output is malformed.
        """
        stdout_text = self._execute(*self._query_args())
        outputs = parse_outputs(self._preprocess_output(stdout_text))
        logger.debug(
            "%s reported %d output(s), %d connected",
            self.command,
            len(outputs),
            sum(1 for output in outputs if output.connected),
        )
        return outputs
