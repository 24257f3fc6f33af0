"""
Exit codes for sepgen CLI commands.

Scripts driving ``sepgen generate`` rely on these to tell a form that cannot
be written (malformed MAC, unwritable output directory) apart from bad
command-line input (unknown field id, malformed ``--set``, broken config
file):

    0  the document was printed or written
    1  the form or the output target is unusable
    2  the invocation or configuration is wrong
"""

from typing import Optional

import typer

from sepgen.core.errors import FieldError, OutputWriteError, SepGenError, ValidationError


EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2

_ERROR_CODES: tuple[tuple[type[Exception], int], ...] = (
    (ValidationError, EXIT_ERROR),
    (OutputWriteError, EXIT_ERROR),
    (FieldError, EXIT_CONFIG_ERROR),
    (typer.BadParameter, EXIT_CONFIG_ERROR),
)


def exit_code_for(error: Exception) -> int:
    """Map a sepgen or Typer error onto its exit code."""
    for error_type, code in _ERROR_CODES:
        if isinstance(error, error_type):
            return code
    return EXIT_ERROR


class CliExit(typer.Exit):
    """
    typer.Exit carrying one of the sepgen exit codes.

    Usage:
        raise CliExit.error("MAC address must be 12 hex characters")
        raise CliExit.config_error("Unknown section 'foo'")
        raise CliExit.from_error(e, "Generation failed")
    """

    def __init__(self, code: int, message: Optional[str] = None):
        self.message = message
        super().__init__(code)
        if message:
            print(message)

    @classmethod
    def error(cls, message: Optional[str] = None) -> "CliExit":
        """The form or the output target is unusable."""
        return cls(EXIT_ERROR, message)

    @classmethod
    def config_error(cls, message: Optional[str] = None) -> "CliExit":
        """Bad command-line input or configuration."""
        return cls(EXIT_CONFIG_ERROR, message)

    @classmethod
    def from_error(cls, error: SepGenError | typer.BadParameter, prefix: str) -> "CliExit":
        """Exit with the code matching ``error``, reporting it after ``prefix``."""
        return cls(exit_code_for(error), f"{prefix}: {error}")
