"""Error taxonomy for interpreter discovery.

Every failure derives from :class:`InterpreterError`. A candidate that simply
is not installed is *not* an error: the prober reports it as ``None`` and
discovery skips it.
"""

from __future__ import annotations


class InterpreterError(Exception):
    """Base error that remembers which executable it concerns."""

    executable: str | None

    def __init__(self, message: str, *, executable: str | None = None) -> None:
        super().__init__(message)
        self.executable = executable

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.executable:
            parts.append(f"  executable: {self.executable}")
        if self.__cause__ is not None:
            parts.append(f"  caused by: {self.__cause__}")
        return "\n".join(parts)


class ProcessFailure(InterpreterError):
    """The probe could not be spawned, or exited with a non-zero status."""


class ParseFailure(InterpreterError):
    """The probe's stdout was not a metadata JSON object."""


class PlatformMismatch(InterpreterError):
    """``sys.platform`` of the interpreter disagrees with the host OS."""


class AbiFlagViolation(InterpreterError):
    """The reported ABI flags break the rule for this version and OS."""


class UnsupportedInterpreterVersion(InterpreterError):
    """Only Python 2.x and 3.5+ are supported."""


class UnsupportedPlatform(InterpreterError):
    """The host OS is neither linux, macos nor windows."""
