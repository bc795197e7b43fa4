"""Run the probe script in a candidate interpreter and parse what it prints.

Process execution goes through the narrow :class:`CommandRunner` protocol so
tests can hand back canned payloads instead of launching interpreters. A
runner signals a missing program by raising ``FileNotFoundError``.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Protocol

from jsonschema import ValidationError

from pyinterp.errors import ParseFailure, ProcessFailure
from pyinterp.probe.script import probe_command
from pyinterp.types import RawMetadata
from pyinterp.validator import parse_metadata


@dataclass(frozen=True)
class ProbeOutput:
    returncode: int
    stdout: bytes


class CommandRunner(Protocol):
    def run(self, args: list[str]) -> ProbeOutput: ...


class SubprocessRunner:
    """Blocking runner: stdout is captured, stderr goes straight to ours."""

    def run(self, args: list[str]) -> ProbeOutput:
        proc = subprocess.run(args, stdout=subprocess.PIPE, stderr=None, check=False)
        return ProbeOutput(returncode=proc.returncode, stdout=proc.stdout)


def probe_interpreter(executable: str, runner: CommandRunner | None = None) -> RawMetadata | None:
    """Return the metadata reported by *executable*, or None if it does not exist.

    Raises ProcessFailure if it cannot be run or exits non-zero, and
    ParseFailure if its output is not a metadata object.
    """
    runner = runner or SubprocessRunner()
    err_msg = f"Trying to get metadata from the python interpreter {executable} failed"

    try:
        output = runner.run(probe_command(executable))
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise ProcessFailure(err_msg, executable=executable) from exc

    if output.returncode != 0:
        raise ProcessFailure(
            f"{err_msg} (exit status {output.returncode})", executable=executable
        )

    try:
        return parse_metadata(output.stdout)
    except (ValueError, ValidationError) as exc:
        raise ParseFailure(err_msg, executable=executable) from exc
