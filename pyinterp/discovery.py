"""Discovery: probe candidate executables and resolve the ones that exist.

Candidates are probed one at a time, in order. A candidate that is not
installed is skipped; any other failure aborts the whole call and no records
are returned.
"""

from __future__ import annotations

from collections.abc import Iterable

from pyinterp.errors import InterpreterError
from pyinterp.host import HostFacts
from pyinterp.logging import get_logger
from pyinterp.platform import check_platform_sanity
from pyinterp.probe.runner import CommandRunner, SubprocessRunner, probe_interpreter
from pyinterp.types import InterpreterRecord

log = get_logger(__name__)


def _resolve_one(
    executable: str, host: HostFacts, runner: CommandRunner
) -> InterpreterRecord | None:
    raw = probe_interpreter(executable, runner=runner)
    if raw is None:
        return None
    try:
        check_platform_sanity(raw.platform, host)
        return InterpreterRecord.resolve(raw, host, executable)
    except InterpreterError as exc:
        if exc.executable is None:
            exc.executable = executable
        raise


def find_all(
    candidates: Iterable[str],
    host: HostFacts | None = None,
    runner: CommandRunner | None = None,
) -> list[InterpreterRecord]:
    """Return the records of every candidate that is installed, in input order.

    Raises the first InterpreterError encountered; nothing is returned then.
    """
    host = host or HostFacts.from_env()
    runner = runner or SubprocessRunner()

    found: list[InterpreterRecord] = []
    for executable in candidates:
        log.debug("probing %s", executable, extra={"executable": executable})
        try:
            record = _resolve_one(executable, host, runner)
        except InterpreterError:
            log.error(
                "failed to get information from the python interpreter %s",
                executable,
                extra={"executable": executable},
            )
            raise
        if record is None:
            log.debug("%s not found, skipping", executable, extra={"executable": executable})
            continue
        log.info("found %s", record, extra={"executable": executable})
        found.append(record)
    return found
