from __future__ import annotations

import json

import jsonschema
import pytest

from pyinterp.errors import ParseFailure, ProcessFailure
from pyinterp.probe.runner import ProbeOutput, probe_interpreter
from pyinterp.probe.script import PROBE_SCRIPT


def test_probe_runs_inline_script(fake_runner, payload) -> None:
    runner = fake_runner({"python3.6": payload(3, 6, abiflags="m")})
    raw = probe_interpreter("python3.6", runner=runner)
    assert raw is not None
    assert (raw.major, raw.minor, raw.abiflags, raw.platform) == (3, 6, "m", "linux")
    assert runner.calls == [["python3.6", "-c", PROBE_SCRIPT]]


def test_missing_executable_is_absent(fake_runner) -> None:
    assert probe_interpreter("python9.9", runner=fake_runner({})) is None


def test_nonzero_exit_is_process_failure(fake_runner) -> None:
    runner = fake_runner({"python3": ProbeOutput(returncode=1, stdout=b"")})
    with pytest.raises(ProcessFailure) as info:
        probe_interpreter("python3", runner=runner)
    assert info.value.executable == "python3"
    assert "python3" in str(info.value)


def test_spawn_error_is_process_failure(fake_runner) -> None:
    denied = PermissionError(13, "Permission denied")
    with pytest.raises(ProcessFailure) as info:
        probe_interpreter("./python", runner=fake_runner({"./python": denied}))
    assert info.value.__cause__ is denied


@pytest.mark.parametrize(
    "stdout",
    [
        b"",
        b"not json",
        b"[1, 2, 3]",
        b'{"major": 3, "minor": 6}',
        b'{"major": "3", "minor": 6, "m": true, "u": false, "d": false, "platform": "linux"}',
        b'{"major": 3, "minor": 6, "m": 1, "u": false, "d": false, "platform": "linux"}',
        b'{"major": -1, "minor": 6, "m": true, "u": false, "d": false, "platform": "linux"}',
    ],
)
def test_malformed_output_is_parse_failure(fake_runner, stdout: bytes) -> None:
    runner = fake_runner({"python": ProbeOutput(returncode=0, stdout=stdout)})
    with pytest.raises(ParseFailure) as info:
        probe_interpreter("python", runner=runner)
    assert info.value.executable == "python"
    assert isinstance(info.value.__cause__, (ValueError, jsonschema.ValidationError))


def test_missing_abiflags_key_and_extra_keys_are_tolerated(fake_runner, payload) -> None:
    data = payload(2, 7, m=True)
    del data["abiflags"]
    data["implementation"] = "cpython"
    runner = fake_runner({"python2.7": ProbeOutput(0, json.dumps(data).encode())})
    raw = probe_interpreter("python2.7", runner=runner)
    assert raw is not None and raw.abiflags is None and raw.m is True
