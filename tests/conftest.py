from __future__ import annotations

import json

import pytest

from pyinterp.host import HostFacts
from pyinterp.probe.runner import ProbeOutput


class FakeRunner:
    """CommandRunner that answers from a table keyed by executable.

    Values are a payload dict (exit 0, JSON stdout), a ProbeOutput, or an
    exception instance to raise. Unknown executables raise FileNotFoundError.
    """

    def __init__(self, responses: dict[str, object]) -> None:
        self.responses = responses
        self.calls: list[list[str]] = []

    def run(self, args: list[str]) -> ProbeOutput:
        self.calls.append(args)
        executable = args[0]
        if executable not in self.responses:
            raise FileNotFoundError(executable)
        response = self.responses[executable]
        if isinstance(response, BaseException):
            raise response
        if isinstance(response, ProbeOutput):
            return response
        return ProbeOutput(returncode=0, stdout=json.dumps(response).encode("utf-8"))


def _payload(major: int, minor: int, platform: str = "linux", **overrides: object) -> dict:
    data: dict[str, object] = {
        "major": major,
        "minor": minor,
        "abiflags": None,
        "m": False,
        "u": False,
        "d": False,
        "platform": platform,
    }
    data.update(overrides)
    return data


@pytest.fixture
def linux_host() -> HostFacts:
    return HostFacts(os="linux", arch="x86_64", pointer_width=64, env="gnu")


@pytest.fixture
def macos_host() -> HostFacts:
    return HostFacts(os="macos", arch="x86_64", pointer_width=64, env="")


@pytest.fixture
def windows_host() -> HostFacts:
    return HostFacts(os="windows", arch="x86_64", pointer_width=64, env="msvc")


@pytest.fixture
def payload():
    """Factory for probe payload dicts; keyword arguments override fields."""
    return _payload


@pytest.fixture
def fake_runner():
    return FakeRunner
