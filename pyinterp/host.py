"""Host facts: the OS, CPU architecture, pointer width and environment we build for.

These are normally detected from the running process, but every field can be
overridden through ``PYINTERP_*`` environment variables so a cross build can
describe the host it targets.
"""

from __future__ import annotations

import os
import platform
import struct
import sys
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict

ENV_PREFIX = "PYINTERP_"

_SYS_PLATFORM_OS = {"win32": "windows", "darwin": "macos"}

_MACHINE_ARCH = {
    "amd64": "x86_64",
    "x86_64": "x86_64",
    "arm64": "aarch64",
    "aarch64": "aarch64",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
}


class HostFacts(BaseModel):
    model_config = ConfigDict(frozen=True)

    os: str
    arch: str
    pointer_width: Literal[32, 64]
    env: str = ""

    @classmethod
    def current(cls) -> HostFacts:
        host_os = _detect_os()
        return cls(
            os=host_os,
            arch=_detect_arch(),
            pointer_width=struct.calcsize("P") * 8,
            env=_detect_env(host_os),
        )

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> HostFacts:
        """Detected host facts with ``PYINTERP_HOST_OS``, ``PYINTERP_HOST_ARCH``,
        ``PYINTERP_POINTER_WIDTH`` and ``PYINTERP_HOST_ENV`` applied on top.
        """
        env = os.environ if env is None else env
        detected = cls.current()
        overrides: dict[str, object] = {}
        for key, field in (("HOST_OS", "os"), ("HOST_ARCH", "arch"), ("HOST_ENV", "env")):
            value = env.get(ENV_PREFIX + key)
            if value is not None:
                overrides[field] = value
        width = env.get(ENV_PREFIX + "POINTER_WIDTH")
        if width is not None:
            overrides["pointer_width"] = int(width)
        if not overrides:
            return detected
        return cls.model_validate({**detected.model_dump(), **overrides})


def _detect_os() -> str:
    if sys.platform.startswith("linux"):
        return "linux"
    return _SYS_PLATFORM_OS.get(sys.platform, sys.platform)


def _detect_arch() -> str:
    machine = platform.machine().lower()
    return _MACHINE_ARCH.get(machine, machine)


def _detect_env(host_os: str) -> str:
    if host_os == "linux":
        libc, _ = platform.libc_ver()
        return "gnu" if libc == "glibc" else "musl"
    if host_os == "windows":
        return "msvc"
    return ""
