"""Wheel compatibility tags (PEP 425) and native extension suffixes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pyinterp.errors import UnsupportedPlatform

if TYPE_CHECKING:
    from pyinterp.host import HostFacts
    from pyinterp.types import InterpreterRecord

MANYLINUX_TAG = "manylinux1_x86_64"

# Same multi-version tag setuptools uses for universal mac wheels
MACOSX_TAG = ".".join(
    [
        "macosx_10_6_intel",
        "macosx_10_9_intel",
        "macosx_10_9_x86_64",
        "macosx_10_10_intel",
        "macosx_10_10_x86_64",
    ]
)


def _windows_tag(host: HostFacts) -> str:
    return "win_amd64" if host.pointer_width == 64 else "win32"


def platform_tag(host: HostFacts, target: str | None = None) -> str:
    """Return the wheel platform tag for *target* (defaults to ``host.os``)."""
    target = host.os if target is None else target
    if target == "linux":
        return MANYLINUX_TAG
    if target == "macos":
        return MACOSX_TAG
    if target == "windows":
        return _windows_tag(host)
    raise UnsupportedPlatform(f"No wheel platform tag for host OS {target!r}")


def compatibility_tag(record: InterpreterRecord, host: HostFacts) -> str:
    """Return ``{python tag}-{abi tag}-{platform tag}`` for *record*."""
    version = f"{record.major}{record.minor}"
    try:
        platform = platform_tag(host, record.target)
    except UnsupportedPlatform as exc:
        exc.executable = record.executable
        raise
    return f"cp{version}-cp{version}{record.abiflags}-{platform}"


def library_extension(record: InterpreterRecord, host: HostFacts) -> str:
    """Return the filename suffix for a native module loadable by *record*.

    Examples for x86_64 on Python 3.5m::

        Linux:   steinlaus.cpython-35m-x86_64-linux-gnu.so
        Windows: steinlaus.cp35-win_amd64.pyd
        Mac:     steinlaus.cpython-35m-darwin.so
    """
    if record.major == 2:
        return ".so"

    version = f"{record.major}{record.minor}"
    if record.target == "linux":
        return f".cpython-{version}{record.abiflags}-{host.arch}-{record.target}-{host.env}.so"
    if record.target == "macos":
        return f".cpython-{version}{record.abiflags}-darwin.so"
    if record.target == "windows":
        return f".cp{version}-{_windows_tag(host)}.pyd"
    raise UnsupportedPlatform(
        f"No extension suffix for host OS {record.target!r}",
        executable=record.executable,
    )
