"""Sanity check between the interpreter's ``sys.platform`` and the host OS."""

from __future__ import annotations

from pyinterp.errors import PlatformMismatch
from pyinterp.host import HostFacts

# sys.platform value -> host OS identifier it implies
PLATFORM_OS: dict[str, str] = {
    "win32": "windows",
    "win_amd64": "windows",
    "linux": "linux",
    "linux2": "linux",
    "linux3": "linux",
    "darwin": "macos",
}


def check_platform_sanity(platform: str, host: HostFacts) -> None:
    """Raise PlatformMismatch unless *platform* belongs to ``host.os``."""
    if PLATFORM_OS.get(platform) != host.os:
        raise PlatformMismatch(
            f"sys.platform in python, {platform}, and the host OS, {host.os}, don't match"
        )
