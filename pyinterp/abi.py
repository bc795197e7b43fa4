"""ABI flag resolution.

The rules are as follows:

- python 2 + unix: assemble the individual parts (m/u/d); ABIFLAGS is undefined
- python 2 + windows: ABIFLAGS is undefined and so are the parts; resolve to ""
- python 3.5+ + unix: ABIFLAGS must be "m"
- python 3.5+ + windows: ABIFLAGS is undefined; resolve to ""
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pyinterp.errors import AbiFlagViolation, UnsupportedInterpreterVersion, UnsupportedPlatform

if TYPE_CHECKING:
    from pyinterp.types import RawMetadata


def _python2_abiflags(raw: RawMetadata, host_os: str) -> str:
    if raw.abiflags is not None:
        raise AbiFlagViolation("A python 2 interpreter does not define abiflags in its sysconfig")

    abiflags = ""
    if raw.m:
        abiflags += "m"
    if raw.u:
        abiflags += "u"
    if raw.d:
        abiflags += "d"

    if abiflags and host_os == "windows":
        raise AbiFlagViolation(
            f"A python 2 interpreter on windows does not define abiflags, got {abiflags!r}"
        )
    return abiflags


def _python3_abiflags(raw: RawMetadata, host_os: str) -> str:
    if host_os == "windows":
        if raw.abiflags is not None:
            raise AbiFlagViolation(
                "A python 3 interpreter on windows does not define abiflags in its sysconfig"
            )
        return ""

    if host_os in {"linux", "macos"}:
        if raw.abiflags is None:
            raise AbiFlagViolation(
                "A python 3 interpreter on linux or mac os must define abiflags in its sysconfig"
            )
        if raw.abiflags != "m":
            raise AbiFlagViolation(
                "A python 3 interpreter on linux or mac os must have 'm' as abiflags, "
                f"got {raw.abiflags!r}"
            )
        return raw.abiflags

    raise UnsupportedPlatform(
        f"Host OS {host_os!r} is neither windows, nor linux, nor mac os"
    )


def resolve_abiflags(raw: RawMetadata, host_os: str) -> str:
    """Return the ABI flags string for *raw* on *host_os*.

    Raises AbiFlagViolation, UnsupportedPlatform or UnsupportedInterpreterVersion.
    """
    if raw.major == 2:
        return _python2_abiflags(raw, host_os)
    if raw.major == 3 and raw.minor >= 5:
        return _python3_abiflags(raw, host_os)
    raise UnsupportedInterpreterVersion(
        f"Only python 2.x and python 3.5+ are supported, got {raw.major}.{raw.minor}"
    )
