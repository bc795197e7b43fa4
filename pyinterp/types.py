"""Shared Pydantic models: raw probe metadata and resolved interpreter records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pyinterp.abi import resolve_abiflags

if TYPE_CHECKING:
    from pyinterp.host import HostFacts


class RawMetadata(BaseModel):
    """What a candidate interpreter says about itself (untrusted).

    ``abiflags`` is ``None`` when the interpreter does not define
    ``ABIFLAGS`` at all, which is not the same as defining it as ``""``.
    """

    model_config = ConfigDict(frozen=True)

    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    abiflags: str | None = None
    m: bool
    u: bool
    d: bool
    platform: str


class InterpreterRecord(BaseModel):
    """The location and resolved binary identity of one interpreter.

    Build records with :meth:`resolve`; the ABI flags are derived from the
    probe metadata and are not meant to be chosen by hand. Direct construction
    still rejects flags no interpreter can resolve to.

    Attributes
    ----------
    major, minor: int
        Python version.
    abiflags: str
        Resolved ABI flags, e.g. "m" for python3.5m or "mu" for python2.7mu.
        Always "" on windows. See PEP 261 and PEP 393.
    target: str
        Host OS the record was resolved for ("linux", "macos", "windows").
    executable: str
        The candidate exactly as it was probed: a path (``./python3.6``,
        ``/usr/bin/python3.6``) or a name looked up on PATH (``python3.6``).
    """

    model_config = ConfigDict(frozen=True)

    major: int
    minor: int
    abiflags: str = Field(pattern=r"^m?u?d?$")
    target: str
    executable: str

    @model_validator(mode="after")
    def _no_abiflags_on_windows(self) -> InterpreterRecord:
        if self.target == "windows" and self.abiflags:
            raise ValueError(f"abiflags must be empty on windows, got {self.abiflags!r}")
        return self

    @classmethod
    def resolve(cls, raw: RawMetadata, host: HostFacts, executable: str) -> InterpreterRecord:
        return cls(
            major=raw.major,
            minor=raw.minor,
            abiflags=resolve_abiflags(raw, host.os),
            target=host.os,
            executable=executable,
        )

    def get_tag(self, host: HostFacts) -> str:
        from pyinterp.tags import compatibility_tag

        return compatibility_tag(self, host)

    def get_library_extension(self, host: HostFacts) -> str:
        from pyinterp.tags import library_extension

        return library_extension(self, host)

    def __str__(self) -> str:
        return f"Python {self.major}.{self.minor}{self.abiflags} at {self.executable}"
