"""Discover Python interpreters and derive their wheel tags and extension suffixes."""

from __future__ import annotations

from pyinterp.discovery import find_all
from pyinterp.errors import (
    AbiFlagViolation,
    InterpreterError,
    ParseFailure,
    PlatformMismatch,
    ProcessFailure,
    UnsupportedInterpreterVersion,
    UnsupportedPlatform,
)
from pyinterp.host import HostFacts
from pyinterp.tags import compatibility_tag, library_extension, platform_tag
from pyinterp.types import InterpreterRecord, RawMetadata

__all__ = [
    "AbiFlagViolation",
    "HostFacts",
    "InterpreterError",
    "InterpreterRecord",
    "ParseFailure",
    "PlatformMismatch",
    "ProcessFailure",
    "RawMetadata",
    "UnsupportedInterpreterVersion",
    "UnsupportedPlatform",
    "compatibility_tag",
    "find_all",
    "library_extension",
    "platform_tag",
]
