"""Inline script each candidate runs via ``-c``.

It must stay valid on python 2.7 as well as python 3, and prints a single
JSON object describing the interpreter's version and ABI to stdout.
"""

from __future__ import annotations

PROBE_SCRIPT = r"""
import json
import sys
import sysconfig

print(json.dumps({
    "major": sys.version_info.major,
    "minor": sys.version_info.minor,
    "abiflags": sysconfig.get_config_var("ABIFLAGS"),
    "m": sysconfig.get_config_var("WITH_PYMALLOC") == 1,
    "u": sysconfig.get_config_var("Py_UNICODE_SIZE") == 4,
    "d": sysconfig.get_config_var("Py_DEBUG") == 1,
    # only used for a sanity check against the host OS
    "platform": sys.platform,
}))
"""


def probe_command(executable: str) -> list[str]:
    return [executable, "-c", PROBE_SCRIPT]
