"""Application identity: name, version, help file and target platform."""

from __future__ import annotations

import platform

__all__ = ["application_name", "application_version", "help_file_name", "platform_name"]

_X86 = frozenset({"x86", "i386", "i486", "i586", "i686"})
_X64 = frozenset({"amd64", "x86_64", "x64"})


def application_name() -> str:
    return "Weights & Measures"


def application_version() -> str:
    return "1.8"


def help_file_name() -> str:
    return "Readme.txt"


def platform_name(machine: str | None = None) -> str:
    """Short platform label for a machine name (the running one by default)."""
    name = (platform.machine() if machine is None else machine).lower()
    if name in _X86:
        return "x86"
    if name in _X64:
        return "x64"
    if name.startswith("arm") and not name.startswith("arm64"):
        return "ARM"
    return "N/A"