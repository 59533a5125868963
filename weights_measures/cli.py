"""Command-line front end: pick a conversion mode, enter a value, see all units."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .factory import ConversionInterfaceFactory
from .interface_base import ConversionInterface

__all__ = [
    "ConvertorSettings",
    "convert",
    "format_mode_list",
    "format_values",
    "main",
]

_KEY_MODE = "CONVERTOR_DLG_MODE"
_KEY_X = "CONVERTOR_DLG_POS_X"
_KEY_Y = "CONVERTOR_DLG_POS_Y"


def _int_or(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass
class ConvertorSettings:
    """The remembered conversion mode and window position."""

    mode: int = 4
    x: int = 32
    y: int = 32

    def to_mapping(self) -> dict[str, int]:
        return {_KEY_MODE: self.mode, _KEY_X: self.x, _KEY_Y: self.y}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ConvertorSettings":
        """Read the settings, using the default for any missing or unreadable key."""
        default = cls()
        return cls(
            mode=_int_or(data.get(_KEY_MODE), default.mode),
            x=_int_or(data.get(_KEY_X), default.x),
            y=_int_or(data.get(_KEY_Y), default.y),
        )

    @classmethod
    def load(cls, path: str | Path) -> "ConvertorSettings":
        """Load from a JSON file; a missing or unreadable file gives the defaults."""
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return cls()
        if not isinstance(data, dict):
            return cls()
        return cls.from_mapping(data)

    def save(self, path: str | Path) -> None:
        Path(path).write_text(json.dumps(self.to_mapping(), indent=2), encoding="utf-8")


def _interface(factory: ConversionInterfaceFactory, mode: int) -> ConversionInterface:
    interface = factory.get_conversion_interface(mode)
    if interface is None:
        raise ValueError(f"unknown conversion mode {mode}")
    return interface


def convert(
    factory: ConversionInterfaceFactory, mode: int, index: int, value: float
) -> list[float]:
    """Set slot ``index`` (from 0) of ``mode`` to ``value`` and return every slot."""
    interface = _interface(factory, mode)
    if not 0 <= index < interface.value_count():
        raise IndexError(
            f"value index {index} out of range 0..{interface.value_count() - 1}"
        )
    interface.set_value(index, value)
    return interface.values()


def format_mode_list(factory: ConversionInterfaceFactory) -> str:
    """One line per mode: its type number and name."""
    return "\n".join(f"{e.type_id:>2}  {e.name}" for e in factory.interfaces())


def format_values(interface: ConversionInterface) -> str:
    """One line per slot: its number (from 1), value and labels."""
    lines = []
    for i, value in enumerate(interface.values()):
        parts = [f"{i + 1:>2}", f"{value:.10g}"]
        parts.extend(label for label in (interface.abbreviation(i), interface.title(i)) if label)
        lines.append("  ".join(parts))
    return "\n".join(lines)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weights-measures", description="Convert between units of measure."
    )
    parser.add_argument("--list", action="store_true", help="list the conversion modes")
    parser.add_argument("--config", help="settings file remembering the last mode")
    parser.add_argument("mode", nargs="?", type=int, help="conversion mode number")
    parser.add_argument("index", nargs="?", type=int, help="value slot, from 1")
    parser.add_argument("value", nargs="?", type=float, help="value to enter")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    factory = ConversionInterfaceFactory()

    if args.list:
        print(format_mode_list(factory))
        return 0

    if args.index is not None and args.value is None:
        parser.error("a value slot needs a value")

    settings = ConvertorSettings.load(args.config) if args.config else ConvertorSettings()
    mode = settings.mode if args.mode is None else args.mode

    try:
        interface = _interface(factory, mode)
        if args.index is not None:
            convert(factory, mode, args.index - 1, args.value)
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(format_values(interface))

    if args.config:
        settings.mode = mode
        try:
            settings.save(args.config)
        except OSError as exc:
            print(f"error: cannot write {args.config}: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())