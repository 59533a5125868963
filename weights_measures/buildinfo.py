"""A build counter kept in a small text file, plus a generated C source stamp."""

from __future__ import annotations

import argparse
import dataclasses
import time
from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "BuildInformation",
    "read_build_information",
    "write_build_information",
    "write_build_information_source",
    "main",
]

BUILD_FILE = "Build.rad"
BUILD_SOURCE_FILE = "Build.c"


@dataclass
class BuildInformation:
    """A build number and the time (seconds since the epoch) of that build."""

    build_number: int = 0
    build_time: int = 0

    def increment(self) -> None:
        self.build_number += 1


def _leading_ints(text: str, count: int) -> list[int]:
    """Parse up to ``count`` leading integers; stop at the first that fails, leaving 0s."""
    values = [0] * count
    for position, token in enumerate(text.split()[:count]):
        try:
            values[position] = int(token)
        except ValueError:
            break
    return values


def read_build_information(path: str | Path) -> BuildInformation:
    """Read a build file holding "<number> <time>".

    Raises OSError if the file cannot be opened.
    """
    text = Path(path).read_text(encoding="ascii", errors="replace")
    number, built = _leading_ints(text, 2)
    return BuildInformation(number, built)


def write_build_information(path: str | Path, info: BuildInformation) -> None:
    """Write the build file as "<number> <time>"; raises OSError on failure."""
    Path(path).write_text(f"{info.build_number} {info.build_time}", encoding="ascii")


def write_build_information_source(path: str | Path, info: BuildInformation) -> None:
    """Write a C source file defining ``build_number`` and ``build_time``."""
    Path(path).write_text(
        "#include <time.h>\n\n"
        f"const int build_number = {info.build_number};\n"
        f"const time_t build_time = {info.build_time};",
        encoding="ascii",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="build-counter", description="Increment the build number."
    )
    parser.add_argument("--build-file", default=BUILD_FILE)
    parser.add_argument("--source-file", default=BUILD_SOURCE_FILE)
    args = parser.parse_args(argv)

    print("Incrementing build number")

    try:
        info = read_build_information(args.build_file)
    except OSError:
        print(f'Cannot open "{args.build_file}" Starting new build history.')
        info = BuildInformation()

    print(f"Build number is: {info.build_number}")

    info.build_time = int(time.time())
    old = dataclasses.replace(info)
    info.increment()

    try:
        write_build_information(args.build_file, info)
        print(f"Incremented to: {info.build_number}")
    except OSError:
        print(f'Cannot write to "{args.build_file}"')
        info = old

    try:
        write_build_information_source(args.source_file, info)
    except OSError:
        print(f'Cannot write to "{args.source_file}"')

    return 0


if __name__ == "__main__":
    raise SystemExit(main())