"""Report process identifiers, the kernel PID limit and command-line arguments."""

from __future__ import annotations

import os
import sys

PID_MAX_PATH = "/proc/sys/kernel/pid_max"


def read_pid_max(path: str = PID_MAX_PATH) -> int:
    """Read the largest process identifier from *path*."""
    with open(path, encoding="ascii") as handle:
        fields = handle.read().split()
    if not fields:
        raise ValueError(f"{path}: no value")
    return int(fields[0])


def describe_args(argv: list[str]) -> str:
    """Return the argument count followed by each argument on its own line."""
    lines = [f"Number of arguments: {len(argv)}", *argv]
    return "".join(f"{line}\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Print pid, parent pid, pid limit and arguments."""
    if argv is None:
        argv = sys.argv
    print(os.getpid())
    print(os.getppid())
    try:
        pid_max = read_pid_max()
    except (OSError, ValueError) as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1
    print(pid_max)
    sys.stdout.write(describe_args(argv))
    return 0


if __name__ == "__main__":
    sys.exit(main())