"""A minimal interactive command shell."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping
from typing import IO, TextIO

from minish.helpers import get_path, line_to_arr


def _fd_or_pipe(stream: IO) -> int:
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return subprocess.PIPE


class Shell:
    """Reads command lines, runs builtins and launches programs."""

    def __init__(
        self,
        program_name: str = "minish",
        environ: Mapping[str, str] | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.program_name = program_name
        self.environ = os.environ if environ is None else environ
        self.stdout = sys.stdout if stdout is None else stdout
        self.stderr = sys.stderr if stderr is None else stderr
        self.exit_status = 0
        self.line_count = 1

    def process_command(self, args: list[str]) -> str | None:
        """Handle builtins and resolve the command path.

        Returns the path to execute, or None when the line is finished.
        Raises SystemExit with the last status for the ``exit`` builtin.
        """
        if not args:
            self.line_count += 1
            return None

        name = args[0]
        if name == "exit":
            raise SystemExit(self.exit_status)

        if name == "env":
            for key, value in self.environ.items():
                self.stdout.write(f"{key}={value}\n")
            self.exit_status = 0
            self.line_count += 1
            return None

        command_path = get_path(name, self.environ)
        if command_path is None:
            self.stderr.write(
                f"{self.program_name}: {self.line_count}: {name}: not found\n"
            )
            self.exit_status = 127
            self.line_count += 1
            return None
        return command_path

    def execute_command(self, args: list[str], command_path: str) -> None:
        """Run *command_path* with *args* in an empty environment and wait for it."""
        out = _fd_or_pipe(self.stdout)
        err = _fd_or_pipe(self.stderr)
        self.stdout.flush()
        self.stderr.flush()
        try:
            proc = subprocess.run(
                args, executable=command_path, env={}, stdout=out, stderr=err
            )
        except OSError as exc:
            self.stderr.write(f"execve failed: {exc.strerror}\n")
            self.exit_status = 1
            return

        if out == subprocess.PIPE and proc.stdout:
            self.stdout.write(proc.stdout.decode(errors="replace"))
        if err == subprocess.PIPE and proc.stderr:
            self.stderr.write(proc.stderr.decode(errors="replace"))
        if proc.returncode >= 0:
            self.exit_status = proc.returncode

    def run_line(self, line: str) -> int:
        """Process one input line and return the current exit status."""
        if line.endswith("\n"):
            line = line[:-1]
        args = line_to_arr(line)
        command_path = self.process_command(args)
        if command_path is not None:
            self.execute_command(args, command_path)
            self.line_count += 1
        return self.exit_status

    def run(self, stream: TextIO, interactive: bool | None = None) -> int:
        """Read lines from *stream* until end of input or ``exit``; return the status."""
        if interactive is None:
            interactive = stream.isatty()
        while True:
            if interactive:
                self.stdout.write("$ ")
                self.stdout.flush()
            line = stream.readline()
            if not line:
                break
            try:
                self.run_line(line)
            except SystemExit as request:
                return request.code if isinstance(request.code, int) else 0
        return self.exit_status


def main(argv: list[str] | None = None) -> int:
    """Run the shell on standard input."""
    if argv is None:
        argv = sys.argv
    program_name = argv[0] if argv else "minish"
    shell = Shell(program_name, os.environ, sys.stdout, sys.stderr)
    return shell.run(sys.stdin)


if __name__ == "__main__":
    sys.exit(main())