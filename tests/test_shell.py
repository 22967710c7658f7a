import io
import stat
import sys

import pytest

from minish.shell import Shell, main


def _script(directory, name, body):
    path = directory / name
    path.write_text(body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def shell(tmp_path):
    return Shell("hsh", {"PATH": str(tmp_path)}, io.StringIO(), io.StringIO())


def test_not_found_reports_and_sets_status(shell):
    assert shell.run_line("nosuch\n") == 127
    assert shell.stderr.getvalue() == "hsh: 1: nosuch: not found\n"
    assert shell.line_count == 2


def test_line_count_advances_on_empty_lines(shell):
    shell.run(io.StringIO("\n   \nnosuch\n"), interactive=False)
    assert shell.stderr.getvalue() == "hsh: 3: nosuch: not found\n"


def test_runs_program_and_captures_status(shell, tmp_path):
    _script(tmp_path, "fail", "#!/bin/sh\nexit 3\n")
    assert shell.run_line("fail") == 3
    assert shell.line_count == 2


def test_passes_arguments_and_output(shell, tmp_path):
    _script(tmp_path, "say", '#!/bin/sh\necho "$1 $2"\n')
    shell.run_line("say hello world\n")
    assert shell.stdout.getvalue() == "hello world\n"
    assert shell.exit_status == 0


def test_child_gets_empty_environment(tmp_path):
    _script(tmp_path, "show", '#!/bin/sh\necho "${FOO:-unset}"\n')
    sh = Shell("hsh", {"PATH": str(tmp_path), "FOO": "bar"}, io.StringIO(), io.StringIO())
    sh.run_line("show")
    assert sh.stdout.getvalue() == "unset\n"


def test_absolute_path_command(shell, tmp_path):
    exe = _script(tmp_path, "seven", "#!/bin/sh\nexit 7\n")
    assert shell.run_line(str(exe)) == 7


def test_env_builtin_prints_environment(tmp_path):
    sh = Shell("hsh", {"A": "1", "PATH": str(tmp_path)}, io.StringIO(), io.StringIO())
    sh.exit_status = 127
    assert sh.run_line("env") == 0
    assert sh.stdout.getvalue() == f"A=1\nPATH={tmp_path}\n"


def test_exit_builtin_raises_with_last_status(shell):
    shell.run_line("nosuch")
    with pytest.raises(SystemExit) as info:
        shell.process_command(["exit"])
    assert info.value.code == 127


def test_run_returns_status_on_exit(shell, tmp_path):
    _script(tmp_path, "ok", "#!/bin/sh\nexit 0\n")
    status = shell.run(io.StringIO("nosuch\nexit\nok\n"), interactive=False)
    assert status == 127
    assert shell.line_count == 2


def test_run_returns_last_status_at_end_of_input(shell, tmp_path):
    _script(tmp_path, "fail", "#!/bin/sh\nexit 5\n")
    assert shell.run(io.StringIO("nosuch\nfail"), interactive=False) == 5


def test_interactive_prompt(shell):
    shell.run(io.StringIO("\n"), interactive=True)
    assert shell.stdout.getvalue() == "$ $ "


def test_non_interactive_has_no_prompt(shell):
    shell.run(io.StringIO("\n"), interactive=False)
    assert shell.stdout.getvalue() == ""


def test_exec_failure_sets_status_one(shell, tmp_path):
    _script(tmp_path, "broken", "echo no interpreter line\n")
    assert shell.run_line("broken") == 1
    assert "execve failed" in shell.stderr.getvalue()


def test_signal_death_keeps_previous_status(shell, tmp_path):
    _script(tmp_path, "die", "#!/bin/sh\nkill -9 $$\n")
    shell.run_line("nosuch")
    assert shell.run_line("die") == 127


def test_process_command_returns_path(shell, tmp_path):
    _script(tmp_path, "tool", "#!/bin/sh\n")
    assert shell.process_command(["tool", "-x"]) == f"{tmp_path}/tool"
    assert shell.line_count == 1


def test_main_reads_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("exit\n"))
    assert main(["hsh"]) == 0