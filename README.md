# minish

A small command shell. It reads one command per line, splits the line on
spaces, finds the program, runs it and waits for it to finish.

## Installation

```
pip install .
```

## Usage

Start an interactive session:

```
minish
$ ls -l /tmp
$ env
$ exit
```

It also reads commands from a pipe or a file:

```
echo "ls -l" | minish
```

Behaviour:

- A line is split on space characters; runs of spaces are treated as one
  separator. Empty lines are skipped.
- A command that contains a `/` is run as given, if that file is executable.
  Any other command is looked up in each directory of the shell's `PATH` in
  turn, and the first executable match is used.
- Programs are started with an empty environment.
- `env` prints the shell's environment, one `NAME=value` per line, and sets
  the status to 0.
- `exit` leaves the shell. Its exit status is that of the last command; any
  arguments to `exit` are ignored.
- A command that cannot be found prints
  `<program>: <line number>: <command>: not found` to standard error and
  sets the status to 127.
- At end of input the shell exits with the status of the last command.
- The `$ ` prompt appears only when standard input is a terminal.

## What it does not do

There is no quoting, no variable expansion, no globbing, no pipes or
redirection, no `;` or `&&`, no background jobs and no `cd` or other
built-ins beyond `env` and `exit`.

## Process information

```
minish-procinfo one two
```

This prints, each on its own line: the process id, the parent process id,
the kernel's largest allowed process id (read from
`/proc/sys/kernel/pid_max`), the number of arguments including the program
name, and then each argument including the program name. If the pid limit
cannot be read, it prints an error to standard error and exits with status 1.

The `minish.procinfo` module offers the pieces on their own:

```python
from minish.procinfo import read_pid_max, describe_args

read_pid_max()                      # e.g. 4194304
describe_args(["prog", "one"])      # 'Number of arguments: 2\nprog\none\n'
```

## Library use

```python
from minish.helpers import line_to_arr, get_env, get_path, remove_space
from minish.shell import Shell

line_to_arr("ls  -l /tmp")                 # ['ls', '-l', '/tmp']
get_env("PATH", {"PATH": "/bin"})          # '/bin'
get_path("ls", {"PATH": "/bin:/usr/bin"})  # '/bin/ls' if executable there
remove_space("  ls -l  ")                  # 'ls -l'

shell = Shell("minish")
shell.run_line("ls -l")    # returns the exit status
```

`get_env` matches an entry whose `NAME=value` text starts with the given
name, in the environment's own order. `remove_leading_spaces` strips leading
spaces only.

`Shell(program_name, environ, stdout, stderr)` defaults to `os.environ` and
the process's standard streams. `Shell.run(stream, interactive=None)` reads
lines until end of input or `exit` and returns the final status; `exit`
inside `run_line` or `process_command` raises `SystemExit`.

## Tests

```
pip install .[test]
pytest
```