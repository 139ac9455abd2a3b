"""Built-in shell commands"""

import os
import sys

from .errors import UsageError
from .filesystem import change_directory, find_executable, resolve_path
from .process import Process


def cmd_echo(process: Process) -> int:
    """Echo arguments to stdout"""
    process.stdout.write(process.arg_string + '\n')
    return 0


def cmd_exit(process: Process) -> int:
    """
    Exit the shell

    Usage: exit 0

    Only status 0 is accepted; anything else prints usage and the shell
    keeps running.
    """
    if process.arg_string == '0':
        sys.exit(0)
    raise UsageError("Usage: exit 0")


def cmd_type(process: Process) -> int:
    """
    Describe how a name would be interpreted

    Usage: type <command>
    """
    name = process.arg_string
    if not name:
        raise UsageError("Usage: type <command>")

    if name in BUILTIN_NAMES:
        process.stdout.write(f"{name} is a shell builtin\n")
        return 0

    path = find_executable(name)
    if path is None:
        process.stdout.write(f"{name}: not found\n")
        return 1

    process.stdout.write(f"{name} is {path}\n")
    return 0


def cmd_pwd(process: Process) -> int:
    """Print working directory"""
    process.stdout.write(os.getcwd() + '\n')
    return 0


def cmd_cd(process: Process) -> int:
    """
    Change directory

    Usage: cd <directory>
    """
    if not process.arg_string:
        raise UsageError("Usage: cd <directory>")

    target = resolve_path(process.arg_string)
    result = change_directory(target)
    if result.ok:
        return 0

    process.stderr.write(f"cd: {result.path}: {result.describe()}\n")
    return 1


# Registry mapping command names to their functions
BUILTINS = {
    'echo': cmd_echo,
    'exit': cmd_exit,
    'type': cmd_type,
    'pwd': cmd_pwd,
    'cd': cmd_cd,
}

# Names reported as shell builtins by `type`
BUILTIN_NAMES = frozenset(BUILTINS)


def get_builtin(command: str):
    """Get a built-in command executor"""
    return BUILTINS.get(command)
