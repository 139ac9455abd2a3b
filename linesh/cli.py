"""Main CLI entry point for linesh"""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from .config import Config
from .shell import Shell
from .version import get_version_string


def setup_logging(debug: bool):
    """Send log records to stderr through rich"""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def execute_script_file(shell: Shell, script_path: str) -> int:
    """Execute a script file line by line"""
    try:
        with open(script_path, 'r', encoding='utf-8') as f:
            lines = f.readlines()
    except FileNotFoundError:
        sys.stderr.write(f"linesh: {script_path}: No such file or directory\n")
        return 127
    except OSError as e:
        sys.stderr.write(f"linesh: {script_path}: {e.strerror or e}\n")
        return 1

    exit_code = 0
    for line_num, line in enumerate(lines, 1):
        line = line.strip()

        # Skip empty lines and comments
        if not line or line.startswith('#'):
            continue

        exit_code = shell.execute(line)
        if exit_code != 0:
            sys.stderr.write(f"Error at line {line_num}: command failed with exit code {exit_code}\n")
            return exit_code

    return exit_code


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=get_version_string(), prog_name="linesh")
@click.option("-c", "command_string", default=None, help="Execute a single command line and exit")
@click.option(
    "--prompt",
    default=None,
    help="Prompt shown in interactive mode (can also set via LINESH_PROMPT)",
)
@click.option("--debug", is_flag=True, help="Log parsing and dispatch details to stderr")
@click.argument("script", required=False, type=click.Path(dir_okay=False))
def main(command_string, prompt, debug, script):
    """linesh - a small line-oriented command interpreter

    \b
    Examples:
      linesh                      start an interactive session
      linesh -c 'echo hi > out'   run one command line
      linesh setup.sh             run a file line by line
    """
    config = Config.from_args(prompt=prompt, debug=debug)
    setup_logging(config.debug)

    shell = Shell(config=config)

    if command_string is not None:
        sys.exit(shell.execute(command_string))

    if script:
        sys.exit(execute_script_file(shell, script))

    sys.exit(shell.repl())


if __name__ == "__main__":
    main()
