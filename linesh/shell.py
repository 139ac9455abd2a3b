"""Shell implementation with REPL and command execution"""

import logging
from typing import List, Optional

from rich.console import Console

from .builtins import get_builtin
from .command import ParsedCommand
from .config import Config
from .errors import CommandNotFoundError, ProcessError, RedirectionError
from .external import ExternalRunner
from .parser import CommandParser
from .process import Process
from .streams import ErrorStream, OutputStream

logger = logging.getLogger(__name__)


class Shell:
    """Line-oriented shell: parse one line, run it, repeat"""

    def __init__(self, config: Optional[Config] = None,
                 console: Optional[Console] = None,
                 error_console: Optional[Console] = None):
        self.config = config or Config.from_env()
        self.parser = CommandParser()
        self.console = console or Console(highlight=False, markup=False, emoji=False, soft_wrap=True)
        self.error_console = error_console or Console(
            stderr=True, highlight=False, markup=False, emoji=False, soft_wrap=True
        )
        # Sinks used whenever a stream is not redirected
        self.stdout = OutputStream.from_console(self.console)
        self.stderr = ErrorStream.from_console(self.error_console)
        self.runner = ExternalRunner(self.stdout, self.stderr)

    def execute(self, command_line: str) -> int:
        """
        Parse and run one command line

        Args:
            command_line: Raw line as typed

        Returns:
            Exit code of the command (0 if nothing was run)
        """
        errors: List[str] = []
        parsed = self.parser.parse_command_line(command_line, errors)
        for message in errors:
            self.stderr.write(message + '\n')

        if parsed is None:
            return 0

        return self.dispatch(parsed)

    def dispatch(self, parsed: ParsedCommand) -> int:
        """Run a parsed command as a builtin or an external program"""
        executor = get_builtin(parsed.name)
        if executor is not None:
            logger.debug("builtin %s %r", parsed.name, parsed.args)
            return self.run_builtin(parsed, executor)

        logger.debug("external %s %r", parsed.name, parsed.args)
        return self.run_external(parsed)

    def run_builtin(self, parsed: ParsedCommand, executor) -> int:
        """
        Run a builtin with its redirected sinks

        File sinks are opened before the handler runs and closed on every
        way out of it, including SystemExit from `exit 0`.
        """
        stdout = None
        stderr = None
        try:
            stdout = OutputStream.for_target(parsed.stdout, self.console)
            stderr = ErrorStream.for_target(parsed.stderr, self.error_console)
        except RedirectionError as e:
            if stdout is not None:
                stdout.close()
            self.stderr.write(f"{e}\n")
            return 1

        process = Process(
            command=parsed.name,
            args=parsed.args,
            stdout=stdout,
            stderr=stderr,
            executor=executor,
        )
        try:
            return process.execute()
        finally:
            stdout.close()
            stderr.close()

    def run_external(self, parsed: ParsedCommand) -> int:
        try:
            return self.runner.run(parsed.name, parsed.args, parsed.stdout, parsed.stderr)
        except CommandNotFoundError as e:
            self.stderr.write(f"{e}\n")
            return 127
        except ProcessError as e:
            self.stderr.write(f"Error: {e}\n")
            return 126

    def repl(self) -> int:
        """
        Run interactive REPL

        Returns:
            Exit status for the shell process
        """
        while True:
            try:
                line = input(self.config.prompt)
            except EOFError:
                self.console.file.write('\n')
                return 0
            except KeyboardInterrupt:
                self.console.file.write('\n')
                continue
            except UnicodeDecodeError as e:
                self.stderr.write(f"linesh: cannot decode input: {e.reason}\n")
                continue

            line = line.strip()
            if not line:
                continue

            try:
                self.execute(line)
            except KeyboardInterrupt:
                self.console.file.write('\n')
