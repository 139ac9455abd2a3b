"""Run external programs found on the search path"""

import logging
import subprocess
from typing import List, Optional

from .command import RedirectionTarget
from .errors import CommandNotFoundError, ProcessError
from .filesystem import find_executable, write_text
from .streams import ErrorStream, OutputStream

logger = logging.getLogger(__name__)


class ExternalRunner:
    """
    Spawns external programs and routes their captured output.

    Both child streams are drained together by communicate(), so a child
    that fills one pipe while the other is unread cannot stall the shell.
    """

    def __init__(self, stdout: OutputStream, stderr: ErrorStream, path_env: Optional[str] = None):
        """
        Args:
            stdout: Console sink for captured stdout
            stderr: Console sink for captured stderr and for errors
            path_env: Search path override; defaults to $PATH at call time
        """
        self.stdout = stdout
        self.stderr = stderr
        self.path_env = path_env

    def resolve(self, name: str) -> str:
        """
        Raises:
            CommandNotFoundError: If no file on the search path matches
        """
        path = find_executable(name, self.path_env)
        if path is None:
            raise CommandNotFoundError(name)
        return path

    def run(self, name: str, args: List[str],
            stdout_target: RedirectionTarget,
            stderr_target: RedirectionTarget) -> int:
        """
        Run a program to completion and route its output

        Args:
            name: Command name as typed
            args: Arguments passed to the program
            stdout_target: Where captured stdout goes
            stderr_target: Where captured stderr goes

        Returns:
            The program's exit code

        Raises:
            CommandNotFoundError: If the name does not resolve
            ProcessError: If the program cannot be started
        """
        program = self.resolve(name)

        try:
            completed = subprocess.run(
                [name] + list(args),
                executable=program,
                capture_output=True,
                encoding='utf-8',
                errors='replace',
            )
        except (OSError, ValueError) as e:
            # ValueError: arguments subprocess refuses, e.g. an embedded NUL
            message = getattr(e, "strerror", None) or str(e)
            raise ProcessError(message) from e

        logger.debug("%s exited with %d", program, completed.returncode)

        self._route(completed.stdout, stdout_target, self.stdout)
        self._route(completed.stderr, stderr_target, self.stderr)
        return completed.returncode

    def _route(self, text: str, target: RedirectionTarget, console_stream: OutputStream):
        if target.is_console:
            console_stream.write(text)
            return

        try:
            write_text(target.path, text, append=target.append)
        except OSError as e:
            self.stderr.write(f"Error writing to {target.path}: {e.strerror or e}\n")
