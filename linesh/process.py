"""Process class carrying a builtin's arguments and output context"""

from typing import Callable, List, Optional

from .errors import UsageError
from .streams import ErrorStream, OutputStream


class Process:
    """Represents a single command invocation and the sinks it writes to"""

    def __init__(
        self,
        command: str,
        args: List[str],
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        executor: Optional[Callable] = None
    ):
        """
        Initialize a process

        Args:
            command: Command name
            args: Command arguments
            stdout: Output stream
            stderr: Error stream
            executor: Callable that executes the command
        """
        self.command = command
        self.args = args
        self.stdout = stdout or OutputStream.to_buffer()
        self.stderr = stderr or ErrorStream.to_buffer()
        self.executor = executor
        self.exit_code = 0

    @property
    def arg_string(self) -> str:
        """
        Arguments joined by single spaces.

        Builtins only ever see this flattened form, so "a b" given as one
        quoted argument is indistinguishable from two arguments.
        """
        return ' '.join(self.args)

    def execute(self) -> int:
        """
        Execute the process

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        if self.executor is None:
            self.stderr.write(f"Error: No executor for command '{self.command}'\n")
            self.exit_code = 127
            return self.exit_code

        try:
            self.exit_code = self.executor(self) or 0
        except UsageError as e:
            self.stderr.write(f"{e}\n")
            self.exit_code = 1
        except Exception as e:
            self.stderr.write(f"Error executing '{self.command}': {str(e)}\n")
            self.exit_code = 1
        finally:
            self.stdout.flush()
            self.stderr.flush()

        return self.exit_code

    def get_stdout(self) -> str:
        """Get stdout contents"""
        return self.stdout.get_value()

    def get_stderr(self) -> str:
        """Get stderr contents"""
        return self.stderr.get_value()

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
