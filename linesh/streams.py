"""Output sinks for command stdout and stderr"""

import io
from typing import Optional, TextIO, Union

from rich.console import Console
from rich.style import Style

from .command import RedirectionTarget
from .errors import RedirectionError

RED = Style(color="red")


class OutputStream:
    """
    Text sink for a command's standard output.

    A stream writes to exactly one place: a rich console, an open file,
    or an in-memory buffer. File streams own their handle and release it
    on close().
    """

    def __init__(self, target: Optional[TextIO] = None, console: Optional[Console] = None,
                 owns_target: bool = False, name: str = '<stream>'):
        self.target = target
        self.console = console
        self.name = name
        self._owns_target = owns_target
        self.closed = False

    @classmethod
    def from_console(cls, console: Console):
        """Create a stream that writes straight to a console"""
        return cls(console=console, name='<console>')

    @classmethod
    def to_file(cls, path: str, append: bool = False):
        """
        Open a file sink

        Args:
            path: File to write
            append: Keep existing content and write after it

        Raises:
            RedirectionError: If the file cannot be opened
        """
        mode = 'a' if append else 'w'
        try:
            handle = open(path, mode, encoding='utf-8')
        except OSError as e:
            raise RedirectionError(path, e.strerror or str(e)) from e
        return cls(target=handle, owns_target=True, name=path)

    @classmethod
    def to_buffer(cls):
        """Create a stream that collects everything in memory"""
        return cls(target=io.StringIO(), name='<buffer>')

    @classmethod
    def for_target(cls, target: RedirectionTarget, console: Console):
        """Build the sink a redirection target asks for"""
        if target.is_console:
            return cls.from_console(console)
        return cls.to_file(target.path, append=target.append)

    def write(self, data: Union[str, bytes]) -> int:
        if isinstance(data, bytes):
            data = data.decode('utf-8', errors='replace')
        if not data:
            return 0
        if self.closed:
            raise ValueError(f"write to closed stream {self.name}")
        if self.console is not None:
            self._write_console(data)
        else:
            self.target.write(data)
        return len(data)

    def _write_console(self, text: str):
        # verbatim, bypassing rich rendering
        self.console.file.write(text)
        self.console.file.flush()

    def flush(self):
        if self.console is not None:
            self.console.file.flush()
        elif self.target is not None and not self.closed:
            self.target.flush()

    def close(self):
        """Flush and, for file sinks, release the handle"""
        if self.closed:
            return
        self.flush()
        if self._owns_target:
            self.target.close()
            self.closed = True

    def get_value(self) -> str:
        """Contents written so far (buffer streams only)"""
        if isinstance(self.target, io.StringIO):
            return self.target.getvalue()
        return ''

    def __repr__(self):
        return f"{type(self).__name__}({self.name})"


class ErrorStream(OutputStream):
    """Sink for a command's standard error; red on an interactive terminal"""

    def _write_console(self, text: str):
        if self.console.is_terminal and not self.console.no_color:
            # wrap in raw SGR codes; the text itself is never re-rendered
            self.console.file.write(RED.render(text))
            self.console.file.flush()
        else:
            super()._write_console(text)
