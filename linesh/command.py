"""Parsed command and redirection target types"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class RedirectMode(Enum):
    """How a redirected stream opens its file"""
    OVERWRITE = 'write'
    APPEND = 'append'


@dataclass(frozen=True)
class RedirectionTarget:
    """Destination of one output stream: the console (no path) or a file"""
    path: Optional[str] = None
    mode: RedirectMode = RedirectMode.OVERWRITE

    @classmethod
    def to_file(cls, path: str, append: bool = False) -> 'RedirectionTarget':
        mode = RedirectMode.APPEND if append else RedirectMode.OVERWRITE
        return cls(path=path, mode=mode)

    @property
    def is_console(self) -> bool:
        return self.path is None

    @property
    def append(self) -> bool:
        return self.mode is RedirectMode.APPEND

    def __repr__(self):
        if self.is_console:
            return "RedirectionTarget(console)"
        return f"RedirectionTarget({self.path!r}, {self.mode.value})"


CONSOLE = RedirectionTarget()


@dataclass
class ParsedCommand:
    """A command line after tokenizing and redirection extraction"""
    name: str
    args: List[str] = field(default_factory=list)
    stdout: RedirectionTarget = CONSOLE
    stderr: RedirectionTarget = CONSOLE

    def __post_init__(self):
        if not self.name:
            raise ValueError("command name must not be empty")
