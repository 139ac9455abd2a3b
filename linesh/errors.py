"""Exception types raised inside the shell"""


class ShellError(Exception):
    """Base class for shell errors that are reported and then ignored"""
    pass


class CommandNotFoundError(ShellError):
    """A command name could not be resolved to a builtin or an executable"""

    def __init__(self, name: str):
        super().__init__(f"{name}: not found")
        self.name = name


class UsageError(ShellError):
    """A builtin was called with malformed arguments"""
    pass


class RedirectionError(ShellError):
    """A redirection target could not be opened"""

    def __init__(self, path: str, reason: str):
        super().__init__(f"linesh: {path}: {reason}")
        self.path = path
        self.reason = reason


class ProcessError(ShellError):
    """Starting or talking to an external program failed"""
    pass
