"""Local filesystem helpers: executable lookup, path resolution, cd"""

import logging
import os
from enum import Enum
from typing import List, Optional

logger = logging.getLogger(__name__)


def search_path(path_env: Optional[str] = None) -> List[str]:
    """
    Directories to search for executables, in order

    Args:
        path_env: Search path string; defaults to $PATH
    """
    if path_env is None:
        path_env = os.environ.get('PATH', '')
    if not path_env:
        return []
    return path_env.split(os.pathsep)


def find_executable(name: str, path_env: Optional[str] = None) -> Optional[str]:
    """
    Resolve a command name to the first matching file on the search path

    Only existence is checked: a file without execute permission still
    resolves, and spawning it fails later.

    Args:
        name: Command name
        path_env: Search path string; defaults to $PATH

    Returns:
        Full path of the match, or None
    """
    for directory in search_path(path_env):
        candidate = os.path.join(directory, name)
        if os.path.exists(candidate) and not os.path.isdir(candidate):
            logger.debug("resolved %s -> %s", name, candidate)
            return candidate
    return None


def resolve_path(path: str, cwd: Optional[str] = None) -> str:
    """
    Resolve a path for cd

    "~" becomes $HOME (empty if unset), relative paths are joined to the
    working directory and normalized, absolute paths pass through.
    """
    if path == '~':
        return os.environ.get('HOME', '')
    if not os.path.isabs(path):
        return os.path.normpath(os.path.join(cwd or os.getcwd(), path))
    return path


class ChangeDirStatus(Enum):
    OK = 'ok'
    NOT_FOUND = 'not_found'
    PERMISSION_DENIED = 'permission_denied'
    OTHER = 'other'


class ChangeDirResult:
    """Outcome of change_directory()"""

    def __init__(self, status: ChangeDirStatus, path: str, message: str = ''):
        self.status = status
        self.path = path
        self.message = message

    @property
    def ok(self) -> bool:
        return self.status is ChangeDirStatus.OK

    def describe(self) -> str:
        """Human readable reason for a failed change"""
        if self.status is ChangeDirStatus.NOT_FOUND:
            return "No such file or directory"
        if self.status is ChangeDirStatus.PERMISSION_DENIED:
            return "Permission denied"
        return self.message

    def __repr__(self):
        return f"ChangeDirResult({self.status.name}, {self.path!r})"


def change_directory(target: str) -> ChangeDirResult:
    """
    Make target the process working directory

    Args:
        target: Already resolved directory path

    Returns:
        ChangeDirResult tagged with what happened; never raises for
        ordinary filesystem failures
    """
    if not os.path.isdir(target):
        return ChangeDirResult(ChangeDirStatus.NOT_FOUND, target)

    try:
        os.chdir(target)
    except FileNotFoundError:
        return ChangeDirResult(ChangeDirStatus.NOT_FOUND, target)
    except PermissionError:
        return ChangeDirResult(ChangeDirStatus.PERMISSION_DENIED, target)
    except OSError as e:
        return ChangeDirResult(ChangeDirStatus.OTHER, target, e.strerror or str(e))

    logger.debug("cwd is now %s", target)
    return ChangeDirResult(ChangeDirStatus.OK, target)


def write_text(path: str, text: str, append: bool = False):
    """Write captured output to a file, appending or replacing its content"""
    mode = 'a' if append else 'w'
    with open(path, mode, encoding='utf-8') as f:
        f.write(text)
