"""linesh - a small line-oriented command interpreter"""

from .version import __version__

__all__ = ['__version__']
