"""Version information for linesh"""

__version__ = "0.1.0"


def get_version_string():
    """Get formatted version string"""
    return f"linesh {__version__}"
