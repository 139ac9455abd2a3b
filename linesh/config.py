"""Configuration management for linesh"""

import os

DEFAULT_PROMPT = '$ '

_TRUTHY = ('1', 'true', 'yes', 'on')


class Config:
    """Configuration for the shell"""

    def __init__(self):
        self.prompt = os.getenv('LINESH_PROMPT', DEFAULT_PROMPT)
        self.debug = os.getenv('LINESH_DEBUG', '').lower() in _TRUTHY

    @classmethod
    def from_env(cls):
        """Create configuration from environment variables"""
        return cls()

    @classmethod
    def from_args(cls, prompt: str = None, debug: bool = False):
        """Create configuration from command line arguments"""
        config = cls()
        if prompt is not None:
            config.prompt = prompt
        if debug:
            config.debug = True
        return config

    def __repr__(self):
        return f"Config(prompt={self.prompt!r}, debug={self.debug})"
