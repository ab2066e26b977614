"""
sitefavicon.tools – Adapters for the external favicon tooling.

command.py    → SubprocessRunner, split_command
generator.py  → BundleGenerator
injector.py   → TagInjector
"""

from .command import SubprocessRunner, split_command
from .generator import BundleGenerator, load_metadata
from .injector import TagInjector

__all__ = [
    "BundleGenerator",
    "SubprocessRunner",
    "TagInjector",
    "load_metadata",
    "split_command",
]
