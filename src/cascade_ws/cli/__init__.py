"""Command-line interface for the Cascade web services client.

This package provides the `cascade-ws` CLI tool for looking up asset types
and inspecting assets from a terminal.
"""

from .models import ExitCode
from .output import OutputHandler

__all__ = [
    'ExitCode',
    'OutputHandler',
]
