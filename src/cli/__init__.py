"""Command-line interface for the Azure DevOps wiki adapter.

This package provides the `azure-wiki` CLI tool, which runs the MCP server
and exposes the wiki operations for scripting, along with the settings file
loader and terminal output shared by both.
"""

from .models import ExitCode, ServerSettings
from .config import ConfigLoader

__all__ = [
    'ExitCode',
    'ServerSettings',
    'ConfigLoader',
]
