"""MCP server exposing Azure DevOps wiki operations as agent tools."""

from .provider import WikiClientProvider, build_service
from .server import WikiTools, create_server, run_server

__all__ = ['WikiClientProvider', 'build_service', 'WikiTools', 'create_server', 'run_server']
