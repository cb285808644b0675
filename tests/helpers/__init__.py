"""Test helper modules for wiki client testing.

This package provides:
- mock_responses: Stand-ins for requests.Response and a mocked APIWrapper
"""

from .mock_responses import make_response, make_api

__all__ = [
    'make_response',
    'make_api',
]
