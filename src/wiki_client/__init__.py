"""Azure DevOps wiki client library.

This package provides Python abstractions over the Azure DevOps Wiki REST
API: settings and credential loading, an HTTP session wrapper, and the typed
error hierarchy shared by every layer of the adapter.
"""

from .errors import (
    WikiError,
    NotConfiguredError,
    InvalidCredentialsError,
    ConfigError,
    RequestValidationError,
    PageNotFoundError,
    WikiOperationError,
    TransportError,
    UpstreamStatusError,
    MalformedResponseError,
)

__all__ = [
    "WikiError",
    "NotConfiguredError",
    "InvalidCredentialsError",
    "ConfigError",
    "RequestValidationError",
    "PageNotFoundError",
    "WikiOperationError",
    "TransportError",
    "UpstreamStatusError",
    "MalformedResponseError",
]
