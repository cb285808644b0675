"""Typed exception hierarchy for Azure DevOps wiki errors.

This module defines all custom exceptions used by the wiki client library.
All exceptions inherit from WikiError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Any, Dict, Optional


class WikiError(Exception):
    """Base exception for all azure-devops-wiki errors.

    Use this to catch any application-level error from the adapter.
    """
    pass


class NotConfiguredError(WikiError):
    """Raised when organization or project cannot be resolved for a call."""

    def __init__(self, missing: Optional[list] = None):
        message = "Organization and project must be provided either in the request or configuration"
        if missing:
            message += f" (missing: {', '.join(missing)})"
        super().__init__(message)
        self.missing = missing or []


class InvalidCredentialsError(WikiError):
    """Raised when no usable credential is configured or authentication fails."""

    def __init__(self, endpoint: str, reason: str = "no personal access token or bearer token configured"):
        super().__init__(f"Authentication failed for {endpoint}: {reason}")
        self.endpoint = endpoint
        self.reason = reason


class ConfigError(WikiError):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field


class RequestValidationError(WikiError):
    """Raised when tool or command arguments are invalid."""

    def __init__(self, field_name: str, message: str):
        super().__init__(f"Invalid argument '{field_name}': {message}")
        self.field_name = field_name


class PageNotFoundError(WikiError):
    """Raised when a page required by a read does not exist."""

    def __init__(self, path: str, wiki_id: Optional[str] = None):
        if wiki_id:
            message = f"Page '{path}' not found in wiki '{wiki_id}'"
        else:
            message = f"Page '{path}' not found"
        super().__init__(message)
        self.path = path
        self.wiki_id = wiki_id


class WikiOperationError(WikiError):
    """Base exception for a failed wiki operation.

    The message always starts with ``Failed to <operation>:`` so callers
    can tell which step of a request failed.
    """

    def __init__(self, operation: str, detail: str):
        super().__init__(f"Failed to {operation}: {detail}")
        self.operation = operation
        self.detail = detail


class TransportError(WikiOperationError):
    """Raised when the service cannot be reached (connection, timeout, TLS)."""
    pass


class UpstreamStatusError(WikiOperationError):
    """Raised when a required call returns a non-success HTTP status.

    ``details`` carries the diagnostic payload for writes: request URL,
    sanitized request headers, request body, and the probe state.
    """

    def __init__(
        self,
        operation: str,
        status_code: int,
        url: str = "",
        details: Optional[Dict[str, Any]] = None,
    ):
        detail = f"HTTP {status_code}"
        if url:
            detail += f" from {url}"
        if details:
            lines = [f"{key}: {value}" for key, value in details.items()]
            detail += "\n" + "\n".join(lines)
        super().__init__(operation, detail)
        self.status_code = status_code
        self.url = url
        self.details = details or {}


class MalformedResponseError(WikiOperationError):
    """Raised when a response body is missing, unparseable, or has no result."""
    pass
