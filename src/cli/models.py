"""Data models for CLI operations.

This module defines the data models used by the CLI and server entry
points. All models use dataclasses, following the patterns established in
src/models/wiki_page.py.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from src.wiki_client.api_wrapper import API_VERSION, DEFAULT_BRANCH, DEFAULT_TIMEOUT


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Operation completed successfully
    - GENERAL_ERROR (1): General error (config issues, validation, bad responses)
    - NOT_FOUND (2): Requested page does not exist
    - AUTH_ERROR (3): Authentication or authorization failure
    - NETWORK_ERROR (4): Network connectivity or API availability issues

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    NOT_FOUND = 2
    AUTH_ERROR = 3
    NETWORK_ERROR = 4


@dataclass
class ServerSettings:
    """Defaults read from .azure-wiki/config.yaml.

    Environment variables override organization, project and url;
    per-request arguments override both.

    Attributes:
        organization: Default Azure DevOps organization
        project: Default project
        url: Custom collection URL (on-premises servers)
        default_branch: Branch page writes target
        api_version: REST api-version parameter
        timeout: Per-request HTTP timeout in seconds
    """
    organization: Optional[str] = None
    project: Optional[str] = None
    url: Optional[str] = None
    default_branch: str = DEFAULT_BRANCH
    api_version: str = API_VERSION
    timeout: float = DEFAULT_TIMEOUT

    def connection_defaults(self) -> dict:
        """Values the Authenticator falls back to when env vars are unset."""
        return {
            key: value
            for key, value in (
                ('organization', self.organization),
                ('project', self.project),
                ('url', self.url),
            )
            if value is not None
        }
