"""Authentication module for loading Azure DevOps credentials.

This module handles loading Azure DevOps connection settings from environment
variables using python-dotenv, layered over optional file defaults. It
validates every value that is present and selects the credential used to
authorize requests: a personal access token (basic auth), a pre-issued
bearer token, or a token obtained from the Azure identity chain
(DefaultAzureCredential).
"""

import base64
import os
from typing import NamedTuple, Optional
from urllib.parse import urlparse

from azure.core.exceptions import AzureError
from azure.identity import DefaultAzureCredential
from dotenv import load_dotenv

from .errors import ConfigError, InvalidCredentialsError

DEFAULT_SERVICE_URL = "https://dev.azure.com"

ENV_URL = 'AZURE_DEVOPS_URL'
ENV_ORGANIZATION = 'AZURE_DEVOPS_ORGANIZATION'
ENV_PROJECT = 'AZURE_DEVOPS_PROJECT'
ENV_PAT = 'AZURE_DEVOPS_PAT'
ENV_TOKEN = 'AZURE_DEVOPS_TOKEN'

# Resource scope of Azure DevOps for Microsoft Entra ID tokens
AZURE_DEVOPS_SCOPE = "https://app.vssps.visualstudio.com/.default"


class Credentials(NamedTuple):
    """Azure DevOps connection settings and credential."""
    organization: Optional[str]
    project: Optional[str]
    url: Optional[str] = None
    personal_access_token: Optional[str] = None
    bearer_token: Optional[str] = None

    def organization_url(self, organization: Optional[str] = None) -> str:
        """Resolve the collection URL requests are issued against.

        A custom server URL (on-premises or a proxy) wins; otherwise the
        hosted service URL for the organization is used.
        """
        if self.url:
            return self.url.rstrip('/')
        org = organization or self.organization
        if not org:
            return DEFAULT_SERVICE_URL
        return f"{DEFAULT_SERVICE_URL}/{org}"

    def authorization_header(self) -> str:
        """Build the Authorization header value for the configured credential.

        Falls back to a token from DefaultAzureCredential when neither a PAT
        nor a bearer token is configured.

        Raises:
            InvalidCredentialsError: If no token can be obtained
        """
        if self.personal_access_token:
            encoded = base64.b64encode(
                f":{self.personal_access_token}".encode('utf-8')
            ).decode('ascii')
            return f"Basic {encoded}"
        if self.bearer_token:
            return f"Bearer {self.bearer_token}"
        return f"Bearer {acquire_default_token(self.organization_url())}"


def acquire_default_token(endpoint: str) -> str:
    """Obtain an Entra ID access token for Azure DevOps.

    Args:
        endpoint: Collection URL, used in the error message

    Raises:
        InvalidCredentialsError: If no credential in the chain yields a token
    """
    try:
        token = DefaultAzureCredential().get_token(AZURE_DEVOPS_SCOPE)
    except AzureError as e:
        raise InvalidCredentialsError(
            endpoint=endpoint,
            reason=f"Failed to initialize Azure DevOps client: {e}",
        ) from e
    return token.token


def validate_url(value: str, field_name: str = ENV_URL) -> str:
    """Check that a configured service URL is an absolute http(s) URL."""
    parsed = urlparse(value)
    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        raise ConfigError(f"'{value}' is not a valid URL", config_field=field_name)
    return value


class Authenticator:
    """Loads and validates Azure DevOps settings from environment variables.

    Settings are loaded from a .env file using python-dotenv. Credentials are
    never cached on disk or logged.

    Recognised environment variables (all optional, but non-empty when set):
        AZURE_DEVOPS_URL: Custom collection URL (defaults to dev.azure.com/<org>)
        AZURE_DEVOPS_ORGANIZATION: Default organization
        AZURE_DEVOPS_PROJECT: Default project
        AZURE_DEVOPS_PAT: Personal access token
        AZURE_DEVOPS_TOKEN: Pre-issued bearer token (used when no PAT is set)

    With neither a PAT nor a token set, requests authenticate with a token
    from DefaultAzureCredential.

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
        >>> print(f"Connecting to {creds.organization_url()}")
    """

    def __init__(self, defaults: Optional[dict] = None):
        """Initialize the authenticator by loading environment variables from .env file.

        Args:
            defaults: Optional values (organization, project, url) used when
                the matching environment variable is unset
        """
        load_dotenv()
        self._defaults = defaults or {}

    def _read(self, env_name: str, default_key: Optional[str] = None) -> Optional[str]:
        value = os.getenv(env_name)
        if value is None and default_key:
            value = self._defaults.get(default_key)
        if value is None:
            return None
        if not str(value).strip():
            raise ConfigError("value must not be empty", config_field=env_name)
        return str(value).strip()

    def get_credentials(self) -> Credentials:
        """Get Azure DevOps settings from environment variables.

        Returns:
            Credentials: A named tuple with organization, project, url and tokens

        Raises:
            ConfigError: If a value is set but empty, or the URL is malformed
        """
        url = self._read(ENV_URL, 'url')
        if url:
            validate_url(url)

        return Credentials(
            organization=self._read(ENV_ORGANIZATION, 'organization'),
            project=self._read(ENV_PROJECT, 'project'),
            url=url,
            personal_access_token=self._read(ENV_PAT),
            bearer_token=self._read(ENV_TOKEN),
        )
