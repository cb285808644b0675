"""Lazily-initialized wiki service shared by every tool call."""

import logging
from typing import Callable, Optional

from src.cli.config import ConfigLoader
from src.cli.models import ServerSettings
from src.page_operations.service import WikiService
from src.wiki_client.api_wrapper import APIWrapper
from src.wiki_client.auth import Authenticator

logger = logging.getLogger(__name__)


def build_service(settings: ServerSettings) -> WikiService:
    """Create a WikiService (and its HTTP wrapper) from settings."""
    authenticator = Authenticator(defaults=settings.connection_defaults())
    api = APIWrapper(
        authenticator,
        api_version=settings.api_version,
        default_branch=settings.default_branch,
        timeout=settings.timeout,
    )
    return WikiService(api)


class WikiClientProvider:
    """Owns the one WikiService of a server process.

    The service is built on the first call to ``get()`` and reused
    afterwards, so the HTTP session is shared across tool calls. A factory
    can be injected to run tools against a fake service in tests.

    ``get()`` is called on the event loop thread. The service itself runs on
    worker threads (``asyncio.to_thread``), so concurrent tool calls share
    one ``requests.Session``. Its headers are not changed after creation and
    the urllib3 connection pool behind it is thread-safe.
    """

    def __init__(
        self,
        config_path: str = ConfigLoader.DEFAULT_CONFIG_PATH,
        factory: Optional[Callable[[], WikiService]] = None,
    ):
        self._config_path = config_path
        self._factory = factory
        self._service: Optional[WikiService] = None

    def get(self) -> WikiService:
        """Return the shared service, creating it on first use.

        Raises:
            ConfigError: If the settings file or environment is invalid
        """
        if self._service is None:
            if self._factory is not None:
                self._service = self._factory()
            else:
                settings = ConfigLoader.load(self._config_path)
                self._service = build_service(settings)
            logger.info("Azure DevOps wiki client initialized")
        return self._service

    def close(self) -> None:
        if self._service is not None:
            self._service.close()
            self._service = None
