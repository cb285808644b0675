"""Listing of the wikis available in a project."""

import json
import logging
from typing import Any, Dict, List, Optional

from ..models.wiki import WikiDescriptor
from ..wiki_client.api_wrapper import APIWrapper
from ..wiki_client.errors import MalformedResponseError

logger = logging.getLogger(__name__)


def map_wiki(raw: Dict[str, Any]) -> WikiDescriptor:
    wiki_type = raw.get('type')
    return WikiDescriptor(
        id=str(raw.get('id') or ""),
        name=raw.get('name') or "",
        type=str(wiki_type) if wiki_type is not None else "",
        url=raw.get('url') or "",
        repository_id=str(raw.get('repositoryId') or ""),
        mapped_path=raw.get('mappedPath') or "",
    )


def list_wikis(
    api: APIWrapper,
    organization: Optional[str] = None,
    project: Optional[str] = None,
) -> List[WikiDescriptor]:
    """Return the wikis of a project.

    Raises:
        UpstreamStatusError: On a non-success status
        TransportError: If the service is unreachable
        MalformedResponseError: If the body is not valid JSON
    """
    operation = "list wikis"
    response = api.list_wikis(organization, project)
    api.check_status(response, operation)

    text = response.text or ""
    if not text.strip():
        return []
    try:
        payload = json.loads(text)
    except ValueError as e:
        raise MalformedResponseError(operation, f"invalid JSON in response ({e})") from e

    entries = payload.get('value') if isinstance(payload, dict) else payload
    return [map_wiki(entry) for entry in entries or [] if isinstance(entry, dict)]
