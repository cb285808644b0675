"""Wiki search passthrough.

Maps a search text onto the Azure DevOps wiki search endpoint and the
response hits onto SearchResult objects. No ranking or query rewriting
happens here.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from ..models.wiki import SearchResult
from ..page_tree.normalizer import title_from_path
from ..wiki_client.api_wrapper import APIWrapper
from ..wiki_client.errors import MalformedResponseError

logger = logging.getLogger(__name__)

DEFAULT_TOP = 25


def _hit_snippets(result: Dict[str, Any]) -> str:
    snippets = []
    for hit in result.get('hits') or []:
        snippets.extend(hit.get('highlights') or [])
    return " ... ".join(snippets)


def map_search_result(result: Dict[str, Any]) -> SearchResult:
    """Convert one raw search result into a SearchResult."""
    path = result.get('path') or ""
    wiki = result.get('wiki') or {}
    project = result.get('project') or {}
    title = title_from_path(path) or result.get('fileName') or ""
    if title.endswith('.md'):
        title = title[:-3]
    return SearchResult(
        title=title,
        path=path,
        url=wiki.get('url') or "",
        content=_hit_snippets(result),
        project=project.get('name') or "",
        wiki=wiki.get('name') or wiki.get('id') or "",
    )


class WikiSearch:
    """Runs wiki search queries.

    Example:
        >>> search = WikiSearch(APIWrapper(Authenticator()))
        >>> for hit in search.search("deployment"):
        ...     print(hit.title, hit.path)
    """

    def __init__(self, api: APIWrapper):
        self._api = api

    def search(
        self,
        search_text: str,
        organization: Optional[str] = None,
        project: Optional[str] = None,
        wiki_id: Optional[str] = None,
        top: int = DEFAULT_TOP,
    ) -> List[SearchResult]:
        """Search wiki content.

        Args:
            search_text: Query string
            organization: Organization override
            project: Project override
            wiki_id: Restrict results to one wiki
            top: Maximum number of results

        Returns:
            List of SearchResult in service order

        Raises:
            UpstreamStatusError: On a non-success status
            TransportError: If the service is unreachable
            MalformedResponseError: If the body is not valid JSON
        """
        operation = "search wiki"
        body: Dict[str, Any] = {
            'searchText': search_text,
            '$skip': 0,
            '$top': top,
            'includeFacets': False,
        }
        if wiki_id:
            body['filters'] = {'Wiki': [wiki_id]}

        response = self._api.search(organization, project, body)
        self._api.check_status(response, operation)

        text = response.text or ""
        if not text.strip():
            return []
        try:
            payload = json.loads(text)
        except ValueError as e:
            raise MalformedResponseError(operation, f"invalid JSON in response ({e})") from e

        raw_results = payload.get('results') if isinstance(payload, dict) else None
        results = [
            map_search_result(result)
            for result in raw_results or []
            if isinstance(result, dict)
        ]
        logger.debug(f"Search '{search_text}' returned {len(results)} result(s)")
        return results
