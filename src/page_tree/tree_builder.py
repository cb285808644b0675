"""Page hierarchy reconstruction from Azure DevOps page listings.

The pages endpoint answers in one of three shapes depending on the
recursion level and the wiki:

    {"value": [page, page, ...]}        list of root pages
    {"id": 1, "path": "/", "subPages": [...]}   a single root with a subtree
    {"id": 1, "path": "/Home"}          a single root without children

The shape is resolved once at the top level into a list of raw root
objects; below that every level is just "the subPages list, or nothing".
"""

import json
import logging
from typing import Any, Iterable, List, Mapping, Optional

from ..models.wiki_page import PageNode
from ..wiki_client.api_wrapper import APIWrapper, is_success
from ..wiki_client.errors import MalformedResponseError
from .normalizer import normalize_page_fields

logger = logging.getLogger(__name__)

OPERATION = "get page tree"


def _root_entries(payload: Any) -> List[Mapping[str, Any]]:
    """Resolve the response shape to the list of raw root page objects."""
    if isinstance(payload, list):
        return payload
    if not isinstance(payload, dict):
        raise MalformedResponseError(
            OPERATION, f"unexpected payload type {type(payload).__name__}"
        )
    if isinstance(payload.get('value'), list):
        return payload['value']
    # With or without subPages, the object itself is the only root
    return [payload]


def _build_nodes(raw_pages: Iterable[Any]) -> List[PageNode]:
    nodes = []
    for raw in raw_pages:
        if not isinstance(raw, dict):
            raise MalformedResponseError(OPERATION, "page entry is not an object")
        fields = normalize_page_fields(raw)
        sub_pages = raw.get('subPages')
        nodes.append(PageNode(
            id=fields['id'],
            path=raw.get('path') or "",
            title=fields['title'],
            order=fields['order'],
            storage_path=fields['storage_path'],
            children=_build_nodes(sub_pages if isinstance(sub_pages, list) else []),
        ))
    # sorted() is stable: equal orders keep their source position
    return sorted(nodes, key=lambda node: node.order)


def build_page_tree(payload: Any) -> List[PageNode]:
    """Build the ordered list of root PageNodes from a decoded payload.

    Args:
        payload: Decoded JSON body of a pages listing

    Returns:
        Root nodes sorted by order, each with recursively sorted children

    Raises:
        MalformedResponseError: If the payload is neither an object nor a list
    """
    return _build_nodes(_root_entries(payload))


def prune_tree(nodes: List[PageNode], depth: int) -> List[PageNode]:
    """Return a copy of the tree keeping at most ``depth`` levels."""
    if depth <= 1:
        return [
            PageNode(node.id, node.path, node.title, node.order, node.storage_path, [])
            for node in nodes
        ]
    return [
        PageNode(
            node.id, node.path, node.title, node.order, node.storage_path,
            prune_tree(node.children, depth - 1),
        )
        for node in nodes
    ]


class PageTreeBuilder:
    """Fetches a wiki's page listing and rebuilds its hierarchy.

    A missing wiki, an error status or an empty body all produce an empty
    list: a wiki without pages is not an error. Only a transport failure
    or an unparseable body fails the call.

    Example:
        >>> builder = PageTreeBuilder(APIWrapper(Authenticator()))
        >>> roots = builder.get_page_tree("MyProject.wiki", depth=3)
        >>> print([root.title for root in roots])
    """

    def __init__(self, api: APIWrapper):
        """Initialize the tree builder.

        Args:
            api: APIWrapper used to issue the listing request
        """
        self._api = api

    def get_page_tree(
        self,
        wiki_id: str,
        organization: Optional[str] = None,
        project: Optional[str] = None,
        depth: Optional[int] = None,
    ) -> List[PageNode]:
        """Fetch and reconstruct the page tree of a wiki.

        Args:
            wiki_id: Wiki identifier or name
            organization: Organization override (config default otherwise)
            project: Project override (config default otherwise)
            depth: Maximum number of levels to return; None returns the
                first level only

        Returns:
            Ordered list of root PageNodes

        Raises:
            NotConfiguredError: If organization/project cannot be resolved
            TransportError: If the service is unreachable
            MalformedResponseError: If the body is not valid JSON or holds a
                page entry that is not an object
        """
        recursion_level = "Full" if depth else "OneLevel"
        response = self._api.list_pages(organization, project, wiki_id, recursion_level)

        if not is_success(response):
            logger.info(
                f"Page listing for wiki {wiki_id} returned status "
                f"{getattr(response, 'status_code', None)}; treating as empty"
            )
            return []

        body = response.text or ""
        if not body.strip():
            logger.info(f"Page listing for wiki {wiki_id} returned an empty body")
            return []

        try:
            payload = json.loads(body)
        except ValueError as e:
            raise MalformedResponseError(OPERATION, f"invalid JSON in response ({e})") from e

        roots = build_page_tree(payload)
        if depth:
            roots = prune_tree(roots, depth)

        logger.debug(f"Reconstructed {len(roots)} root page(s) for wiki {wiki_id}")
        return roots
