"""Facade bundling every wiki operation behind one shared API wrapper."""

import logging
from typing import List, Optional

from ..models.wiki import SearchResult, WikiDescriptor
from ..models.wiki_page import PageContent, PageNode, UpsertOutcome
from ..page_tree.tree_builder import PageTreeBuilder
from ..wiki_client.api_wrapper import APIWrapper
from .page_operations import PageOperations
from .search import WikiSearch
from .wiki_listing import list_wikis

logger = logging.getLogger(__name__)


class WikiService:
    """All wiki operations over one APIWrapper (and so one HTTP session).

    Example:
        >>> service = WikiService(APIWrapper(Authenticator()))
        >>> tree = service.get_page_tree("MyProject.wiki")
    """

    def __init__(self, api: APIWrapper):
        self.api = api
        self.tree_builder = PageTreeBuilder(api)
        self.pages = PageOperations(api)
        self.searcher = WikiSearch(api)

    def get_page_tree(
        self,
        wiki_id: str,
        organization: Optional[str] = None,
        project: Optional[str] = None,
        depth: Optional[int] = None,
    ) -> List[PageNode]:
        return self.tree_builder.get_page_tree(wiki_id, organization, project, depth)

    def get_page(
        self,
        wiki_id: str,
        path: str,
        organization: Optional[str] = None,
        project: Optional[str] = None,
    ) -> PageContent:
        return self.pages.get_page(wiki_id, path, organization, project)

    def upsert_page(
        self,
        wiki_id: str,
        path: str,
        content: str,
        organization: Optional[str] = None,
        project: Optional[str] = None,
    ) -> UpsertOutcome:
        return self.pages.upsert_page(wiki_id, path, content, organization, project)

    def search(
        self,
        search_text: str,
        organization: Optional[str] = None,
        project: Optional[str] = None,
        wiki_id: Optional[str] = None,
        top: Optional[int] = None,
    ) -> List[SearchResult]:
        if top is None:
            return self.searcher.search(search_text, organization, project, wiki_id)
        return self.searcher.search(search_text, organization, project, wiki_id, top)

    def list_wikis(
        self,
        organization: Optional[str] = None,
        project: Optional[str] = None,
    ) -> List[WikiDescriptor]:
        return list_wikis(self.api, organization, project)

    def close(self) -> None:
        self.api.close()
