"""MCP server exposing the Azure DevOps wiki tools over stdio.

Tool handlers validate their arguments, run the blocking wiki call in a
worker thread so the event loop stays free, and return the result as
indented JSON text. Wiki errors become tool errors carrying the message.
"""

import asyncio
import json
import logging
from typing import Any, Callable, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from src.page_operations.service import WikiService
from src.wiki_client.errors import WikiError
from .provider import WikiClientProvider
from .tool_requests import (
    GetPageRequest,
    ListWikisRequest,
    PageTreeRequest,
    SearchRequest,
    UpdatePageRequest,
)

logger = logging.getLogger(__name__)

SERVER_NAME = "azure-devops-wiki-mcp"


def _to_json(result: Any) -> str:
    if isinstance(result, list):
        data = [item.to_dict() for item in result]
    else:
        data = result.to_dict()
    return json.dumps(data, indent=2, ensure_ascii=False)


class WikiTools:
    """Tool handlers bound to one client provider."""

    def __init__(self, provider: WikiClientProvider):
        self._provider = provider

    async def _run(self, tool: str, call: Callable[[WikiService], Any]) -> str:
        try:
            service = self._provider.get()
            result = await asyncio.to_thread(call, service)
        except WikiError as e:
            logger.error(f"Tool {tool} failed: {e}")
            raise ToolError(str(e)) from e
        return _to_json(result)

    def _validate(self, factory: Callable[[dict], Any], args: dict) -> Any:
        try:
            return factory(args)
        except WikiError as e:
            raise ToolError(str(e)) from e

    async def search_wiki(
        self,
        searchText: str,
        organization: Optional[str] = None,
        project: Optional[str] = None,
        wikiId: Optional[str] = None,
        top: Optional[int] = None,
    ) -> str:
        """Search across wiki content using the Azure DevOps Search API."""
        request = self._validate(SearchRequest.from_args, {
            'searchText': searchText, 'organization': organization,
            'project': project, 'wikiId': wikiId, 'top': top,
        })
        return await self._run("search_wiki", lambda service: service.search(
            request.search_text, request.organization, request.project,
            request.wiki_id, request.top,
        ))

    async def wiki_get_page_tree(
        self,
        wikiId: str,
        organization: Optional[str] = None,
        project: Optional[str] = None,
        depth: Optional[int] = None,
    ) -> str:
        """Retrieve the hierarchical page structure of a wiki."""
        request = self._validate(PageTreeRequest.from_args, {
            'wikiId': wikiId, 'organization': organization,
            'project': project, 'depth': depth,
        })
        return await self._run("wiki_get_page_tree", lambda service: service.get_page_tree(
            request.wiki_id, request.organization, request.project, request.depth,
        ))

    async def wiki_get_page(
        self,
        wikiId: str,
        path: str,
        organization: Optional[str] = None,
        project: Optional[str] = None,
    ) -> str:
        """Get the content and version of a wiki page."""
        request = self._validate(GetPageRequest.from_args, {
            'wikiId': wikiId, 'path': path,
            'organization': organization, 'project': project,
        })
        return await self._run("wiki_get_page", lambda service: service.get_page(
            request.wiki_id, request.path, request.organization, request.project,
        ))

    async def wiki_update_page(
        self,
        wikiId: str,
        path: str,
        content: str,
        organization: Optional[str] = None,
        project: Optional[str] = None,
    ) -> str:
        """Create a wiki page, or replace its content if it already exists."""
        request = self._validate(UpdatePageRequest.from_args, {
            'wikiId': wikiId, 'path': path, 'content': content,
            'organization': organization, 'project': project,
        })
        return await self._run("wiki_update_page", lambda service: service.upsert_page(
            request.wiki_id, request.path, request.content,
            request.organization, request.project,
        ))

    async def wiki_list_wikis(
        self,
        organization: Optional[str] = None,
        project: Optional[str] = None,
    ) -> str:
        """List the wikis of a project."""
        request = self._validate(ListWikisRequest.from_args, {
            'organization': organization, 'project': project,
        })
        return await self._run("wiki_list_wikis", lambda service: service.list_wikis(
            request.organization, request.project,
        ))


TOOL_NAMES = (
    'search_wiki',
    'wiki_get_page_tree',
    'wiki_get_page',
    'wiki_update_page',
    'wiki_list_wikis',
)


def create_server(provider: WikiClientProvider) -> FastMCP:
    """Build the FastMCP server with every wiki tool registered."""
    mcp = FastMCP(SERVER_NAME)
    tools = WikiTools(provider)
    for name in TOOL_NAMES:
        mcp.tool(getattr(tools, name), name=name)
    return mcp


def run_server(provider: WikiClientProvider) -> None:
    """Serve the wiki tools on stdio until the client disconnects."""
    mcp = create_server(provider)
    logger.info("Azure DevOps Wiki MCP server running on stdio")
    try:
        mcp.run()
    finally:
        provider.close()
