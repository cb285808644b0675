"""Data models for wiki pages, wikis and search results."""

from src.models.wiki_page import PageNode, PageContent, UpsertOutcome
from src.models.wiki import WikiDescriptor, SearchResult

__all__ = ['PageNode', 'PageContent', 'UpsertOutcome', 'WikiDescriptor', 'SearchResult']
