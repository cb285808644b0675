"""Page operations for Azure DevOps wikis.

Single-page reads, the probe-then-write upsert protocol, wiki search and
wiki listing, all built on the shared APIWrapper.
"""

from .page_operations import PageOperations
from .search import WikiSearch
from .wiki_listing import list_wikis
from .service import WikiService

__all__ = ['PageOperations', 'WikiSearch', 'list_wikis', 'WikiService']
