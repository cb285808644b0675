"""Wiki page data models.

PageNode, PageContent and UpsertOutcome are snapshots of remote state built
fresh for every call. ``to_dict()`` gives the plain structure returned to
the calling agent.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class PageNode:
    """One page in a reconstructed wiki hierarchy.

    Attributes:
        id: Upstream page id as a string ("" when absent)
        path: Slash-delimited page path (e.g. "/Home/Overview")
        title: Last non-empty path segment
        order: Sort key among siblings
        storage_path: Backing git item path (e.g. "/Home/Overview.md")
        children: Child nodes, sorted ascending by order
    """
    id: str
    path: str
    title: str
    order: int = 0
    storage_path: str = ""
    children: List['PageNode'] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'path': self.path,
            'title': self.title,
            'order': self.order,
            'storagePath': self.storage_path,
            'children': [child.to_dict() for child in self.children],
        }


@dataclass
class PageContent:
    """A fully loaded page.

    Attributes:
        id: Upstream page id as a string
        path: Page path
        title: Last non-empty path segment
        content: Raw Markdown body
        version: ETag of the loaded revision ("" if the service sent none)
        order: Sort key among siblings
        storage_path: Backing git item path
        is_parent_page: True when the page has sub-pages
    """
    id: str
    path: str
    title: str
    content: str
    version: str = ""
    order: int = 0
    storage_path: str = ""
    is_parent_page: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'path': self.path,
            'title': self.title,
            'content': self.content,
            'version': self.version,
            'order': self.order,
            'storagePath': self.storage_path,
            'isParentPage': self.is_parent_page,
        }


@dataclass
class UpsertOutcome:
    """Result of a create-or-update page write.

    ``action`` records what the probe decided ("update" when the page was
    found, "create" otherwise), independent of the status the write got.
    """
    id: str
    path: str
    title: str
    version: str = ""
    order: int = 0
    storage_path: str = ""
    is_parent_page: bool = False
    action: str = "create"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'path': self.path,
            'title': self.title,
            'version': self.version,
            'order': self.order,
            'storagePath': self.storage_path,
            'isParentPage': self.is_parent_page,
            'action': self.action,
        }
