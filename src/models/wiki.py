"""Wiki listing and search result models."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class WikiDescriptor:
    """A wiki of an Azure DevOps project.

    Attributes:
        id: Wiki identifier (GUID)
        name: Display name (e.g. "MyProject.wiki")
        type: Wiki type as a string (e.g. "projectWiki" or "codeWiki")
        url: REST URL of the wiki
        repository_id: Backing git repository id
        mapped_path: Folder of the repository the wiki is published from
    """
    id: str
    name: str
    type: str
    url: str = ""
    repository_id: str = ""
    mapped_path: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'type': self.type,
            'url': self.url,
            'repositoryId': self.repository_id,
            'mappedPath': self.mapped_path,
        }


@dataclass
class SearchResult:
    """One wiki search hit."""
    title: str
    path: str
    url: str
    content: str
    project: str
    wiki: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'path': self.path,
            'url': self.url,
            'content': self.content,
            'project': self.project,
            'wiki': self.wiki,
        }
