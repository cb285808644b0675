"""Validated argument sets for the wiki tools.

Each request dataclass is built with ``from_args`` from the raw tool
arguments, rejecting empty identifiers and bad depths before any network
call is made.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from src.wiki_client.errors import RequestValidationError


def _optional_text(args: Mapping[str, Any], name: str) -> Optional[str]:
    value = args.get(name)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise RequestValidationError(name, "must be a non-empty string when provided")
    return value.strip()


def _required_text(args: Mapping[str, Any], name: str) -> str:
    value = args.get(name)
    if value is None:
        raise RequestValidationError(name, "is required")
    if not isinstance(value, str) or not value.strip():
        raise RequestValidationError(name, "must be a non-empty string")
    return value.strip()


def _positive_int(args: Mapping[str, Any], name: str) -> Optional[int]:
    value = args.get(name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise RequestValidationError(name, "must be a positive integer")
    return value


@dataclass
class SearchRequest:
    search_text: str
    organization: Optional[str] = None
    project: Optional[str] = None
    wiki_id: Optional[str] = None
    top: Optional[int] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> 'SearchRequest':
        return cls(
            search_text=_required_text(args, 'searchText'),
            organization=_optional_text(args, 'organization'),
            project=_optional_text(args, 'project'),
            wiki_id=_optional_text(args, 'wikiId'),
            top=_positive_int(args, 'top'),
        )


@dataclass
class PageTreeRequest:
    wiki_id: str
    organization: Optional[str] = None
    project: Optional[str] = None
    depth: Optional[int] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> 'PageTreeRequest':
        return cls(
            wiki_id=_required_text(args, 'wikiId'),
            organization=_optional_text(args, 'organization'),
            project=_optional_text(args, 'project'),
            depth=_positive_int(args, 'depth'),
        )


@dataclass
class GetPageRequest:
    wiki_id: str
    path: str
    organization: Optional[str] = None
    project: Optional[str] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> 'GetPageRequest':
        return cls(
            wiki_id=_required_text(args, 'wikiId'),
            path=_required_text(args, 'path'),
            organization=_optional_text(args, 'organization'),
            project=_optional_text(args, 'project'),
        )


@dataclass
class UpdatePageRequest:
    """Arguments of a page write. Empty content is allowed."""
    wiki_id: str
    path: str
    content: str
    organization: Optional[str] = None
    project: Optional[str] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> 'UpdatePageRequest':
        content = args.get('content')
        if not isinstance(content, str):
            raise RequestValidationError('content', "must be a string")
        return cls(
            wiki_id=_required_text(args, 'wikiId'),
            path=_required_text(args, 'path'),
            content=content,
            organization=_optional_text(args, 'organization'),
            project=_optional_text(args, 'project'),
        )


@dataclass
class ListWikisRequest:
    organization: Optional[str] = None
    project: Optional[str] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> 'ListWikisRequest':
        return cls(
            organization=_optional_text(args, 'organization'),
            project=_optional_text(args, 'project'),
        )
