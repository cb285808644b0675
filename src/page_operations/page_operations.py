"""Page read and create-or-update operations for Azure DevOps wikis.

This module provides the PageOperations class that reads single pages and
writes page content with optimistic concurrency: an existing page is
replaced conditionally on the ETag observed by a probe, a missing page is
created unconditionally.
"""

import json
import logging
from typing import Any, Dict, Optional, Tuple

import requests

from ..models.wiki_page import PageContent, UpsertOutcome
from ..page_tree.normalizer import normalize_page_fields
from ..wiki_client.api_wrapper import APIWrapper, is_success, sanitize_headers
from ..wiki_client.errors import (
    MalformedResponseError,
    PageNotFoundError,
    UpstreamStatusError,
    WikiError,
)

logger = logging.getLogger(__name__)

# 200 = page replaced, 201 = page created. Both are accepted whatever the
# probe concluded, so a stale probe never blocks a write the service took.
WRITE_SUCCESS_CODES = (200, 201)


def _first_etag(value: Any) -> str:
    """Reduce an eTag field (string or list of strings) to one token."""
    if isinstance(value, list):
        value = value[0] if value else None
    return str(value) if value else ""


def _unwrap_page(payload: Any) -> Any:
    """Return the page object, whether or not it is wrapped in 'page'."""
    if isinstance(payload, dict) and 'page' in payload:
        return payload['page']
    return payload


def _request_body_text(request: Any) -> str:
    body = getattr(request, 'body', None)
    if body is None:
        return ""
    if isinstance(body, bytes):
        return body.decode('utf-8', errors='replace')
    return str(body)


class PageOperations:
    """Read and upsert operations on wiki pages.

    Usage:
        ops = PageOperations(APIWrapper(Authenticator()))

        page = ops.get_page("MyProject.wiki", "/Home")

        outcome = ops.upsert_page(
            wiki_id="MyProject.wiki",
            path="/Home/Release-Notes",
            content="# Release notes",
        )
        print(outcome.action, outcome.version)
    """

    def __init__(self, api: APIWrapper):
        """Initialize PageOperations.

        Args:
            api: APIWrapper used for probe, read and write requests
        """
        self.api = api

    def get_page(
        self,
        wiki_id: str,
        path: str,
        organization: Optional[str] = None,
        project: Optional[str] = None,
    ) -> PageContent:
        """Fetch a page with its Markdown content and ETag.

        Args:
            wiki_id: Wiki identifier or name
            path: Page path (e.g. "/Home/Overview")
            organization: Organization override
            project: Project override

        Returns:
            PageContent of the current revision

        Raises:
            PageNotFoundError: If the page does not exist
            UpstreamStatusError: On any other non-success status
            TransportError: If the service is unreachable
            MalformedResponseError: If the body is empty or invalid
        """
        operation = "get page"
        response = self.api.get_page(organization, project, wiki_id, path)

        if response.status_code == 404:
            raise PageNotFoundError(path, wiki_id)
        self.api.check_status(response, operation)

        payload = self._parse_body(response, operation)
        page = _unwrap_page(payload)
        if not isinstance(page, dict):
            raise MalformedResponseError(operation, f"no page returned for '{path}'")

        fields = normalize_page_fields(page)
        version = response.headers.get('ETag') or _first_etag(
            payload.get('eTag') if isinstance(payload, dict) else None
        )

        logger.debug(f"Fetched page {path} ({len(page.get('content') or '')} chars, version {version})")

        return PageContent(
            id=fields['id'],
            path=page.get('path') or path,
            title=fields['title'],
            content=page.get('content') or "",
            version=version,
            order=fields['order'],
            storage_path=fields['storage_path'],
            is_parent_page=bool(page.get('isParentPage', False)),
        )

    def _probe(
        self,
        wiki_id: str,
        path: str,
        organization: Optional[str],
        project: Optional[str],
    ) -> Tuple[bool, str]:
        """Discover whether a page exists and capture its ETag.

        Any failure, including an unreachable service, reads as "absent":
        the probe only decides between a conditional and a plain write.

        Returns:
            (exists, etag) tuple; etag is "" when none was captured
        """
        try:
            response = self.api.probe_page(organization, project, wiki_id, path)
        except WikiError as e:
            logger.debug(f"Probe for {path} failed ({e}); treating page as absent")
            return False, ""

        if not is_success(response):
            logger.debug(f"Probe for {path} returned {response.status_code}; page absent")
            return False, ""

        etag = response.headers.get('ETag') or ""
        logger.debug(f"Probe for {path}: page exists (ETag {etag or 'none'})")
        return True, etag

    def upsert_page(
        self,
        wiki_id: str,
        path: str,
        content: str,
        organization: Optional[str] = None,
        project: Optional[str] = None,
    ) -> UpsertOutcome:
        """Create a page or replace its content.

        Steps:
        1. Probe the page; a successful probe yields its ETag
        2. PUT {"content": ...} to the default branch, with If-Match only
           when the probe found the page and returned an ETag
        3. Accept 200 or 201; anything else fails with full diagnostics
        4. Normalize the returned page into an UpsertOutcome

        Args:
            wiki_id: Wiki identifier or name
            path: Page path to write
            content: New Markdown content
            organization: Organization override
            project: Project override

        Returns:
            UpsertOutcome describing the written page

        Raises:
            NotConfiguredError: If organization/project cannot be resolved
            UpstreamStatusError: If the write returns a status other than 200/201
            TransportError: If the write cannot reach the service
            MalformedResponseError: If the write response has no page
        """
        # Resolve identifiers before any network call
        self.api.resolve_target(organization, project)

        exists, etag = self._probe(wiki_id, path, organization, project)
        action = "update" if exists else "create"
        operation = f"{action} page '{path}'"

        headers: Dict[str, str] = {}
        if exists and etag:
            headers['If-Match'] = etag

        logger.info(f"Writing page {path} ({action}{', conditional' if headers else ''})")
        response = self.api.write_page(
            organization, project, wiki_id, path,
            body={'content': content},
            headers=headers,
            operation=operation,
        )

        if response.status_code not in WRITE_SUCCESS_CODES:
            raise self._write_failure(response, operation, action, exists, etag)

        payload = self._parse_body(response, operation)
        page = _unwrap_page(payload)
        if not isinstance(page, dict):
            raise MalformedResponseError(operation, f"no page returned for {action} of '{path}'")

        fields = normalize_page_fields(page)
        version = _first_etag(page.get('eTag'))
        if not version and isinstance(payload, dict):
            version = _first_etag(payload.get('eTag'))
        if not version:
            version = response.headers.get('ETag') or ""

        logger.debug(f"Page {path} written with status {response.status_code} (version {version or 'none'})")

        return UpsertOutcome(
            id=fields['id'],
            path=page.get('path') or path,
            title=fields['title'],
            version=version,
            order=fields['order'],
            storage_path=fields['storage_path'],
            is_parent_page=bool(page.get('isParentPage', False)),
            action=action,
        )

    def _write_failure(
        self,
        response: requests.Response,
        operation: str,
        action: str,
        exists: bool,
        etag: str,
    ) -> UpstreamStatusError:
        """Build the diagnostic error for a rejected write.

        The create and update calls share one endpoint, so the payload
        records exactly what was sent and what the probe saw.
        """
        request = getattr(response, 'request', None)
        url = str(getattr(request, 'url', '') or getattr(response, 'url', '') or '')
        details = {
            'Action': action,
            'Request URL': url,
            'Request headers': json.dumps(sanitize_headers(getattr(request, 'headers', None))),
            'Request body': _request_body_text(request),
            'Page existed': exists,
            'ETag': etag or '(none)',
            'Response body': (response.text or '')[:2000],
        }
        logger.error(f"Failed to {operation}: HTTP {response.status_code}")
        return UpstreamStatusError(operation, response.status_code, url, details)

    def _parse_body(self, response: requests.Response, operation: str) -> Any:
        body = response.text or ""
        if not body.strip():
            raise MalformedResponseError(operation, "empty response body")
        try:
            return json.loads(body)
        except ValueError as e:
            raise MalformedResponseError(operation, f"invalid JSON in response ({e})") from e
