"""Unit tests for mcp_server.tool_requests module."""

import pytest

from src.mcp_server.tool_requests import (
    GetPageRequest,
    ListWikisRequest,
    PageTreeRequest,
    SearchRequest,
    UpdatePageRequest,
)
from src.wiki_client.errors import RequestValidationError


class TestPageTreeRequest:
    """Test cases for PageTreeRequest.from_args."""

    def test_valid_arguments(self):
        """Identifiers are stripped and depth kept."""
        request = PageTreeRequest.from_args({'wikiId': ' wiki1 ', 'organization': 'o', 'depth': 3})
        assert request == PageTreeRequest(wiki_id="wiki1", organization="o", project=None, depth=3)

    def test_missing_wiki_id(self):
        """wikiId is required."""
        with pytest.raises(RequestValidationError) as exc_info:
            PageTreeRequest.from_args({})
        assert exc_info.value.field_name == 'wikiId'
        assert "is required" in str(exc_info.value)

    @pytest.mark.parametrize("depth", [0, -1, True, "2", 1.5])
    def test_invalid_depth(self, depth):
        """Depth must be a positive integer."""
        with pytest.raises(RequestValidationError) as exc_info:
            PageTreeRequest.from_args({'wikiId': 'w', 'depth': depth})
        assert exc_info.value.field_name == 'depth'

    @pytest.mark.parametrize("project", ["", "   ", 5])
    def test_blank_optional_identifier_rejected(self, project):
        """An optional identifier, when given, must be non-empty text."""
        with pytest.raises(RequestValidationError):
            PageTreeRequest.from_args({'wikiId': 'w', 'project': project})


class TestOtherRequests:
    """Test cases for the remaining request types."""

    def test_search_request(self):
        """searchText is required; top is optional."""
        request = SearchRequest.from_args({'searchText': 'deploy', 'wikiId': 'w', 'top': 10})
        assert request.search_text == "deploy"
        assert request.wiki_id == "w"
        assert request.top == 10

        with pytest.raises(RequestValidationError):
            SearchRequest.from_args({'searchText': ' '})

    def test_get_page_request_requires_path(self):
        """path is required."""
        with pytest.raises(RequestValidationError) as exc_info:
            GetPageRequest.from_args({'wikiId': 'w'})
        assert exc_info.value.field_name == 'path'

    def test_update_request_allows_empty_content(self):
        """Empty content is a valid page body."""
        request = UpdatePageRequest.from_args({'wikiId': 'w', 'path': '/A', 'content': ''})
        assert request.content == ""

    def test_update_request_rejects_missing_content(self):
        """Content must be a string."""
        with pytest.raises(RequestValidationError) as exc_info:
            UpdatePageRequest.from_args({'wikiId': 'w', 'path': '/A'})
        assert exc_info.value.field_name == 'content'

    def test_list_wikis_request(self):
        """All arguments are optional."""
        assert ListWikisRequest.from_args({}) == ListWikisRequest()
