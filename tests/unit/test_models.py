"""Unit tests for models module."""

from src.models import PageContent, PageNode, SearchResult, UpsertOutcome, WikiDescriptor


class TestPageNode:
    """Test cases for PageNode."""

    def test_defaults(self):
        """Order, storage path and children have neutral defaults."""
        node = PageNode(id="1", path="/A", title="A")
        assert node.order == 0
        assert node.storage_path == ""
        assert node.children == []

    def test_children_lists_are_independent(self):
        """Each node gets its own children list."""
        first = PageNode(id="1", path="/A", title="A")
        second = PageNode(id="2", path="/B", title="B")
        first.children.append(second)
        assert second.children == []

    def test_to_dict_is_recursive(self):
        """Children are serialized recursively."""
        child = PageNode(id="2", path="/A/B", title="B", order=1, storage_path="/A/B.md")
        node = PageNode(id="1", path="/A", title="A", children=[child])

        assert node.to_dict() == {
            'id': '1', 'path': '/A', 'title': 'A', 'order': 0, 'storagePath': '',
            'children': [{
                'id': '2', 'path': '/A/B', 'title': 'B', 'order': 1,
                'storagePath': '/A/B.md', 'children': [],
            }],
        }


class TestOtherModels:
    """Test cases for the remaining result models."""

    def test_page_content_to_dict(self):
        """PageContent uses camelCase keys."""
        page = PageContent(id="1", path="/A", title="A", content="x", version='"v"', is_parent_page=True)
        data = page.to_dict()
        assert data['isParentPage'] is True
        assert data['version'] == '"v"'
        assert data['content'] == "x"

    def test_upsert_outcome_default_action(self):
        """Outcome defaults to a create."""
        assert UpsertOutcome(id="1", path="/A", title="A").action == "create"

    def test_wiki_descriptor_to_dict(self):
        """WikiDescriptor exposes repositoryId and mappedPath."""
        data = WikiDescriptor(id="w", name="n", type="0", repository_id="r").to_dict()
        assert data['repositoryId'] == "r"
        assert data['mappedPath'] == ""

    def test_search_result_to_dict(self):
        """SearchResult serializes every field."""
        result = SearchResult(title="T", path="/T", url="u", content="c", project="p", wiki="w")
        assert result.to_dict() == {
            'title': 'T', 'path': '/T', 'url': 'u', 'content': 'c', 'project': 'p', 'wiki': 'w',
        }
