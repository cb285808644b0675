"""Root pytest configuration for all tests."""

import pytest

from src.wiki_client.auth import (
    ENV_ORGANIZATION,
    ENV_PAT,
    ENV_PROJECT,
    ENV_TOKEN,
    ENV_URL,
)


@pytest.fixture(autouse=True)
def clean_azure_env(monkeypatch):
    """Keep the developer's AZURE_DEVOPS_* variables out of every test."""
    for name in (ENV_URL, ENV_ORGANIZATION, ENV_PROJECT, ENV_PAT, ENV_TOKEN):
        monkeypatch.delenv(name, raising=False)
