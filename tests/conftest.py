"""Pytest fixtures for managed-alias tests."""

import pytest

from managed_alias.store import AliasStore


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep tests independent of the caller's store and style settings."""
    monkeypatch.delenv("MANAGED_ALIAS_STORE", raising=False)
    monkeypatch.delenv("MANAGED_ALIAS_STYLE", raising=False)


@pytest.fixture
def store_path(tmp_path):
    """Path of a store file that does not exist yet."""
    return tmp_path / ".managed-alias-store"


@pytest.fixture
def store(store_path) -> AliasStore:
    """Empty alias store in a temporary directory."""
    return AliasStore(store_path)


@pytest.fixture
def project_dir(tmp_path):
    """An existing directory to bind path aliases to."""
    path = tmp_path / "project"
    path.mkdir()
    return path
