"""Shared fixtures for backend tests."""

import pytest
from fastapi.testclient import TestClient

from services.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config manager at a per-test directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("PIXORA_DIFF_CONFIG_DIR", str(config_dir))
    ConfigManager.reset_instance()
    yield config_dir
    ConfigManager.reset_instance()


@pytest.fixture
def client():
    """Create a test client with the application lifespan running."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client


class DiffTestHelpers:
    """Helper utilities for diff testing."""

    @staticmethod
    def kinds(entries):
        """Get the kind values of entries in order."""
        return [entry.kind.value for entry in entries]

    @staticmethod
    def original_side(entries):
        """Rebuild the original text from removed and unchanged entries."""
        return '\n'.join(
            entry.content for entry in entries
            if entry.kind.value in ('removed', 'unchanged')
        )

    @staticmethod
    def modified_side(entries):
        """Rebuild the modified text from added and unchanged entries."""
        return '\n'.join(
            entry.content for entry in entries
            if entry.kind.value in ('added', 'unchanged')
        )


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return DiffTestHelpers
