"""Shared pytest configuration and fixtures for the hangar test suite.

This module provides:
- Path setup so tests import the package from src/
- Config and log directories redirected to a throwaway location
- An in-memory keyring and common target fixtures
"""
import os
import sys
import tempfile
from pathlib import Path

import pytest
from keyring.errors import PasswordDeleteError


# Add src/ to path so test modules can import the hangar package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

# Modules create their config directory at import time, keep it out of $HOME
_sandbox = Path(tempfile.mkdtemp(prefix="hangar-tests-"))
os.environ["XDG_CONFIG_HOME"] = str(_sandbox / "config")
os.environ["XDG_DATA_HOME"] = str(_sandbox / "data")
os.environ["PYTHON_KEYRING_BACKEND"] = "keyring.backends.null.Keyring"


class FakeKeyring:
    """Dict-backed stand-in for the system keyring"""

    def __init__(self):
        self.passwords = {}

    def set_password(self, service, username, password):
        self.passwords[(service, username)] = password

    def get_password(self, service, username):
        return self.passwords.get((service, username))

    def delete_password(self, service, username):
        if (service, username) not in self.passwords:
            raise PasswordDeleteError("not found")
        del self.passwords[(service, username)]


@pytest.fixture(autouse=True)
def fake_keyring(mocker):
    """Keep every test away from the real system keyring."""
    fake = FakeKeyring()
    mocker.patch("hangar.utils.target_store.keyring", fake)
    return fake


@pytest.fixture
def target():
    """Provide a logged-in target."""
    from hangar.utils.target_store import Target

    return Target(
        name="ci",
        api_url="https://ci.example.com",
        team_name="main",
        insecure=False,
        token="test-token",
    )


@pytest.fixture
def pipeline_config():
    """Provide a small pipeline configuration with credentials in it."""
    return {
        "resources": [
            {
                "name": "repo",
                "type": "git",
                "source": {"uri": "git@example.com:app.git", "private_key": "KEY-MATERIAL"},
            }
        ],
        "jobs": [{"name": "unit", "plan": [{"get": "repo"}]}],
    }


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (fast, isolated)"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (slower)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow (deselect with '-m \"not slow\"')"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests based on their location."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
