"""
Pytest configuration and shared fixtures for paramstore tests.

This module provides the sample parameter document and fixtures that
write it to a temporary file and open a store on it.
"""

import json

import pytest

from paramstore import ParameterStore, StoreSettings


SAMPLE_DOCUMENT = (
    "{\n"
    "    \"system\": {\n"
    "        \"audio\": {\n"
    "            \"volume\": \"50\",\n"
    "            \"mute\": \"false\"\n"
    "        },\n"
    "        \"display\": {\n"
    "            \"brightness\": \"75\"\n"
    "        }\n"
    "    }\n"
    "}"
)


# =============================================================================
# File Fixtures
# =============================================================================

@pytest.fixture
def params_file(tmp_path):
    """Write the sample parameter document and return its path."""
    path = tmp_path / "params.json"
    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def mixed_file(tmp_path):
    """A document with non-string values alongside string leaves."""
    path = tmp_path / "mixed.json"
    path.write_text(json.dumps({
        "name": "device-01",
        "limits": {"max": 10, "enabled": True, "tags": ["a", "b"], "note": None},
        "network": {"wifi": {"ssid": "home", "band": "5GHz"}},
        "unicode": {"greeting": "héllo"},
    }), encoding="utf-8")
    return path


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Settings with fsync disabled to keep tests fast."""
    return StoreSettings(fsync=False)


@pytest.fixture
def store(params_file, settings):
    """An open store on the sample document."""
    s = ParameterStore.open(params_file, settings)
    yield s
    s.close()


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "concurrency: marks multi-threaded tests"
    )
