"""Shared fixtures for airdrop_claim tests."""

from __future__ import annotations

import pytest
from pytest_metadata.plugin import metadata_key

from airdrop_claim.controller import ClaimFlowController
from airdrop_claim.models.config import ClientConfig
from airdrop_claim.storage.session_cache import MemorySessionCache

from tests.mocks import MockBackend, RecordingListener

SUBJECT = "0x1234abcd"
TOKEN = "abc123"
BASE_URL = "http://claim.test"


def pytest_configure(config):
    """Add client info to the HTML report Environment table."""
    meta = config.stash.setdefault(metadata_key, {})
    meta["Claim API"] = BASE_URL
    meta["Claim Subject"] = SUBJECT


def make_test_config(**overrides) -> ClientConfig:
    """Build a ClientConfig suitable for testing."""
    defaults = dict(
        base_url=BASE_URL,
        timeout=5.0,
        db_path=":memory:",
        session_id="test",
    )
    defaults.update(overrides)
    return ClientConfig(**defaults)


@pytest.fixture
def test_config():
    return make_test_config()


@pytest.fixture
def mock_backend():
    return MockBackend()


@pytest.fixture
def cache():
    return MemorySessionCache()


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def controller(mock_backend, cache, listener):
    """Controller for SUBJECT with TOKEN, wired to mocks."""
    ctrl = ClaimFlowController(mock_backend, SUBJECT, TOKEN, cache=cache)
    ctrl.add_listener(listener)
    return ctrl


@pytest.fixture
async def identity_ready(controller):
    """Controller whose identity step already succeeded."""
    result = await controller.start()
    assert result.success
    return controller


@pytest.fixture
async def account_ready(identity_ready):
    """Controller whose account step already succeeded."""
    result = await identity_ready.resolve_account()
    assert result.success
    return identity_ready
