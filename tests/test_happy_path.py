"""Identity -> account -> airdrop happy path."""

from __future__ import annotations

import pytest

from airdrop_claim.controller import CONFIRMATION_MESSAGE, ClaimFlowController
from airdrop_claim.models.config import SESSION_TOKEN_KEY
from airdrop_claim.models.profile import SocialProfile
from airdrop_claim.models.state import ClaimPhase, DisplayState

from tests.conftest import SUBJECT, TOKEN
from tests.factories import make_full_profile_payload, make_profile_payload
from tests.mocks import ADDRESS, MockBackend


# ── Identity resolution ─────────────────────────────────────────


async def test_start_loads_profile(controller, mock_backend):
    """Token present, profile returned → IDENTITY_READY, no error."""
    assert controller.phase == ClaimPhase.INIT

    result = await controller.start()

    assert result.success
    snap = controller.snapshot()
    assert snap.phase == ClaimPhase.IDENTITY_READY
    assert snap.error is None
    assert snap.profile == mock_backend.profile
    assert snap.display_state == DisplayState.PROFILE
    assert mock_backend.profile_calls == [TOKEN]


async def test_profile_mirrors_response_payload(cache):
    """The stored profile keeps the server's profile field untouched."""
    payload = make_full_profile_payload()
    backend = MockBackend(profile=SocialProfile.from_payload(payload))
    ctrl = ClaimFlowController(backend, SUBJECT, TOKEN, cache=cache)

    await ctrl.start()

    profile = ctrl.snapshot().profile
    assert profile is not None
    assert profile.raw == payload
    assert profile.id == "u1"
    assert profile.description == "gm. building onchain."
    assert profile.public_metrics.followers_count == 1200
    assert profile.public_metrics.tweet_count == 5400
    assert profile.verified is True


async def test_token_cached_before_profile_request(controller, mock_backend, cache):
    """The token is written to the session cache before the network call."""
    seen_at_request = []
    original = mock_backend.fetch_profile

    async def _spy(token):
        seen_at_request.append(await cache.get_item(SESSION_TOKEN_KEY))
        return await original(token)

    mock_backend.fetch_profile = _spy
    await controller.start()

    assert seen_at_request == [TOKEN]


async def test_token_cached_even_when_profile_fails(cache):
    backend = MockBackend(profile_ok=False)
    ctrl = ClaimFlowController(backend, SUBJECT, TOKEN, cache=cache)

    await ctrl.start()

    assert ctrl.phase == ClaimPhase.ERROR
    assert await cache.get_item(SESSION_TOKEN_KEY) == TOKEN


# ── Account resolution ──────────────────────────────────────────


async def test_resolve_account_stores_address(identity_ready, mock_backend):
    """IDENTITY_READY with id u1 → ACCOUNT_READY, address verbatim."""
    result = await identity_ready.resolve_account()

    assert result.success
    snap = identity_ready.snapshot()
    assert snap.phase == ClaimPhase.ACCOUNT_READY
    assert snap.address == ADDRESS
    assert mock_backend.account_calls == ["u1"]
    assert not snap.can_resolve_account
    assert snap.can_send_airdrop


# ── Airdrop dispatch ────────────────────────────────────────────


async def test_send_airdrop_completes(account_ready, mock_backend):
    result = await account_ready.send_airdrop()

    assert result.success
    assert result.message == CONFIRMATION_MESSAGE
    snap = account_ready.snapshot()
    assert snap.phase == ClaimPhase.COMPLETE
    assert snap.transfer_sent
    assert snap.receipt.status_code == 200
    assert mock_backend.airdrop_calls == [(SUBJECT, ADDRESS)]
    # Address stays, dispatch stays available
    assert snap.address == ADDRESS
    assert snap.can_send_airdrop


async def test_full_flow_phase_sequence(controller, listener):
    await controller.start()
    await controller.resolve_account()
    await controller.send_airdrop()

    phases = listener.phases
    expected = [
        "resolving_identity",
        "identity_ready",
        "resolving_account",
        "account_ready",
        "dispatching_transfer",
        "complete",
    ]
    # Every expected phase appears, in order
    positions = [phases.index(p) for p in expected]
    assert positions == sorted(positions)
    assert phases[-1] == "complete"


async def test_start_without_cache(mock_backend):
    ctrl = ClaimFlowController(mock_backend, SUBJECT, TOKEN)

    result = await ctrl.start()

    assert result.success
    assert ctrl.phase == ClaimPhase.IDENTITY_READY


@pytest.mark.parametrize("bad", [
    {},
    {"data": {"name": "Alice", "username": "alice"}},
    {"data": {"id": "", "name": "Alice", "username": "alice"}},
    {"data": None},
    {"data": {"id": "u1", "name": None, "username": "alice"}},
    {"data": {"id": "u1", "name": "Alice", "username": 42}},
    {"data": {"id": "u1", "name": "Alice", "username": "alice", "public_metrics": [1, 2, 3]}},
])
def test_profile_from_payload_rejects_malformed(bad):
    with pytest.raises((KeyError, TypeError, ValueError)):
        SocialProfile.from_payload(bad)


def test_profile_from_payload_minimal():
    profile = SocialProfile.from_payload(make_profile_payload())
    assert profile.public_metrics is None
    assert profile.verified is None
    assert profile.description is None
