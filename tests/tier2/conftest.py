"""Tier 2 fixtures: local aiohttp server standing in for the claim API."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
from aiohttp import web

from tests.conftest import TOKEN
from tests.factories import make_profile_payload
from tests.mocks import ADDRESS

SERVER_PORT = 9310
VALID_TOKEN = TOKEN


@dataclass
class FakeClaimAPI:
    """Scriptable state behind the fake API routes."""

    profile_status: int = 200
    account_status: int = 200
    airdrop_status: int = 200
    account: str = ADDRESS
    requests: list[str] = field(default_factory=list)
    airdrops: list[tuple[str, str]] = field(default_factory=list)


@pytest.fixture
async def claim_api():
    """Local HTTP server serving the three /api/auth/twitter routes.

    Yields (base_url, FakeClaimAPI).
    """
    state = FakeClaimAPI()

    async def handle_success(request):
        state.requests.append(request.path_qs)
        if state.profile_status != 200:
            return web.json_response({"error": "auth failed"}, status=state.profile_status)
        if request.query.get("token") != VALID_TOKEN:
            return web.json_response({"error": "invalid token"}, status=401)
        return web.json_response({"profile": make_profile_payload()})

    async def handle_account(request):
        state.requests.append(request.path_qs)
        if state.account_status != 200:
            return web.json_response({"error": "lookup failed"}, status=state.account_status)
        return web.json_response({"account": state.account})

    async def handle_airdrop(request):
        state.requests.append(request.path_qs)
        if state.airdrop_status != 200:
            return web.Response(status=state.airdrop_status, text="transfer failed")
        state.airdrops.append(
            (request.match_info["token_id"], request.match_info["address"])
        )
        return web.json_response({"success": True, "hash": "0xabc"})

    app = web.Application()
    app.router.add_get("/api/auth/twitter/success", handle_success)
    app.router.add_get("/api/auth/twitter/getAccountAddress", handle_account)
    app.router.add_get(
        "/api/auth/twitter/sendAirdrop/{token_id}/{address}", handle_airdrop,
    )

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", SERVER_PORT)
    await site.start()
    yield f"http://127.0.0.1:{SERVER_PORT}", state
    await runner.cleanup()
