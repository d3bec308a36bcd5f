"""HTTP claim backend - talks to the Twitter auth API routes over httpx."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from airdrop_claim.errors import (
    AccountFetchError,
    ProfileFetchError,
    TransferDispatchError,
)
from airdrop_claim.models.profile import SocialProfile
from airdrop_claim.models.records import TransferReceipt

log = logging.getLogger(__name__)

PROFILE_PATH = "/api/auth/twitter/success"
ACCOUNT_PATH = "/api/auth/twitter/getAccountAddress"
AIRDROP_PATH = "/api/auth/twitter/sendAirdrop"


class HttpClaimBackend:
    """Implements the ClaimBackend protocol against the web app's API routes.

    All three calls are plain GETs:
    - success?token=...: token -> {"profile": {...}}
    - getAccountAddress?userId=...: user id -> {"account": "0x..."}
    - sendAirdrop/<subject>/<address>: any 2xx means accepted
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        kwargs: dict = {"base_url": self._base_url, "transport": transport}
        if timeout is not None:
            kwargs["timeout"] = timeout
        self._client = httpx.AsyncClient(**kwargs)

    async def close(self) -> None:
        await self._client.aclose()

    async def fetch_profile(self, token: str) -> SocialProfile:
        try:
            resp = await self._client.get(PROFILE_PATH, params={"token": token})
        except httpx.HTTPError as exc:
            log.warning("Profile request failed: %s", exc)
            raise ProfileFetchError() from exc

        if not resp.is_success:
            log.warning("Profile request returned HTTP %d", resp.status_code)
            raise ProfileFetchError()

        try:
            profile = SocialProfile.from_payload(resp.json()["profile"])
        except (ValueError, KeyError, TypeError) as exc:
            log.warning("Malformed profile response: %s", exc)
            raise ProfileFetchError() from exc

        log.info("Fetched profile for @%s (id=%s)", profile.username, profile.id)
        return profile

    async def fetch_account(self, user_id: str) -> str:
        try:
            resp = await self._client.get(ACCOUNT_PATH, params={"userId": user_id})
        except httpx.HTTPError as exc:
            log.warning("Account request failed for %s: %s", user_id, exc)
            raise AccountFetchError() from exc

        if not resp.is_success:
            log.warning(
                "Account request for %s returned HTTP %d", user_id, resp.status_code,
            )
            raise AccountFetchError()

        try:
            account = resp.json()["account"]
        except (ValueError, KeyError, TypeError) as exc:
            log.warning("Malformed account response for %s: %s", user_id, exc)
            raise AccountFetchError() from exc
        if not isinstance(account, str) or not account:
            log.warning("Account response for %s has no address: %r", user_id, account)
            raise AccountFetchError()

        log.info("Resolved smart account %s for user %s", account, user_id)
        return account

    async def send_airdrop(self, subject: str, address: str) -> TransferReceipt:
        path = f"{AIRDROP_PATH}/{quote(subject, safe='')}/{quote(address, safe='')}"
        try:
            resp = await self._client.get(path)
        except httpx.HTTPError as exc:
            log.warning("Airdrop request failed for %s: %s", address, exc)
            raise TransferDispatchError() from exc

        if not resp.is_success:
            log.warning(
                "Airdrop request for token %s -> %s returned HTTP %d",
                subject, address, resp.status_code,
            )
            raise TransferDispatchError()

        log.info("Airdrop accepted: token %s -> %s (HTTP %d)", subject, address, resp.status_code)
        return TransferReceipt(subject=subject, address=address, status_code=resp.status_code)
