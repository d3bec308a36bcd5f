"""ClaimBackend protocol - the three server endpoints behind a claim."""

from __future__ import annotations

from typing import Protocol

from airdrop_claim.models.profile import SocialProfile
from airdrop_claim.models.records import TransferReceipt


class ClaimBackend(Protocol):
    """Server-side collaborator of the claim controller.

    Implementations raise the matching ``ClaimFlowError`` subclass on failure.
    """

    async def fetch_profile(self, token: str) -> SocialProfile:
        """Exchange a one-time token for the user's profile. Raises ProfileFetchError."""
        ...

    async def fetch_account(self, user_id: str) -> str:
        """Resolve a smart-account address for a user id. Raises AccountFetchError."""
        ...

    async def send_airdrop(self, subject: str, address: str) -> TransferReceipt:
        """Ask the server to transfer tokens to address. Raises TransferDispatchError."""
        ...

    async def close(self) -> None:
        ...
