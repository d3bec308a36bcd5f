"""Backend integrations for the claim flow."""

from airdrop_claim.backend.http import HttpClaimBackend

__all__ = ["HttpClaimBackend"]
