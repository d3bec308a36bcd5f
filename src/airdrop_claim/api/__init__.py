"""API components - view building for presentation layers."""

from airdrop_claim.api.view import build_claim_view

__all__ = ["build_claim_view"]
