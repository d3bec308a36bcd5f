"""Protocol interfaces for all airdrop_claim components."""

from airdrop_claim.interfaces.backend import ClaimBackend
from airdrop_claim.interfaces.cache import SessionCache
from airdrop_claim.interfaces.listener import StateListener

__all__ = ["ClaimBackend", "SessionCache", "StateListener"]
