"""StateListener protocol - receives controller state changes."""

from __future__ import annotations

from typing import Protocol

from airdrop_claim.models.state import ClaimSnapshot


class StateListener(Protocol):
    def __call__(self, snapshot: ClaimSnapshot) -> None:
        """Called after every state change with the new snapshot."""
        ...
